"""
Blakeout Scratchpad Hasher

Turns a 32-byte block hash into a sequential, memory-dependent hash.

Mixing pass (one per update):
  1. slot 0 = H(previous result, if chained || data)
  2. slot i = H(slots i-2 .. i-1), clamped at the buffer start, for i = 1..65535
     in strictly increasing order
  3. result = H(buffer || reversed(buffer)), where the buffer is reversed in place

Chaining: once a digest exists, the next update feeds it before the new data,
so every digest depends on all input since the last reset.
"""

import logging
from typing import Union

from .core.registry import SLOT_SIZE, BUFFER_SIZE, DIGEST_SIZE, DEFAULT_PRIMITIVE, param_registry
from .core.hashing import BlockHashFactory, block_hash_factory, check_output_size
from .core.bytesio import to_hex

logger = logging.getLogger(__name__)


class Blakeout:
    """
    Scratchpad hasher owning a 2 MiB working buffer.

    Not safe for concurrent use; give each thread its own instance.

    Attributes:
        name: "blakeout".
        digest_size: Output size in bytes (32).
        block_size: Slot size in bytes (32).
        output_bits: Output size in bits (256).
    """

    name = "blakeout"
    digest_size = DIGEST_SIZE
    block_size = SLOT_SIZE
    output_bits = DIGEST_SIZE * 8

    def __init__(self, primitive: Union[str, BlockHashFactory] = DEFAULT_PRIMITIVE):
        """
        Initialize a zeroed hasher.

        Args:
            primitive: Block-hash name ("blake2s", "blake3") or a factory
                returning fresh accumulators with update()/digest().

        Raises:
            ConfigurationError: If the primitive is unknown or its digest
                is not 32 bytes.
        """
        if isinstance(primitive, str):
            primitive = block_hash_factory(primitive)
        check_output_size(primitive, SLOT_SIZE)

        registry = param_registry()
        self._window = registry["window_slots"] * registry["slot_size"]

        self._new = primitive
        self._buffer = bytearray(BUFFER_SIZE)
        self._result = b""
        self._chained = False

    @property
    def chained(self) -> bool:
        """True once a digest exists and will prefix the next update."""
        return self._chained

    def update(self, data: bytes) -> None:
        """
        Run one full mixing pass over ``data``.

        Overwrites every slot of the buffer and the result.
        """
        buffer = self._buffer
        new = self._new
        window = self._window

        # Preparing the scratchpad
        seed = new()
        if self._chained:
            seed.update(self._result)
        seed.update(data)
        buffer[0:SLOT_SIZE] = seed.digest()

        with memoryview(buffer) as view:
            for x in range(SLOT_SIZE, BUFFER_SIZE, SLOT_SIZE):
                start = x - window if x >= window else 0
                slot = new()
                slot.update(view[start:x])
                view[x:x + SLOT_SIZE] = slot.digest()

        # Hashing whole buffer one way and another
        fold = new()
        fold.update(buffer)
        buffer.reverse()
        fold.update(buffer)

        self._result = fold.digest()
        self._chained = True

    def result(self) -> bytes:
        """Last digest, or b"" before the first update."""
        return self._result

    def result_hex(self) -> str:
        """Last digest as 64 lowercase hex characters."""
        return to_hex(self._result)

    digest = result
    hexdigest = result_hex

    def reset(self) -> None:
        """
        Start a fresh chain: zero the buffer and clear the chain flag.

        The previous result stays readable until the next update.
        """
        self._buffer[:] = bytes(BUFFER_SIZE)
        self._chained = False
        logger.debug("hasher reset, previous result retained until next update")

    def __repr__(self) -> str:
        return f"<Blakeout chained={self._chained} result={self.result_hex() or None}>"


def blakeout_hash(data: bytes, primitive: Union[str, BlockHashFactory] = DEFAULT_PRIMITIVE) -> str:
    """
    Return the hex Blakeout digest of ``data`` on a fresh hasher.

    Args:
        data: Raw bytes to hash.
        primitive: Block-hash name or factory (default "blake2s").

    Returns:
        str: Hexadecimal digest (64 characters).

    Example:
        >>> blakeout_hash(b"hello world")
        '6cc4bddb52416711be65e4b0201106fda4ceb0de48dfdce7e3a136e490d8586f'
    """
    hasher = Blakeout(primitive)
    hasher.update(data)
    return hasher.result_hex()
