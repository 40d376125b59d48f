"""
Block-Hash Primitives

A block-hash factory is a zero-argument callable returning a fresh
accumulator with ``update(data)`` and ``digest()``. The scratchpad asks for
a new accumulator for every independent hash and never resets one.

Two named primitives are available:
  - blake2s: hashlib BLAKE2s with a 32-byte digest (default, matches the
    published Blakeout vectors)
  - blake3: BLAKE3 with its default 32-byte output
"""

import hashlib
import logging
from typing import Any, Callable

import blake3

logger = logging.getLogger(__name__)

BlockHashFactory = Callable[[], Any]


def blake2s_256() -> "hashlib.blake2s":
    """Fresh BLAKE2s accumulator with a 32-byte digest."""
    return hashlib.blake2s(digest_size=32)


def blake3_256() -> "blake3.blake3":
    """Fresh BLAKE3 accumulator (32-byte default output)."""
    return blake3.blake3()


PRIMITIVES: dict[str, BlockHashFactory] = {
    "blake2s": blake2s_256,
    "blake3": blake3_256,
}


def block_hash_factory(name: str) -> BlockHashFactory:
    """
    Look up a named block-hash factory.

    Args:
        name: Primitive name (case-insensitive), e.g. "blake2s".

    Returns:
        BlockHashFactory: Callable producing fresh accumulators.

    Raises:
        ConfigurationError: If the name is not a known primitive.
    """
    try:
        return PRIMITIVES[name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown block-hash primitive: '{name}'. "
            f"Available: {', '.join(sorted(PRIMITIVES))}"
        ) from None


def check_output_size(factory: BlockHashFactory, size: int) -> None:
    """
    Verify that a fresh accumulator from ``factory`` finalizes to ``size`` bytes.

    Raises:
        ConfigurationError: If the digest length differs or digest() needs arguments.
    """
    try:
        produced = len(factory().digest())
    except TypeError as e:
        raise ConfigurationError(
            f"Block-hash primitive {factory!r} cannot finalize without arguments: {e}"
        ) from e
    if produced != size:
        raise ConfigurationError(
            f"Block-hash primitive produces {produced}-byte digests, "
            f"expected {size}"
        )
    logger.debug("block-hash primitive %r verified (%d-byte output)", factory, size)


class ConfigurationError(ValueError):
    """Raised when a block-hash primitive cannot be used for the scratchpad."""
    pass
