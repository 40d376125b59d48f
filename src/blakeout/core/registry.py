"""
Frozen Constants

Slot geometry and defaults for the Blakeout scratchpad.
These are fixed for digest compatibility; nothing here is read from the
environment or from a configuration file.
"""

from .hashing import PRIMITIVES

SLOT_SIZE = 32
SLOT_COUNT = 65536
BUFFER_SIZE = SLOT_SIZE * SLOT_COUNT
DIGEST_SIZE = SLOT_SIZE

DEFAULT_PRIMITIVE = "blake2s"

# CLI reads are concatenated into a single logical message
READ_CHUNK_SIZE = 1024


def param_registry() -> dict:
    """
    Returns a frozen mapping of all global constants used by the hasher.

    Returns:
        dict: Parameter mapping with exact keys and values.

    Raises:
        RegistryError: If the mapping is internally inconsistent.
    """
    registry = {
        "slot_size": SLOT_SIZE,
        "slot_count": SLOT_COUNT,
        "buffer_size": BUFFER_SIZE,
        "digest_size": DIGEST_SIZE,

        # Window of preceding slots each new slot is hashed from
        "window_slots": 2,

        "default_primitive": DEFAULT_PRIMITIVE,
        "primitives": sorted(PRIMITIVES),

        "read_chunk_size": READ_CHUNK_SIZE,
    }

    required_keys = {
        "slot_size", "slot_count", "buffer_size", "digest_size",
        "window_slots", "default_primitive", "primitives", "read_chunk_size"
    }

    actual_keys = set(registry.keys())
    if actual_keys != required_keys:
        missing = required_keys - actual_keys
        extra = actual_keys - required_keys
        raise RegistryError(
            f"param_registry() key mismatch. Missing: {missing}, Extra: {extra}"
        )

    if registry["buffer_size"] != registry["slot_size"] * registry["slot_count"]:
        raise RegistryError(
            f"buffer_size {registry['buffer_size']} is not "
            f"slot_size * slot_count"
        )

    if registry["default_primitive"] not in registry["primitives"]:
        raise RegistryError(
            f"Unknown default primitive: {registry['default_primitive']}"
        )

    return registry


class RegistryError(Exception):
    """Raised when param_registry() has missing or inconsistent keys."""
    pass
