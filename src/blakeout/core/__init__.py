"""
Core foundation: frozen constants, block-hash primitives, hex encoding,
double-run checks.
"""

from .registry import (
    param_registry,
    RegistryError,
    SLOT_SIZE,
    SLOT_COUNT,
    BUFFER_SIZE,
    DIGEST_SIZE,
    DEFAULT_PRIMITIVE,
    READ_CHUNK_SIZE
)
from .hashing import (
    PRIMITIVES,
    block_hash_factory,
    check_output_size,
    ConfigurationError
)
from .bytesio import to_hex
from .receipts import (
    assert_double_run_equal,
    DeterminismError
)

__all__ = [
    # Registry
    "param_registry",
    "RegistryError",
    "SLOT_SIZE",
    "SLOT_COUNT",
    "BUFFER_SIZE",
    "DIGEST_SIZE",
    "DEFAULT_PRIMITIVE",
    "READ_CHUNK_SIZE",

    # Hashing
    "PRIMITIVES",
    "block_hash_factory",
    "check_output_size",
    "ConfigurationError",

    # Encoding
    "to_hex",

    # Double-run
    "assert_double_run_equal",
    "DeterminismError",
]
