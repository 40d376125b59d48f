"""
Blakeout

Sequential, memory-dependent hash built on a 32-byte block hash (BLAKE2s by
default) and a 2 MiB scratchpad.
"""

__version__ = "0.2.0"

from .core import (
    SLOT_SIZE,
    SLOT_COUNT,
    DIGEST_SIZE,
    ConfigurationError,
    to_hex
)
from .hasher import Blakeout, blakeout_hash

__all__ = [
    "Blakeout",
    "blakeout_hash",
    "to_hex",
    "SLOT_SIZE",
    "SLOT_COUNT",
    "DIGEST_SIZE",
    "ConfigurationError",
]
