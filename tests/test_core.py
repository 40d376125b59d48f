"""
Core Foundation - Unit Tests

Tests:
1. param_registry() has all required keys
2. to_hex() encoding
3. block-hash primitive lookup and size checks
4. assert_double_run_equal() catches non-determinism
"""

import hashlib
import itertools

import pytest

from blakeout.core import (
    param_registry,
    to_hex,
    block_hash_factory,
    check_output_size,
    ConfigurationError,
    assert_double_run_equal,
    DeterminismError,
    SLOT_SIZE,
    SLOT_COUNT,
    BUFFER_SIZE,
)


def test_param_registry():
    """Verify param_registry has all required keys and correct values."""
    registry = param_registry()

    required_keys = {
        "slot_size", "slot_count", "buffer_size", "digest_size",
        "window_slots", "default_primitive", "primitives", "read_chunk_size"
    }
    assert set(registry.keys()) == required_keys

    assert registry["slot_size"] == 32
    assert registry["slot_count"] == 65536
    assert registry["buffer_size"] == 2_097_152
    assert registry["digest_size"] == 32
    assert registry["window_slots"] == 2
    assert registry["default_primitive"] == "blake2s"


def test_constants_consistent():
    """Module constants agree with the registry."""
    assert SLOT_SIZE * SLOT_COUNT == BUFFER_SIZE == param_registry()["buffer_size"]


@pytest.mark.parametrize("data,expected", [
    (b"", ""),
    (b"\x0a", "0a"),
    (b"\x00\xff\x10", "00ff10"),
    (bytearray(b"\xab\xcd"), "abcd"),
])
def test_to_hex(data, expected):
    """Two lowercase zero-padded digits per byte, no separators."""
    assert to_hex(data) == expected


def test_to_hex_all_bytes():
    """Every byte value encodes to exactly two lowercase digits."""
    encoded = to_hex(bytes(range(256)))
    assert len(encoded) == 512
    assert encoded == encoded.lower()
    assert encoded[:4] == "0001"
    assert encoded[-2:] == "ff"


def test_block_hash_factory_fresh_instances():
    """Each call returns an independent accumulator."""
    factory = block_hash_factory("blake2s")
    a = factory()
    b = factory()
    a.update(b"x")
    assert a.digest() != b.digest()
    assert b.digest() == hashlib.blake2s(digest_size=32).digest()


def test_block_hash_factory_case_insensitive():
    assert block_hash_factory("BLAKE3") is block_hash_factory("blake3")


def test_block_hash_factory_unknown():
    with pytest.raises(ConfigurationError, match="Unknown block-hash primitive"):
        block_hash_factory("sha256")


def test_check_output_size():
    """Correct size passes; wrong size raises."""
    check_output_size(block_hash_factory("blake2s"), 32)
    check_output_size(block_hash_factory("blake3"), 32)

    with pytest.raises(ConfigurationError):
        check_output_size(hashlib.sha512, 32)


def test_double_run_equal_passes():
    assert assert_double_run_equal(lambda: "abcd") == "abcd"


def test_double_run_detects_mismatch():
    """A non-deterministic callable is caught with both digests reported."""
    counter = itertools.count()

    with pytest.raises(DeterminismError) as excinfo:
        assert_double_run_equal(lambda: f"{next(counter):02x}", label="input.bin")

    err = excinfo.value
    assert err.label == "input.bin"
    assert err.hash_a == "00"
    assert err.hash_b == "01"


def test_registry_primitives_track_factories():
    """Registry lists exactly the named primitives the hasher can build."""
    from blakeout.core import PRIMITIVES

    assert param_registry()["primitives"] == sorted(PRIMITIVES)


def test_check_output_size_variable_length_digest():
    """A primitive whose digest() needs a length is a configuration error."""
    with pytest.raises(ConfigurationError, match="cannot finalize"):
        check_output_size(hashlib.shake_128, 32)
