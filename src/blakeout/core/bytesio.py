"""
Hex Encoding

Lowercase, zero-padded, two digits per byte, no separators and no prefix.
"""


def to_hex(data: bytes) -> str:
    """
    Render a byte sequence as lowercase hex.

    Args:
        data: Any bytes-like object (empty allowed).

    Returns:
        str: Two hex digits per byte in input order ("" for empty input).

    Example:
        >>> to_hex(b"\\x0a\\xff")
        '0aff'
    """
    return bytes(data).hex()
