"""
Double-Run Checker

Mechanical proof of determinism: compute a digest twice from scratch and
compare the hex strings.
"""

import logging
from typing import Callable

logger = logging.getLogger(__name__)


def assert_double_run_equal(compute_digest: Callable[[], str], label: str = "-") -> str:
    """
    Calls compute_digest() twice and verifies both hex digests are identical.

    Args:
        compute_digest: Function building a fresh hasher and returning its hex digest.
        label: Name of the input being checked (for error messages).

    Returns:
        str: The agreed hex digest.

    Raises:
        DeterminismError: If the two runs differ.

    Example:
        >>> assert_double_run_equal(lambda: "00")
        '00'
    """
    hash_a = compute_digest()
    hash_b = compute_digest()

    if hash_a != hash_b:
        raise DeterminismError(label=label, hash_a=hash_a, hash_b=hash_b)

    logger.debug("double run agreed for %s: %s", label, hash_a)
    return hash_a


class DeterminismError(Exception):
    """Raised when double-run produces different digests."""

    def __init__(self, label: str, hash_a: str, hash_b: str):
        self.label = label
        self.hash_a = hash_a
        self.hash_b = hash_b

        msg = (
            f"Double-run hash mismatch for '{label}'.\n"
            f"  Hash A: {hash_a}\n"
            f"  Hash B: {hash_b}"
        )
        super().__init__(msg)
