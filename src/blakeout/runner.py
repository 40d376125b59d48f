"""
Blakeout Command-Line Runner

Prints "<hex digest>\\t<name>" for each input. Inputs are files named on the
command line, or standard input (named "-") when none are given.

Each input is read completely and hashed as one message with a single
update on a fresh hasher. Inputs that cannot be opened or read are skipped
without output; the exit status stays 0.
"""

import argparse
import json
import logging
import sys
from typing import BinaryIO, Optional

from .core.registry import DEFAULT_PRIMITIVE, READ_CHUNK_SIZE, param_registry
from .core.receipts import assert_double_run_equal, DeterminismError
from .hasher import blakeout_hash

logger = logging.getLogger(__name__)


def read_all(reader: BinaryIO, chunk_size: int = READ_CHUNK_SIZE) -> bytes:
    """
    Read a stream to EOF in chunks and return the concatenation.

    Raises:
        OSError: Propagated from the underlying read.
    """
    chunks = []
    while True:
        chunk = reader.read(chunk_size)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


def process(reader: BinaryIO, name: str, primitive: str = DEFAULT_PRIMITIVE,
            determinism_check: bool = False) -> Optional[str]:
    """
    Hash one input and print its digest line.

    Returns:
        str | None: The hex digest, or None if the input could not be read.

    Raises:
        DeterminismError: If determinism_check is set and two runs disagree.
    """
    try:
        data = read_all(reader)
    except OSError as e:
        logger.debug("skipping %s: %s", name, e)
        return None

    if determinism_check:
        digest = assert_double_run_equal(lambda: blakeout_hash(data, primitive), label=name)
    else:
        digest = blakeout_hash(data, primitive)

    print(f"{digest}\t{name}")
    return digest


def run(paths: list[str], primitive: str = DEFAULT_PRIMITIVE,
        determinism_check: bool = False) -> int:
    """
    Process each path in order, or stdin when ``paths`` is empty.

    Inputs after a determinism mismatch are still processed.

    Returns:
        int: Exit status (0, or 1 if any input failed the determinism check).
    """
    readers = [("-", None)] if not paths else [(path, path) for path in paths]
    mismatches = 0

    for name, path in readers:
        if path is None:
            f = sys.stdin.buffer
        else:
            try:
                f = open(path, "rb")
            except OSError as e:
                logger.debug("skipping %s: %s", path, e)
                continue
        try:
            process(f, name, primitive, determinism_check)
        except DeterminismError as e:
            print(f"Error: {e}", file=sys.stderr)
            mismatches += 1
        finally:
            if path is not None:
                f.close()

    if mismatches:
        # Frozen parameters the mismatching digests were computed under
        print("\nParameters:", file=sys.stderr)
        print(json.dumps(param_registry(), indent=2, sort_keys=True), file=sys.stderr)
        return 1

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="blakeout",
        description="Print Blakeout digests of files (or standard input)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Hash two files
  blakeout README.md setup.cfg

  # Hash standard input
  echo -n "hello world" | blakeout

  # Use BLAKE3 as the block hash
  blakeout --primitive blake3 data.bin
        """
    )

    parser.add_argument(
        "paths",
        nargs="*",
        help="Files to hash. Default: read standard input."
    )

    parser.add_argument(
        "--primitive",
        choices=param_registry()["primitives"],
        default=DEFAULT_PRIMITIVE,
        help=f"Block-hash primitive. Default: {DEFAULT_PRIMITIVE}."
    )

    parser.add_argument(
        "--determinism-check",
        action="store_true",
        help="Hash every input twice on fresh hashers and fail on mismatch. Default: False."
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug messages (including skipped inputs) to stderr."
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr
    )

    return run(args.paths, primitive=args.primitive,
               determinism_check=args.determinism_check)


if __name__ == "__main__":
    sys.exit(main())
