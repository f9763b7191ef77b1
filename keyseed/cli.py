"""Generate an RSA key pair and print its numbers as key=value lines.

Usage:
    keyseed SPRING
    keyseed UNIX
    python generate_keys.py spring

The dialect is case-insensitive. Only the first argument is read; any other
value, or none, generates the key and prints nothing.
"""

import logging
import sys

from keyseed.config import get_settings
from keyseed.keys.formatter import emit
from keyseed.keys.generator import KeyGenerationError, generate

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=get_settings().log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def read_dialect(argv: list[str]) -> str:
    """First argument taken verbatim, even when it looks like an option."""
    return argv[0] if argv else ""


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    configure_logging()
    dialect = read_dialect(argv)
    if len(argv) > 1:
        logger.debug("Ignoring %d extra arguments", len(argv) - 1)

    try:
        record = generate()
    except KeyGenerationError as e:
        logger.error("Key generation failed: %s", e)
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    written = emit(record, dialect)
    logger.debug("Wrote %d lines for dialect %r", written, dialect)
    return 0


if __name__ == "__main__":
    sys.exit(main())
