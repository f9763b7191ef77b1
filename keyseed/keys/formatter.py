"""Render a KeyPairRecord as flat key=value lines."""

import logging
import sys
from typing import TextIO

from keyseed.schemas import Dialect, KeyPairRecord

logger = logging.getLogger(__name__)

# Keys per dialect, in output order:
# public exponent, public modulus, timestamp, private modulus, private exponent
DIALECT_KEYS: dict[Dialect, tuple[str, str, str, str, str]] = {
    Dialect.SPRING: (
        "system.publicKey.exponent",
        "system.publicKey.modulus",
        "system.publicKey.timestamp",
        "system.privateKey.modulus",
        "system.privateKey.exponent",
    ),
    Dialect.UNIX: (
        "PUBLIC_KEY_EXPONENT",
        "PUBLIC_KEY_MODULUS",
        "PUBLIC_KEY_TIMESTAMP",
        "PRIVATE_KEY_MODULUS",
        "PRIVATE_KEY_EXPONENT",
    ),
}


def render(record: KeyPairRecord, dialect: str | None) -> list[str]:
    """Return the output lines for ``dialect`` (case-insensitive).

    Unrecognized or missing dialects yield no lines rather than an error.
    """
    selected = Dialect.parse(dialect)
    keys = DIALECT_KEYS.get(selected) if selected is not None else None
    if keys is None:
        logger.debug("No output for dialect %r", dialect)
        return []

    values = (
        str(record.public_exponent),
        str(record.public_modulus),
        record.timestamp,
        str(record.private_modulus),
        str(record.private_exponent),
    )
    return [f"{key}={value}" for key, value in zip(keys, values)]


def emit(record: KeyPairRecord, dialect: str | None, stream: TextIO | None = None) -> int:
    """Write the rendered lines to ``stream`` (stdout by default). Returns the line count."""
    if stream is None:
        stream = sys.stdout
    lines = render(record, dialect)
    for line in lines:
        stream.write(line + "\n")
    return len(lines)
