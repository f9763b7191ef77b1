"""RSA key pair generation and decomposition into plain integers."""

import logging
from datetime import datetime, timezone

from cryptography.exceptions import InternalError, UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import rsa

from keyseed.schemas import KeyPairRecord

logger = logging.getLogger(__name__)

KEY_SIZE = 2048
PUBLIC_EXPONENT = 65537


class KeyGenerationError(RuntimeError):
    """The RSA primitive or the secure random source is unavailable."""


def create_key_timestamp(now: datetime | None = None) -> str:
    """UTC time as YYYY-MM-DDTHH_MM_SS, safe as a filename fragment.

    A naive ``now`` is taken as UTC; an aware one is converted.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    timestamp = now.replace(microsecond=0, tzinfo=None).isoformat()
    return timestamp.replace(":", "_")


def generate() -> KeyPairRecord:
    """Generate a fresh 2048-bit RSA key pair and return its numeric fields.

    Raises KeyGenerationError if the key cannot be produced. Not retried.
    """
    try:
        private_key = rsa.generate_private_key(
            public_exponent=PUBLIC_EXPONENT,
            key_size=KEY_SIZE,
        )
        private_numbers = private_key.private_numbers()
    except (UnsupportedAlgorithm, InternalError, ValueError) as e:
        raise KeyGenerationError(f"RSA key generation failed ({type(e).__name__}): {e}") from e

    public_numbers = private_numbers.public_numbers
    record = KeyPairRecord(
        timestamp=create_key_timestamp(),
        public_modulus=public_numbers.n,
        public_exponent=public_numbers.e,
        private_modulus=public_numbers.n,
        private_exponent=private_numbers.d,
    )
    logger.info(
        "Generated %d-bit RSA key pair (timestamp=%s)",
        record.public_modulus.bit_length(),
        record.timestamp,
    )
    return record
