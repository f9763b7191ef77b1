import pytest

from keyseed.keys.generator import generate
from keyseed.schemas import KeyPairRecord


@pytest.fixture
def fixed_record() -> KeyPairRecord:
    return KeyPairRecord(
        timestamp="2024-01-01T00_00_00",
        public_modulus=123,
        public_exponent=65537,
        private_modulus=123,
        private_exponent=456,
    )


@pytest.fixture(scope="session")
def generated_record() -> KeyPairRecord:
    """One real 2048-bit key pair shared across the session."""
    return generate()
