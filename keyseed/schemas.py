"""Pydantic schemas for the generated key pair and the output dialects."""

from enum import Enum

from cryptography.hazmat.primitives.asymmetric import rsa
from pydantic import BaseModel, ConfigDict, PositiveInt, field_validator, model_validator


class Dialect(str, Enum):
    SPRING = "SPRING"
    UNIX = "UNIX"

    @classmethod
    def parse(cls, selector: str | None) -> "Dialect | None":
        """Case-insensitive lookup. Returns None for anything unrecognized."""
        if not selector:
            return None
        try:
            return cls(selector.upper())
        except ValueError:
            return None


class KeyPairRecord(BaseModel):
    """Numeric fields of one RSA key pair plus its generation timestamp."""

    model_config = ConfigDict(frozen=True)

    timestamp: str
    public_modulus: PositiveInt
    public_exponent: PositiveInt
    private_modulus: PositiveInt
    private_exponent: PositiveInt

    @field_validator("timestamp")
    @classmethod
    def _timestamp_is_shell_safe(cls, value: str) -> str:
        if ":" in value:
            raise ValueError("timestamp must not contain ':'")
        return value

    @model_validator(mode="after")
    def _moduli_match(self) -> "KeyPairRecord":
        if self.public_modulus != self.private_modulus:
            raise ValueError("public and private modulus differ")
        return self

    def public_key(self) -> rsa.RSAPublicKey:
        return rsa.RSAPublicNumbers(self.public_exponent, self.public_modulus).public_key()

    def private_key(self) -> rsa.RSAPrivateKey:
        """Rebuild the full private key, recovering p and q from (n, e, d)."""
        n, e, d = self.private_modulus, self.public_exponent, self.private_exponent
        p, q = rsa.rsa_recover_prime_factors(n, e, d)
        return rsa.RSAPrivateNumbers(
            p=p,
            q=q,
            d=d,
            dmp1=rsa.rsa_crt_dmp1(d, p),
            dmq1=rsa.rsa_crt_dmq1(d, q),
            iqmp=rsa.rsa_crt_iqmp(p, q),
            public_numbers=rsa.RSAPublicNumbers(e, n),
        ).private_key()
