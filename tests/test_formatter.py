"""Tests for key=value rendering."""

import io

import pytest

from keyseed.keys.formatter import emit, render

SPRING_LINES = [
    "system.publicKey.exponent=65537",
    "system.publicKey.modulus=123",
    "system.publicKey.timestamp=2024-01-01T00_00_00",
    "system.privateKey.modulus=123",
    "system.privateKey.exponent=456",
]

UNIX_LINES = [
    "PUBLIC_KEY_EXPONENT=65537",
    "PUBLIC_KEY_MODULUS=123",
    "PUBLIC_KEY_TIMESTAMP=2024-01-01T00_00_00",
    "PRIVATE_KEY_MODULUS=123",
    "PRIVATE_KEY_EXPONENT=456",
]


class TestRender:
    """Test dialect dispatch."""

    @pytest.mark.parametrize("dialect", ["SPRING", "spring", "Spring"])
    def test_spring(self, fixed_record, dialect):
        assert render(fixed_record, dialect) == SPRING_LINES

    @pytest.mark.parametrize("dialect", ["UNIX", "unix", "uNiX"])
    def test_unix(self, fixed_record, dialect):
        assert render(fixed_record, dialect) == UNIX_LINES

    @pytest.mark.parametrize("dialect", ["xml", "", None, " unix", "SPRINGS", "properties"])
    def test_unrecognized_yields_nothing(self, fixed_record, dialect):
        assert render(fixed_record, dialect) == []

    def test_idempotent(self, fixed_record):
        assert render(fixed_record, "SPRING") == render(fixed_record, "SPRING")

    def test_large_integers_in_decimal(self, generated_record):
        lines = render(generated_record, "UNIX")
        assert lines[1] == f"PUBLIC_KEY_MODULUS={generated_record.public_modulus}"
        value = lines[1].split("=", 1)[1]
        assert value.isdigit()
        assert not value.startswith("0")
        assert int(value) == generated_record.public_modulus


class TestEmit:
    """Test writing rendered lines to a stream."""

    def test_writes_lines(self, fixed_record):
        stream = io.StringIO()
        assert emit(fixed_record, "spring", stream) == 5
        assert stream.getvalue() == "\n".join(SPRING_LINES) + "\n"

    def test_unrecognized_writes_nothing(self, fixed_record):
        stream = io.StringIO()
        assert emit(fixed_record, "xml", stream) == 0
        assert stream.getvalue() == ""

    def test_defaults_to_stdout(self, fixed_record, capsys):
        emit(fixed_record, "UNIX")
        assert capsys.readouterr().out == "\n".join(UNIX_LINES) + "\n"
