"""
ihexrec Command-Line Tests
==========================

Tests for the ihexrec command-line tool, run through click's CliRunner.
"""

import pytest
from click.testing import CliRunner

from fathex import __version__
from fathex.cli.errors import ExitCode
from fathex.cli.ihexrec import main


@pytest.fixture
def runner() -> CliRunner:
    """CLI runner for invoking ihexrec."""
    return CliRunner()


class TestMain:
    """Tests for the command group."""

    def test_help(self, runner):
        """Test CLI help output."""
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Intel HEX record tool" in result.output

    def test_version(self, runner):
        """Test CLI version output."""
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_verbose_flag(self, runner):
        """Test that the verbose flag is accepted before a command."""
        result = runner.invoke(main, ["-v", "eof"])
        assert result.exit_code == 0
        assert ":00000001FF" in result.output


class TestCreateCommand:
    """Tests for 'ihexrec create'."""

    def test_data_record(self, runner):
        """Test creating a data record with a hex address."""
        result = runner.invoke(main, ["create", "0xF870", "data", "00000000"])
        assert result.exit_code == 0
        assert result.output.strip() == ":04F870000000000094"

    def test_custom_record_by_name(self, runner):
        """Test creating a Block Start record from its type name."""
        result = runner.invoke(main, ["create", "0", "block-start", "9901C0DE"])
        assert result.exit_code == 0
        assert result.output.strip() == ":0400000A9901C0DEBA"

    def test_type_by_number(self, runner):
        """Test giving the record type as a number."""
        result = runner.invoke(main, ["create", "0", "1"])
        assert result.exit_code == 0
        assert result.output.strip() == ":00000001FF"

    def test_address_out_of_range(self, runner):
        """Test that codec errors exit with the record error code."""
        result = runner.invoke(main, ["create", "0x10000", "data"])
        assert result.exit_code == ExitCode.RECORD_ERROR
        assert "address out of range" in result.output

    def test_invalid_type_number(self, runner):
        """Test that unknown type numbers are reported by the codec."""
        result = runner.invoke(main, ["create", "0", "0x0F"])
        assert result.exit_code == ExitCode.RECORD_ERROR
        assert "is not valid" in result.output

    def test_invalid_type_name(self, runner):
        """Test that unknown type names are usage errors."""
        result = runner.invoke(main, ["create", "0", "bogus"])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "Invalid record type" in result.output

    def test_invalid_data(self, runner):
        """Test that bad hex data is a usage error."""
        result = runner.invoke(main, ["create", "0", "data", "ABC"])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_too_much_data(self, runner):
        """Test that more than 16 data bytes are rejected."""
        result = runner.invoke(main, ["create", "0", "data", "00" * 17])
        assert result.exit_code == ExitCode.RECORD_ERROR
        assert "has too many bytes" in result.output


class TestParseCommand:
    """Tests for 'ihexrec parse' and 'ihexrec type'."""

    def test_parse(self, runner):
        """Test showing the fields of a record."""
        result = runner.invoke(main, ["parse", ":04F870000000000094"])
        assert result.exit_code == 0
        assert "Byte count:  4" in result.output
        assert "Address:     0xF870" in result.output
        assert "Record type: Data (0x00)" in result.output
        assert "Data:        00000000" in result.output
        assert "Checksum:    0x94" in result.output

    def test_parse_does_not_verify(self, runner):
        """Test that a bad checksum passes without --verify."""
        result = runner.invoke(main, ["parse", ":04F870000000000095"])
        assert result.exit_code == 0

    def test_verify_ok(self, runner):
        """Test --verify with a correct checksum."""
        result = runner.invoke(main, ["parse", "--verify", ":0400000A9901C0DEBA"])
        assert result.exit_code == 0
        assert "Block Start" in result.output
        assert "Checksum verified" in result.output

    def test_verify_mismatch(self, runner):
        """Test --verify with a wrong checksum."""
        result = runner.invoke(main, ["parse", "--verify", ":04F870000000000095"])
        assert result.exit_code == ExitCode.RECORD_ERROR
        assert "Checksum mismatch" in result.output

    def test_parse_missing_colon(self, runner):
        """Test that malformed records are reported."""
        result = runner.invoke(main, ["parse", "04F870000000000094"])
        assert result.exit_code == ExitCode.RECORD_ERROR
        assert 'does not start with a ":"' in result.output

    def test_type(self, runner):
        """Test showing the record type."""
        result = runner.invoke(main, ["type", ":00000001FF"])
        assert result.exit_code == 0
        assert "End Of File (0x01)" in result.output


class TestBuilderCommands:
    """Tests for the record builder commands."""

    def test_convert(self, runner):
        """Test converting a record to Custom Data."""
        result = runner.invoke(main, ["convert", ":105D3000E060E3802046FFF765FF0123A1881A4653"])
        assert result.exit_code == 0
        assert result.output.strip() == ":105D300DE060E3802046FFF765FF0123A1881A4646"

    def test_eof(self, runner):
        """Test printing the End Of File record."""
        result = runner.invoke(main, ["eof"])
        assert result.exit_code == 0
        assert result.output.strip() == ":00000001FF"

    def test_ela(self, runner):
        """Test creating an Extended Linear Address record."""
        result = runner.invoke(main, ["ela", "0x10000"])
        assert result.exit_code == 0
        assert result.output.strip() == ":020000040001F9"

    def test_block_start(self, runner):
        """Test creating a Block Start record."""
        result = runner.invoke(main, ["block-start", "0x9901"])
        assert result.exit_code == 0
        assert result.output.strip() == ":0400000A9901C0DEBA"

    def test_block_start_out_of_range(self, runner):
        """Test that board IDs over 16 bits are reported."""
        result = runner.invoke(main, ["block-start", "0x10000"])
        assert result.exit_code == ExitCode.RECORD_ERROR
        assert "Board ID out of range" in result.output

    def test_block_end(self, runner):
        """Test creating Block End records."""
        result = runner.invoke(main, ["block-end", "16"])
        assert result.exit_code == 0
        assert result.output.strip() == ":1000000BFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF5"

        result = runner.invoke(main, ["block-end"])
        assert result.exit_code == 0
        assert result.output.strip() == ":0000000BF5"

    def test_block_end_too_large(self, runner):
        """Test that too much padding is reported."""
        result = runner.invoke(main, ["block-end", "17"])
        assert result.exit_code == ExitCode.RECORD_ERROR
        assert "has too many bytes" in result.output

    def test_pad(self, runner):
        """Test creating a Padded Data record."""
        result = runner.invoke(main, ["pad", "2"])
        assert result.exit_code == 0
        assert result.output.strip() == ":0200000CFFFFF4"
