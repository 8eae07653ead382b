"""Tests for statement parsing and line normalization."""

import io
import logging
from datetime import date
from decimal import Decimal

import pytest

from finansync.domain.entities import NormalizedTransaction, SkippedLine, TransactionType
from finansync.domain.errors import ParseError, StatementReadError, ValidationError
from finansync.domain.normalizer import (
    build_description,
    derive_transaction_type,
    normalize_fields,
)
from finansync.domain.statement import (
    PREAMBLE_LINES,
    iter_statement,
    parse_statement,
    split_fields,
)


class TestNormalizer:
    """Tests for field normalization."""

    def test_normalize_example_line(self):
        """Test normalizing a typical income line."""
        txn = normalize_fields(["25/12/2023", "PIX RECEBIDO", "Salario", "2.500,00", "10000,00"])

        assert txn == NormalizedTransaction(
            description="PIX RECEBIDO - Salario",
            amount=Decimal("2500.00"),
            date=date(2023, 12, 25),
            type=TransactionType.INCOME,
        )
        assert txn.id is None

    def test_normalize_expense(self):
        """Test a negative amount becomes an expense."""
        txn = normalize_fields(["26/12/2023", "COMPRA", "Mercado", "-350,75", "9649,25"])
        assert txn.amount == Decimal("-350.75")
        assert txn.type == TransactionType.EXPENSE

    def test_normalize_ignores_extra_fields(self):
        """Test fields after the balance are ignored."""
        txn = normalize_fields(["25/12/2023", "A", "B", "1,00", "2,00", "extra", "more"])
        assert txn.description == "A - B"
        assert txn.amount == Decimal("1.00")

    def test_normalize_trims_description_parts(self):
        """Test memo and description are trimmed before joining."""
        assert build_description("  PIX  ", " Salario ") == "PIX - Salario"

    def test_derive_transaction_type(self):
        """Test zero counts as income."""
        assert derive_transaction_type(Decimal("0")) == TransactionType.INCOME
        assert derive_transaction_type(Decimal("0.01")) == TransactionType.INCOME
        assert derive_transaction_type(Decimal("-0.01")) == TransactionType.EXPENSE

    def test_normalize_too_few_fields(self):
        """Test a short field list is rejected."""
        with pytest.raises(ParseError, match="Expected at least 5 fields, got 3"):
            normalize_fields(["25/12/2023", "PIX", "Salario"])

    def test_normalize_bad_date(self):
        """Test an unparseable date is a parse error."""
        with pytest.raises(ParseError, match="Could not parse date"):
            normalize_fields(["2023-12-25", "PIX", "Salario", "1,00", "0,00"])

    def test_normalize_bad_amount(self):
        """Test an unparseable amount is a parse error."""
        with pytest.raises(ParseError, match="Could not parse amount"):
            normalize_fields(["25/12/2023", "PIX", "Salario", "abc", "0,00"])

    def test_parse_error_is_validation_error(self):
        """Test parse errors keep the ValueError hierarchy."""
        assert issubclass(ParseError, ValidationError)
        assert issubclass(ParseError, ValueError)


class TestSplitFields:
    """Tests for delimiter handling."""

    def test_split_fields(self):
        assert split_fields("a;b;c") == ["a", "b", "c"]

    def test_split_fields_drops_trailing_empty(self):
        """Test trailing empty fields do not count."""
        assert split_fields("a;b;c;;") == ["a", "b", "c"]

    def test_split_fields_keeps_inner_empty(self):
        assert split_fields("a;;c") == ["a", "", "c"]


class TestParseStatement:
    """Tests for whole-statement parsing."""

    def test_parse_example_statement(self, statement_bytes):
        """Test a single valid line after the preamble."""
        data = statement_bytes("25/12/2023;PIX RECEBIDO;Salario;2.500,00;10000,00")

        result = parse_statement(io.BytesIO(data))

        assert result.skipped == []
        assert len(result.accepted) == 1
        txn = result.accepted[0]
        assert txn.description == "PIX RECEBIDO - Salario"
        assert txn.amount == Decimal("2500.00")
        assert txn.date == date(2023, 12, 25)
        assert txn.type == TransactionType.INCOME
        assert txn.id is None

    def test_parse_preserves_order(self, statement_bytes):
        """Test accepted transactions come out in line order."""
        data = statement_bytes(
            "03/01/2024;C;Third;-3,00;0",
            "01/01/2024;A;First;1,00;0",
            "02/01/2024;B;Second;2,00;0",
        )

        result = parse_statement(io.BytesIO(data))

        assert [t.description for t in result.accepted] == ["C - Third", "A - First", "B - Second"]

    def test_preamble_is_never_parsed(self):
        """Test valid-looking lines inside the preamble are ignored."""
        preamble = "".join(
            f"0{i}/01/2024;PREAMBLE;Line {i};1,00;0\n" for i in range(1, PREAMBLE_LINES + 1)
        )
        data = (preamble + "10/01/2024;REAL;Line;5,00;0\n").encode("utf-8")

        result = parse_statement(io.BytesIO(data))

        assert [t.description for t in result.accepted] == ["REAL - Line"]

    def test_blank_lines_are_ignored(self, statement_bytes):
        """Test blank lines produce neither transactions nor diagnostics."""
        data = statement_bytes("", "25/12/2023;A;B;1,00;0", "   ", "", "26/12/2023;C;D;2,00;0")

        result = parse_statement(io.BytesIO(data))

        assert len(result.accepted) == 2
        assert result.skipped == []

    def test_short_line_is_skipped(self, statement_bytes, caplog):
        """Test a line with too few fields is reported and parsing continues."""
        data = statement_bytes(
            "25/12/2023;PIX;Salario",
            "26/12/2023;COMPRA;Mercado;-10,00;0",
        )

        with caplog.at_level(logging.WARNING, logger="finansync"):
            result = parse_statement(io.BytesIO(data))

        assert len(result.accepted) == 1
        assert result.accepted[0].description == "COMPRA - Mercado"
        assert result.skipped == [
            SkippedLine(
                line_number=PREAMBLE_LINES + 1,
                line="25/12/2023;PIX;Salario",
                reason="Expected at least 5 fields, got 3",
            )
        ]
        assert "Skipping line 7" in caplog.text

    def test_trailing_empty_fields_do_not_count(self, statement_bytes):
        """Test a line padded with empty trailing fields is still short."""
        data = statement_bytes("25/12/2023;PIX;Salario;1,00;")

        result = parse_statement(io.BytesIO(data))

        assert result.accepted == []
        assert result.skipped[0].reason == "Expected at least 5 fields, got 4"

    def test_bad_line_does_not_abort_scan(self, statement_bytes):
        """Test date and amount failures skip only their own line."""
        data = statement_bytes(
            "2023-12-25;PIX;Bad date;1,00;0",
            "25/12/2023;PIX;Bad amount;um real;0",
            "27/12/2023;PIX;Good;3,00;0",
        )

        result = parse_statement(io.BytesIO(data))

        assert [t.description for t in result.accepted] == ["PIX - Good"]
        assert [s.line_number for s in result.skipped] == [7, 8]
        assert "Could not parse date" in result.skipped[0].reason
        assert "Could not parse amount" in result.skipped[1].reason

    def test_zero_amount_is_income(self, statement_bytes):
        data = statement_bytes("27/12/2023;TARIFA;Isenta;0,00;0")

        result = parse_statement(io.BytesIO(data))

        assert result.accepted[0].type == TransactionType.INCOME

    def test_windows_line_endings(self, statement_bytes):
        """Test CRLF statements parse the same as LF ones."""
        data = statement_bytes("25/12/2023;PIX;Salario;1,00;0").replace(b"\n", b"\r\n")

        result = parse_statement(io.BytesIO(data))

        assert len(result.accepted) == 1
        assert result.accepted[0].description == "PIX - Salario"

    def test_byte_order_mark_is_tolerated(self, statement_bytes):
        data = b"\xef\xbb\xbf" + statement_bytes("25/12/2023;PIX;Salario;1,00;0")

        result = parse_statement(io.BytesIO(data))

        assert len(result.accepted) == 1

    def test_utf8_descriptions(self, statement_bytes):
        data = statement_bytes("25/12/2023;PAGAMENTO;Açougue São João;-80,00;0")

        result = parse_statement(io.BytesIO(data))

        assert result.accepted[0].description == "PAGAMENTO - Açougue São João"

    def test_empty_statement(self):
        result = parse_statement(io.BytesIO(b""))

        assert result.accepted == []
        assert result.skipped == []

    def test_invalid_utf8_raises_read_error(self, statement_bytes):
        """Test undecodable input fails the whole read."""
        data = statement_bytes("25/12/2023;PIX;Salario;1,00;0") + b"\xff\xfe;broken\n"

        with pytest.raises(StatementReadError, match="Could not read statement"):
            parse_statement(io.BytesIO(data))

    def test_caller_stream_stays_open(self, statement_bytes):
        stream = io.BytesIO(statement_bytes("25/12/2023;PIX;Salario;1,00;0"))

        parse_statement(stream)

        assert not stream.closed

    def test_iter_statement_is_lazy(self, statement_bytes):
        """Test outcomes can be consumed one at a time."""
        data = statement_bytes(
            "25/12/2023;PIX;First;1,00;0",
            "short;line",
            "26/12/2023;PIX;Second;2,00;0",
        )

        outcomes = iter_statement(io.BytesIO(data))

        first = next(outcomes)
        assert isinstance(first, NormalizedTransaction)
        assert first.description == "PIX - First"
        second = next(outcomes)
        assert isinstance(second, SkippedLine)
        assert second.line_number == 8
        third = next(outcomes)
        assert third.description == "PIX - Second"
        with pytest.raises(StopIteration):
            next(outcomes)

    def test_parse_fixture_file(self, fixtures_dir):
        """Test the sample statement fixture."""
        with open(fixtures_dir / "statement.csv", "rb") as f:
            result = parse_statement(f)

        assert [t.amount for t in result.accepted] == [
            Decimal("2500.00"),
            Decimal("-350.75"),
            Decimal("0.00"),
            Decimal("-1234.56"),
        ]
        assert [s.line_number for s in result.skipped] == [11, 12]
