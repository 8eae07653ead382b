"""Bank-statement parser.

Statements are ``;``-delimited UTF-8 exports. The first lines hold bank
metadata and the column header; every following non-blank line is
``date;memo;description;amount;balance[;...]``.

Parsing never raises for a bad line. Each line yields either a
``NormalizedTransaction`` or a ``SkippedLine`` so callers can persist
accepted records as they stream in and still report what was dropped.
"""

import io
from typing import BinaryIO, Iterator, Union

from finansync.domain.entities import (
    NormalizedTransaction,
    SkippedLine,
    StatementParseResult,
)
from finansync.domain.errors import ParseError, StatementReadError
from finansync.domain.normalizer import MIN_FIELDS, normalize_fields
from finansync.logging_config import get_logger

logger = get_logger(__name__)

# 4 lines of bank metadata, a blank separator and the column header
PREAMBLE_LINES = 6
FIELD_DELIMITER = ";"
ENCODING = "utf-8-sig"

LineOutcome = Union[NormalizedTransaction, SkippedLine]


def split_fields(line: str) -> list[str]:
    """Split a statement line on the delimiter, dropping trailing empty fields."""
    fields = line.split(FIELD_DELIMITER)
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def iter_lines(stream: BinaryIO) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, text)`` pairs from a binary stream.

    Line numbers are 1-based and count the preamble.

    Raises:
        StatementReadError: If the stream cannot be read or is not UTF-8
    """
    text = io.TextIOWrapper(stream, encoding=ENCODING, newline=None)
    try:
        for line_number, line in enumerate(text, start=1):
            yield line_number, line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as e:
        raise StatementReadError(f"Could not read statement: {e}") from e
    finally:
        # Leave the caller's stream open
        text.detach()


def iter_statement(stream: BinaryIO) -> Iterator[LineOutcome]:
    """Lazily parse a statement, one outcome per candidate line.

    Preamble and blank lines produce nothing. The iterator is single-pass;
    re-reading requires a fresh stream.

    Args:
        stream: Binary stream with the statement contents

    Yields:
        A normalized transaction for each accepted line, or a skipped-line
        diagnostic for a line that was rejected

    Raises:
        StatementReadError: If the stream itself fails
    """
    for line_number, line in iter_lines(stream):
        if line_number <= PREAMBLE_LINES:
            continue
        if not line.strip():
            continue

        fields = split_fields(line)
        if len(fields) < MIN_FIELDS:
            reason = f"Expected at least {MIN_FIELDS} fields, got {len(fields)}"
            logger.warning("Skipping line %d: %s", line_number, reason)
            yield SkippedLine(line_number=line_number, line=line, reason=reason)
            continue

        try:
            yield normalize_fields(fields)
        except ParseError as e:
            logger.warning("Skipping line %d: %s", line_number, e)
            yield SkippedLine(line_number=line_number, line=line, reason=str(e))


def parse_statement(stream: BinaryIO) -> StatementParseResult:
    """Parse a whole statement and split the outcomes.

    Args:
        stream: Binary stream with the statement contents

    Returns:
        Accepted transactions and skipped lines, each in input order
    """
    accepted: list[NormalizedTransaction] = []
    skipped: list[SkippedLine] = []
    for outcome in iter_statement(stream):
        if isinstance(outcome, SkippedLine):
            skipped.append(outcome)
        else:
            accepted.append(outcome)

    logger.info(
        "Parsed statement: %d accepted, %d skipped", len(accepted), len(skipped)
    )
    return StatementParseResult(accepted=accepted, skipped=skipped)
