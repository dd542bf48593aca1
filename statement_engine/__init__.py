"""Bank statement text to normalized transaction records."""

from statement_engine.dialect import detect_dialect
from statement_engine.engine import StatementEngine, parse_statement
from statement_engine.errors import StatementEngineError, StatementSourceError
from statement_engine.lines import normalize_lines
from statement_engine.models import Block, Dialect, RawFields, TransactionRecord, TransactionType
from statement_engine.segmenter import segment

__all__ = [
    "Block",
    "Dialect",
    "RawFields",
    "StatementEngine",
    "StatementEngineError",
    "StatementSourceError",
    "TransactionRecord",
    "TransactionType",
    "detect_dialect",
    "normalize_lines",
    "parse_statement",
    "segment",
]
