"""Engine wiring the parsing stages together."""

import time
from pathlib import Path

from loguru import logger

from statement_engine.dialect import detect_dialect, resolve_dialect
from statement_engine.extractors import extract
from statement_engine.lines import normalize_lines, strip_preamble
from statement_engine.logging_config import DebugArtifacts
from statement_engine.models import Dialect, TransactionRecord
from statement_engine.normalizer import normalize_record
from statement_engine.segmenter import segment
from statement_engine.sources import read_statement_text


class StatementEngine:
    """Turns statement text into an ordered list of transaction records.

    The engine keeps no state between documents, so one instance may be
    shared by concurrent callers.
    """

    def __init__(self, debug_artifacts: DebugArtifacts | None = None):
        self.debug_artifacts = debug_artifacts or DebugArtifacts()

    @staticmethod
    def _save_artifact(save, name: str, content) -> None:
        """Write a debug artifact, logging a failed write instead of raising."""
        try:
            save(name, content)
        except OSError as e:
            logger.warning(f"Could not save debug artifact {name}: {e}")

    def parse(
        self,
        text: str,
        dialect: Dialect | str | None = None,
        name: str = "statement",
    ) -> list[TransactionRecord]:
        """Extract transactions from statement text.

        Args:
            text: Extracted text of one statement document
            dialect: Optional dialect hint; detected from the text when absent
            name: Base name for debug artifacts

        Returns:
            Records in the order their blocks appear (empty for empty or
            non-string input)
        """
        if not text or not isinstance(text, str):
            logger.warning("No statement text to parse")
            return []

        start = time.perf_counter()
        active = resolve_dialect(dialect) or detect_dialect(text)
        logger.info(f"Parsing {name} as {active.value} dialect")

        if active == Dialect.LEDGER:
            text = strip_preamble(text)

        lines = normalize_lines(text)
        self._save_artifact(self.debug_artifacts.save_text, f"{name}_lines", "\n".join(lines))

        records: list[TransactionRecord] = []
        for block in segment(lines, active):
            try:
                fields = extract(block)
                records.append(normalize_record(fields, block.dialect))
            except Exception as e:
                logger.warning(f"Skipping block {block.start}-{block.end}: {e}")
                continue

        self._save_artifact(
            self.debug_artifacts.save_json,
            f"{name}_transactions",
            [record.model_dump(mode="json", by_alias=True) for record in records],
        )

        elapsed = time.perf_counter() - start
        logger.info(f"[TIMING] Parse: {elapsed:.3f}s")
        logger.info(f"Extracted {len(records)} transactions")
        return records

    def parse_file(self, path: Path, dialect: Dialect | str | None = None) -> list[TransactionRecord]:
        """Read a PDF or text statement and parse it.

        Raises:
            StatementSourceError: If the file cannot be read
        """
        text = read_statement_text(path)
        self._save_artifact(self.debug_artifacts.save_text, f"{path.stem}_raw", text)
        return self.parse(text, dialect=dialect, name=path.stem)


def parse_statement(text: str, dialect: Dialect | str | None = None) -> list[TransactionRecord]:
    """Parse statement text with a default engine."""
    return StatementEngine().parse(text, dialect=dialect)
