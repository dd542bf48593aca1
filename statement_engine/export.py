"""Write parsed transaction records to CSV or JSON."""

import csv
import json
from pathlib import Path

from loguru import logger

from statement_engine.models import CSV_FIELDNAMES, TransactionRecord


def write_csv(records: list[TransactionRecord], output_path: Path) -> None:
    """Write records to CSV, one row per transaction.

    Args:
        records: Parsed transaction records
        output_path: Path for output CSV file
    """
    if not records:
        logger.warning("No transactions to write")
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDNAMES)
        writer.writeheader()
        for record in records:
            writer.writerow(record.to_csv_row())

    logger.info(f"Wrote {len(records)} transactions to {output_path}")


def write_json(records: list[TransactionRecord], output_path: Path) -> None:
    """Write records to a JSON array, using the camelCase field aliases."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    data = [record.model_dump(mode="json", by_alias=True) for record in records]
    output_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info(f"Wrote {len(records)} transactions to {output_path}")
