from datetime import date, datetime
from decimal import Decimal

import pytest

from statement_engine import StatementEngine, parse_statement
from statement_engine.logging_config import DebugArtifacts
from statement_engine.models import TransactionType


def _lines(*lines):
    return "\n".join(lines)


def test_wallet_full_fields():
    records = parse_statement(
        _lines(
            "May 19, 2025",
            "06:20 pm",
            "DEBIT₹202Mobile recharge",
            "Transaction ID T12345",
            "UTR No. U999",
            "Paid by",
            "XX1234",
        )
    )

    assert len(records) == 1
    record = records[0]
    assert record.type == TransactionType.DEBIT
    assert record.amount == Decimal("202")
    assert record.details == "Mobile recharge"
    assert record.transaction_id == "T12345"
    assert record.utr == "U999"
    assert record.account == "XX1234"
    assert record.date == datetime(2025, 5, 19, 18, 20)


def test_wallet_split_inr_line_with_amount_on_next_line():
    records = parse_statement(_lines("Nov 3, 2024", "09:00 am", "Credit INR", "500", "Received from Jane"))

    assert len(records) == 1
    assert records[0].type == TransactionType.CREDIT
    assert records[0].amount == Decimal("500")
    assert records[0].details == "Received from Jane"


def test_wallet_type_inferred_from_details():
    records = parse_statement(_lines("Jan 1, 2025", "01:00 pm", "Paid to Shop"))

    assert len(records) == 1
    assert records[0].type == TransactionType.DEBIT
    assert records[0].amount == Decimal(0)
    assert records[0].details == "Paid to Shop"


def test_ledger_debit_with_balance():
    records = parse_statement("1,200.50 12 Jun 2024 TO SHOP 4,300.00", dialect="ledger")

    assert len(records) == 1
    assert records[0].type == TransactionType.DEBIT
    assert records[0].amount == Decimal("1200.50")
    assert records[0].balance == Decimal("4300.00")
    assert records[0].date == date(2024, 6, 12)


def test_ledger_credit_sign_stripped():
    records = parse_statement("-750.00 01 Jan 2025 BY TRANSFER", dialect="ledger")

    assert records[0].type == TransactionType.CREDIT
    assert records[0].amount == Decimal("750.00")


@pytest.mark.parametrize("text", ["", None, 123, b"bytes", ["May 19, 2025"]])
def test_empty_or_garbage_input(text):
    assert parse_statement(text) == []
    assert parse_statement(text, dialect="ledger") == []


def test_noise_only_text_has_no_records():
    assert parse_statement("Transaction Statement\nPage 1 of 1\nrandom words") == []


def test_full_wallet_statement(wallet_text):
    records = parse_statement(wallet_text)

    assert [r.type for r in records] == [TransactionType.DEBIT, TransactionType.CREDIT, TransactionType.DEBIT]
    assert [r.amount for r in records] == [Decimal("202"), Decimal("1500.50"), Decimal("75")]
    assert records[1].details == "Received from Jane"
    assert records[1].transaction_id == "T67890"
    assert records[1].account == "XX9876"
    assert records[2].date == datetime(2025, 5, 18, 23, 45)
    assert records[2].details == "Paid to Tea Stall"


def test_full_ledger_statement(ledger_text):
    records = StatementEngine().parse(ledger_text, dialect="ledger")

    assert len(records) == 2
    assert records[0].details == "TO TRANSFER-UPI/DR/ 415612345678/SHOP"
    assert records[1].type == TransactionType.CREDIT
    assert records[1].balance == Decimal("5050.00")
    assert all(r.amount >= 0 for r in records)


def test_ledger_text_without_hint_uses_wallet_rules(ledger_text):
    assert parse_statement(ledger_text) == []


def test_unknown_hint_falls_back_to_detection():
    records = parse_statement(_lines("Jan 1, 2025", "01:00 pm", "Paid to Shop"), dialect="hdfc")
    assert len(records) == 1


def test_reparsing_raw_gives_same_type_and_amount(wallet_text, ledger_text):
    for record in parse_statement(wallet_text):
        again = parse_statement(record.raw)
        assert len(again) == 1
        assert (again[0].type, again[0].amount) == (record.type, record.amount)

    for record in parse_statement(ledger_text, dialect="ledger"):
        again = parse_statement(record.raw, dialect="ledger")
        assert len(again) == 1
        assert (again[0].type, again[0].amount) == (record.type, record.amount)


def test_records_are_immutable():
    record = parse_statement(_lines("Jan 1, 2025", "01:00 pm", "Paid to Shop"))[0]

    with pytest.raises(Exception):
        record.amount = Decimal("1")


def test_debug_artifacts_written(tmp_path, wallet_text):
    engine = StatementEngine(debug_artifacts=DebugArtifacts(tmp_path / "debug"))
    engine.parse(wallet_text, name="sample")

    assert (tmp_path / "debug" / "sample_lines.txt").read_text(encoding="utf-8").startswith("May 19, 2025")
    assert (tmp_path / "debug" / "sample_transactions.json").exists()


def test_block_failure_is_skipped(monkeypatch, wallet_text):
    import statement_engine.engine as engine_module

    calls = {"n": 0}
    real_extract = engine_module.extract

    def flaky_extract(block):
        calls["n"] += 1
        if calls["n"] == 2:
            raise RuntimeError("boom")
        return real_extract(block)

    monkeypatch.setattr(engine_module, "extract", flaky_extract)
    records = parse_statement(wallet_text)

    assert [r.amount for r in records] == [Decimal("202"), Decimal("75")]


def test_failed_artifact_write_does_not_abort_parse(tmp_path, wallet_text):
    import shutil

    debug_dir = tmp_path / "debug"
    engine = StatementEngine(debug_artifacts=DebugArtifacts(debug_dir))
    shutil.rmtree(debug_dir)

    records = engine.parse(wallet_text, name="gone")

    assert len(records) == 3
    assert not debug_dir.exists()
