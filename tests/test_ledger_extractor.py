from statement_engine.extractors import extract
from statement_engine.extractors.ledger import extract_ledger
from statement_engine.models import Block, Dialect


def _block(*lines):
    return Block(dialect=Dialect.LEDGER, start=0, end=len(lines) - 1, lines=list(lines))


def test_debit_row_with_balance():
    fields = extract_ledger(_block("1,200.50 12 Jun 2024 TO TRANSFER-UPI/DR/", "415612345678/SHOP 4,300.00"))

    assert fields.type_text == "DEBIT"
    assert fields.amount_text == "1,200.50"
    assert fields.date_text == "12 Jun 2024"
    assert fields.balance_text == "4,300.00"
    assert fields.details == "TO TRANSFER-UPI/DR/ 415612345678/SHOP"
    assert fields.raw == "1,200.50 12 Jun 2024 TO TRANSFER-UPI/DR/ 415612345678/SHOP 4,300.00"


def test_negative_amount_is_credit_and_unsigned():
    fields = extract_ledger(_block("-750.00 01 Jan 2025 BY TRANSFER 9,000.00"))

    assert fields.type_text == "CREDIT"
    assert fields.amount_text == "750.00"
    assert fields.balance_text == "9,000.00"
    assert fields.details == "BY TRANSFER"


def test_separator_between_amount_and_date_and_trailing_separator_stripped():
    fields = extract_ledger(_block("250.00 - 05 Feb 2025 ATM WDL -"))

    assert fields.amount_text == "250.00"
    assert fields.date_text == "05 Feb 2025"
    assert fields.balance_text is None
    assert fields.details == "ATM WDL"


def test_trailing_reference_number_is_taken_as_balance():
    # No column positions to go on: the last decimal token wins even when
    # it belongs to the description.
    fields = extract_ledger(_block("99.00 03 Mar 2025 CHQ 123.45 4,000.00 REF 77.10"))

    assert fields.balance_text == "77.10"
    assert fields.details == "CHQ 123.45 4,000.00 REF"


def test_block_without_anchor_keeps_raw_only():
    fields = extract_ledger(_block("opening balance 100.00"))

    assert fields.type_text is None
    assert fields.amount_text is None
    assert fields.raw == "opening balance 100.00"


def test_extract_dispatches_on_block_dialect():
    fields = extract(_block("10.00 01 Jan 2025 A 20.00"))
    assert fields.balance_text == "20.00"


def test_balance_cut_is_the_matched_token_not_a_later_lookalike():
    # "1,7.25" contains "7.25" but is not a decimal token itself
    fields = extract_ledger(_block("10.00 01 Jan 2025 FEE 7.25 CODE 1,7.25"))

    assert fields.balance_text == "7.25"
    assert fields.details == "FEE CODE 1,7.25"
