"""Shared fixtures: sample statement texts for both dialects."""

from __future__ import annotations

import textwrap

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop sinks added by cli.main() so they do not outlive the captured stderr."""
    yield
    logger.remove()


def _dedent(s: str) -> str:
    return textwrap.dedent(s).lstrip("\n").rstrip()


@pytest.fixture
def wallet_text() -> str:
    return _dedent(
        """
        Transaction Statement for 9876543210
        May 01, 2025 - May 31, 2025
        Date Transaction Details Type Amount
        May 19, 2025
        06:20 pm
        DEBIT₹202Mobile recharge
        Transaction ID T12345
        UTR No. U999
        Paid by
        XX1234
        09:05 am
        CREDIT₹1,500.50Received from Jane
        Transaction ID
        T67890
        Credited to
        XX9876
        Page 1 of 2
        May 18, 2025
        11:45 pm
        Debit INR
        75
        Paid to Tea Stall
        Transaction ID T55555
        Page 2 of 2
        This is a system generated statement and does not need a signature.
        """
    )


@pytest.fixture
def ledger_text() -> str:
    return _dedent(
        """
        Account Name Mr. Example Holder
        Address 1 Main Road 560001
        Date Credit BalanceDetails Ref No./Cheque
        1,200.50 12 Jun 2024 TO TRANSFER-UPI/DR/
        415612345678/SHOP 4,300.00
        -750.00 - 13 Jun 2024 BY TRANSFER-NEFT
        SALARY 5,050.00
        Page 1 of 1
        """
    )
