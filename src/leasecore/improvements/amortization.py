# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""TI amortization calculations"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Union

import numpy as np
import pandas as pd
from pyxirr import pmt

from ..core.primitives.model import Model
from ..core.primitives.settings import EngineSettings
from ..core.primitives.types import PositiveFloat, PositiveInt
from ..lease.record import LeaseRecord

logger = logging.getLogger(__name__)


class AmortizationPaymentRow(Model):
    """One period of a level-payment TI amortization schedule."""

    payment_number: PositiveInt
    payment: float
    principal: float
    interest: float
    balance: float


class ScheduleSummaryRow(Model):
    """Stands in for the payments left out of a truncated schedule."""

    remaining_payments: PositiveInt


class AmortizationSchedule(Model):
    """
    Bounded view of a TI amortization schedule.

    Schedules longer than the truncation threshold carry only the first
    detail periods in ``rows`` plus a ``summary`` row counting the rest.
    An empty schedule (no rows, no payment) means there is nothing to
    amortize; it is not an error.
    """

    payment: float = 0.0
    rows: List[AmortizationPaymentRow] = []
    summary: Optional[ScheduleSummaryRow] = None

    @classmethod
    def empty(cls) -> "AmortizationSchedule":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def is_truncated(self) -> bool:
        return self.summary is not None

    @property
    def entries(self) -> List[Union[AmortizationPaymentRow, ScheduleSummaryRow]]:
        """Detail rows followed by the summary row, in display order."""
        if self.summary is None:
            return list(self.rows)
        return [*self.rows, self.summary]


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage rate (6.0 for 6%) to a monthly decimal rate."""
    return annual_rate_percent / 100 / 12


def is_amortizable(
    principal: Optional[float],
    annual_rate_percent: Optional[float],
    term_months: Optional[int],
) -> bool:
    """
    True when the inputs describe a financed amount worth scheduling.

    A missing rate means no financing terms were entered. An explicit 0% rate
    is interest-free financing and is scheduled.
    """
    return bool(principal) and annual_rate_percent is not None and bool(term_months)


def level_payment(principal: float, annual_rate_percent: float, term_months: int) -> float:
    """
    Constant periodic payment that retires ``principal`` over ``term_months``.

    Uses the annuity formula ``(r * P) / (1 - (1 + r) ** -n)``. At a zero rate
    that formula divides by zero, so the payment is ``P / n`` instead.
    """
    rate = monthly_rate(annual_rate_percent)
    if rate == 0:
        return principal / term_months
    return pmt(rate, term_months, principal) * -1


def iter_payments(
    principal: Optional[float],
    annual_rate_percent: Optional[float],
    term_months: Optional[int],
) -> Iterator[AmortizationPaymentRow]:
    """
    Lazily yield every payment of the schedule.

    Each call returns a fresh generator over the full term, so callers can
    restart it or stop early to pick their own display window. Yields nothing
    when the inputs are not amortizable.
    """
    if not is_amortizable(principal, annual_rate_percent, term_months):
        return

    rate = monthly_rate(annual_rate_percent)
    payment = level_payment(principal, annual_rate_percent, term_months)
    balance = principal

    for i in range(1, term_months + 1):
        interest = balance * rate
        principal_payment = payment - interest
        balance -= principal_payment

        # Absorb floating-point drift in the last period
        reported_balance = 0.0 if i == term_months else max(0.0, balance)

        yield AmortizationPaymentRow(
            payment_number=i,
            payment=payment,
            principal=principal_payment,
            interest=interest,
            balance=reported_balance,
        )


def schedule(
    principal: Optional[float],
    annual_rate_percent: Optional[float],
    term_months: Optional[int],
    settings: Optional[EngineSettings] = None,
) -> AmortizationSchedule:
    """
    Build the reported amortization schedule for a financed TI amount.

    Args:
        principal: Financed TI amount
        annual_rate_percent: Annual interest rate in percent (6.0 for 6%)
        term_months: Number of monthly payments
        settings: Engine settings, defaults to ``EngineSettings()``

    Returns:
        AmortizationSchedule. Terms up to ``truncation_threshold`` months are
        listed in full; longer terms list ``detail_periods`` payments followed
        by a summary row with the number of payments not shown.
    """
    if not is_amortizable(principal, annual_rate_percent, term_months):
        logger.debug("TI amortization inputs incomplete; returning empty schedule")
        return AmortizationSchedule.empty()

    settings = settings or EngineSettings()
    window = settings.amortization
    truncate = term_months > window.truncation_threshold
    shown = window.detail_periods if truncate else term_months

    rows = []
    for row in iter_payments(principal, annual_rate_percent, term_months):
        if row.payment_number > shown:
            break
        rows.append(row)

    summary = ScheduleSummaryRow(remaining_payments=term_months - shown) if truncate else None
    logger.debug(f"Built TI schedule: {len(rows)} of {term_months} payments shown")
    payment = level_payment(principal, annual_rate_percent, term_months)
    return AmortizationSchedule(payment=payment, rows=rows, summary=summary)


class TIAmortization(Model):
    """
    Financing terms for a tenant improvement amount.

    Attributes:
        principal (PositiveFloat): Financed TI amount
        annual_rate_percent (Optional[PositiveFloat]): Annual rate in percent, None if not entered
        term_months (PositiveInt): Number of monthly payments

    Example:
        >>> financing = TIAmortization(principal=120000.0, annual_rate_percent=6.0, term_months=60)
        >>> round(financing.payment, 2)
        2319.94
    """

    principal: PositiveFloat = 0.0
    annual_rate_percent: Optional[PositiveFloat] = None
    term_months: PositiveInt = 0

    @classmethod
    def from_lease(cls, record: LeaseRecord) -> "TIAmortization":
        return cls(
            principal=record.ti_amortized_amount,
            annual_rate_percent=record.ti_amortization_rate,
            term_months=record.ti_amortization_term,
        )

    @property
    def is_amortizable(self) -> bool:
        return is_amortizable(self.principal, self.annual_rate_percent, self.term_months)

    @property
    def payment(self) -> float:
        """Level monthly payment, 0 when there is nothing to amortize."""
        if not self.is_amortizable:
            return 0.0
        return level_payment(self.principal, self.annual_rate_percent, self.term_months)

    def payments(self) -> Iterator[AmortizationPaymentRow]:
        """Fresh lazy iterator over the full schedule."""
        return iter_payments(self.principal, self.annual_rate_percent, self.term_months)

    def schedule(self, settings: Optional[EngineSettings] = None) -> AmortizationSchedule:
        return schedule(self.principal, self.annual_rate_percent, self.term_months, settings)

    def summary(self) -> pd.Series:
        """
        Totals over the full term.

        Returns:
            Series with:
                - Monthly Payment: Level payment
                - Number of Payments: Term in months
                - Total Payments: Sum of all payments
                - Total Principal Paid: Sum of principal
                - Total Interest Paid: Sum of interest
                - Last Payment Amount: Final payment
        """
        rows = list(self.payments())
        payments = np.array([r.payment for r in rows], dtype=float)
        principal_paid = np.array([r.principal for r in rows], dtype=float)
        interest_paid = np.array([r.interest for r in rows], dtype=float)

        return pd.Series(
            {
                "Monthly Payment": self.payment,
                "Number of Payments": len(rows),
                "Total Payments": payments.sum(),
                "Total Principal Paid": principal_paid.sum(),
                "Total Interest Paid": interest_paid.sum(),
                "Last Payment Amount": payments[-1] if len(rows) else 0.0,
            }
        )
