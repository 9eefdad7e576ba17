# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tenant improvement (TI) allowance tracking and financing.
"""

from .amortization import (
    AmortizationPaymentRow,
    AmortizationSchedule,
    ScheduleSummaryRow,
    TIAmortization,
    is_amortizable,
    iter_payments,
    level_payment,
    monthly_rate,
    schedule,
)
from .projects import TIBudget, TIProject

__all__ = [
    "AmortizationPaymentRow",
    "AmortizationSchedule",
    "ScheduleSummaryRow",
    "TIAmortization",
    "TIBudget",
    "TIProject",
    "is_amortizable",
    "iter_payments",
    "level_payment",
    "monthly_rate",
    "schedule",
]
