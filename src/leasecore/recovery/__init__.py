# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
CAM expense pools and their allocation across tenants.
"""

from .allocation import (
    AllocationRecord,
    CAMAllocation,
    CustomAmounts,
    allocate,
    apply_allocation,
)
from .expenses import ExpenseCategory, default_expense_categories, total_expense

__all__ = [
    "AllocationRecord",
    "CAMAllocation",
    "CustomAmounts",
    "ExpenseCategory",
    "allocate",
    "apply_allocation",
    "default_expense_categories",
    "total_expense",
]
