# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Iterable, List

from ..core.primitives.model import Model
from ..core.primitives.types import PositiveFloat


class ExpenseCategory(Model):
    """
    One line of the shared building expense budget.

    Attributes:
        id: Stable key of the category (e.g. "landscaping")
        name: Display name
        amount: Annual budgeted cost
    """

    id: str
    name: str
    amount: PositiveFloat = 0.0


_STANDARD_CATEGORIES = (
    ("landscaping", "Landscaping"),
    ("security", "Security"),
    ("utilities", "Common Utilities"),
    ("maintenance", "Building Maintenance"),
    ("management", "Property Management"),
    ("insurance", "Insurance"),
    ("taxes", "Property Taxes"),
    ("other", "Other Expenses"),
)


def default_expense_categories() -> List[ExpenseCategory]:
    """The standard CAM expense categories, all with a zero budget."""
    return [ExpenseCategory(id=key, name=name) for key, name in _STANDARD_CATEGORIES]


def total_expense(expenses: Iterable[ExpenseCategory]) -> float:
    """Sum of the annual amounts of ``expenses``."""
    return sum((expense.amount for expense in expenses), 0.0)
