# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Leasecore Core

Primitives and the calendar month arithmetic shared by every calculator.
"""

from .term import (
    DateLike,
    months_between,
    remaining_months,
    shift_months,
    to_month,
)

__all__ = [
    "DateLike",
    "months_between",
    "remaining_months",
    "shift_months",
    "to_month",
]
