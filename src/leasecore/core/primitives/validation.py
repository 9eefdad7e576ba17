# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reusable Pydantic validation utilities for lease models.

Field-level input validation belongs to the caller; these helpers only guard
the handful of cross-field invariants the calculators rely on.
"""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def validate_lease_dates(model: T) -> T:
    """
    Reusable ``mode="after"`` validator for lease start/end ordering.

    Equal start and end dates are allowed.

    Usage:
        @model_validator(mode="after")
        def check_lease_dates(self) -> "LeaseRecord":
            return validate_lease_dates(self)

    Raises:
        ValueError: If ``lease_end_date`` falls before ``lease_start_date``
    """
    start = getattr(model, "lease_start_date", None)
    end = getattr(model, "lease_end_date", None)
    if start is not None and end is not None and end < start:
        raise ValueError("lease_end_date must not be before lease_start_date")
    return model
