# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field, model_validator

from .model import Model
from .types import PositiveFloat, PositiveInt, StrictlyPositiveFloat, StrictlyPositiveInt


class AllocationSettings(Model):
    """Settings for CAM expense allocation."""

    balance_tolerance: PositiveFloat = Field(
        default=0.01,
        description="Maximum absolute difference between allocated and total expense for an allocation to count as balanced.",
    )


class AmortizationSettings(Model):
    """
    Settings controlling how much of a TI amortization schedule is reported.

    Long schedules are reported as the first ``detail_periods`` payments followed
    by a single summary row counting the payments left out. Schedules whose term
    does not exceed ``truncation_threshold`` are always reported in full.
    """

    detail_periods: StrictlyPositiveInt = Field(
        default=12, description="Number of payments reported in full for long schedules."
    )
    truncation_threshold: PositiveInt = Field(
        default=24,
        description="Terms (in months) above this value are truncated to detail_periods rows.",
    )

    @model_validator(mode="after")
    def check_window(self) -> "AmortizationSettings":
        if self.detail_periods > self.truncation_threshold:
            raise ValueError(
                "detail_periods must not exceed truncation_threshold"
            )
        return self


class LeaseSettings(Model):
    """Defaults applied to lease records."""

    default_load_factor: StrictlyPositiveFloat = Field(
        default=1.15,
        description="Ratio of rentable to usable area. Typical range: 1.1-1.2 for office, 1.0-1.05 for retail.",
    )
    renewal_notice_months: PositiveInt = Field(
        default=12, description="Months before lease end that the renewal notice falls due."
    )


# --- Main Engine Settings Class ---


class EngineSettings(Model):
    """Engine settings

    Groups the settings of every calculator. Each public operation accepts an
    optional ``settings`` argument and falls back to the defaults below.
    """

    as_of_date: Optional[date] = Field(
        default=None,
        description="Valuation date for remaining-term calculations; today's date when unset.",
    )
    allocation: AllocationSettings = Field(default_factory=AllocationSettings)
    amortization: AmortizationSettings = Field(default_factory=AmortizationSettings)
    lease: LeaseSettings = Field(default_factory=LeaseSettings)

    def resolve_as_of(self, as_of: Optional[date] = None) -> date:
        """Return the explicit ``as_of`` date, then the configured one, then today."""
        if as_of is not None:
            return as_of
        if self.as_of_date is not None:
            return self.as_of_date
        return date.today()
