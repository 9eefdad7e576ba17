# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID, uuid4

from pydantic import Field, model_validator

from ..core.primitives.model import Model
from ..core.primitives.settings import LeaseSettings
from ..core.primitives.types import PositiveFloat, PositiveInt, StrictlyPositiveFloat
from ..core.primitives.validation import validate_lease_dates


class LeaseRecord(Model):
    """
    One tenant's lease terms together with the values derived from them.

    Base attributes are entered by the user. Derived attributes are owned by
    ``leasecore.lease.derive`` and are recomputed from the base attributes on
    every call; they are never a source of truth. Allocation attributes are
    written back by ``leasecore.recovery.apply_allocation``.

    Attributes:
        uid: Stable identity across edits
        leased_area: Rentable square feet; zero or negative is a degenerate
            lease whose financial totals are all zero
        rent_psf: Annual base rent per square foot
        ti_allowance_psf: Tenant improvement allowance per square foot
        ti_allowance_spent: Cumulative TI spend
        monthly_cam_fee_psf: Monthly CAM fee per square foot
        ti_amortized_amount: Financed TI principal
        ti_amortization_rate: Annual interest rate in percent (6.0 means 6%);
            None when no rate has been entered, 0.0 for interest-free financing
        ti_amortization_term: Amortization term in months

    Example:
        >>> record = LeaseRecord(
        ...     tenant_name="Acme Dental",
        ...     leased_area=2500.0,
        ...     rent_psf=32.0,
        ...     lease_start_date=date(2024, 1, 1),
        ...     lease_end_date=date(2029, 1, 1),
        ... )
    """

    uid: UUID = Field(default_factory=uuid4)
    tenant_name: str = ""
    tenant_type: str = ""
    floor: str = ""
    suite: str = ""

    # Space
    leased_area: float = 0.0
    usable_area: PositiveFloat = 0.0
    load_factor: StrictlyPositiveFloat = Field(
        default_factory=lambda: LeaseSettings().default_load_factor
    )

    # Term
    lease_start_date: date
    lease_end_date: date

    # Financial terms
    rent_psf: PositiveFloat = 0.0
    ti_allowance_psf: PositiveFloat = 0.0
    ti_allowance_spent: PositiveFloat = 0.0
    monthly_cam_fee_psf: PositiveFloat = 0.0

    # TI financing
    ti_amortized_amount: PositiveFloat = 0.0
    ti_amortization_rate: Optional[PositiveFloat] = None
    ti_amortization_term: PositiveInt = 0

    # Derived (see leasecore.lease.derived)
    rent_annual: float = 0.0
    rent_monthly: float = 0.0
    ti_allowance_total: float = 0.0
    ti_allowance_remaining: float = 0.0
    annual_cam_charges: float = 0.0
    remaining_term: int = 0
    original_lease_term: int = 0
    renewal_notice_date: Optional[date] = None

    # CAM allocation write-back
    annual_cam_amount: Optional[float] = None
    monthly_cam_amount: Optional[float] = None
    cam_share_percentage: Optional[float] = None

    @model_validator(mode="after")
    def check_lease_dates(self) -> "LeaseRecord":
        return validate_lease_dates(self)

    @property
    def effective_area(self) -> float:
        """Leased area with degenerate (non-positive) values treated as zero."""
        return self.leased_area if self.leased_area > 0 else 0.0

    @property
    def has_ti_financing(self) -> bool:
        """True when the record carries a financed TI amount worth amortizing."""
        return (
            self.ti_amortized_amount > 0
            and self.ti_amortization_rate is not None
            and self.ti_amortization_term > 0
        )
