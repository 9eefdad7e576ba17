# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Derived lease fields.

Every derived attribute of a ``LeaseRecord`` is a pure function of its base
attributes and an as-of date. ``derive`` never reads a previously derived
value, so recomputing on every edit cannot accumulate drift:
``derive(derive(r, t), t) == derive(r, t)``.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Optional

from ..core.primitives.settings import EngineSettings
from ..core.term import months_between, remaining_months, shift_months
from .record import LeaseRecord

logger = logging.getLogger(__name__)


def derive(
    record: LeaseRecord,
    as_of: Optional[date] = None,
    settings: Optional[EngineSettings] = None,
) -> LeaseRecord:
    """
    Return a copy of ``record`` with every derived field recomputed.

    Args:
        record: Lease record with base attributes filled in
        as_of: Date the remaining term is measured from; falls back to
            ``settings.as_of_date`` and then today
        settings: Engine settings, defaults to ``EngineSettings()``

    Returns:
        New ``LeaseRecord``; the input is left untouched

    Formulas (area is ``leased_area`` floored at zero):
        rent_annual = rent_psf * area
        rent_monthly = rent_annual / 12
        ti_allowance_total = ti_allowance_psf * area
        ti_allowance_remaining = ti_allowance_total - ti_allowance_spent
        annual_cam_charges = monthly_cam_fee_psf * 12 * area
        remaining_term = max(0, months from as_of to lease_end_date)
    """
    settings = settings or EngineSettings()
    as_of = settings.resolve_as_of(as_of)
    area = record.effective_area

    rent_annual = record.rent_psf * area
    ti_allowance_total = record.ti_allowance_psf * area

    return record.model_copy(
        update={
            "rent_annual": rent_annual,
            "rent_monthly": rent_annual / 12,
            "ti_allowance_total": ti_allowance_total,
            "ti_allowance_remaining": ti_allowance_total - record.ti_allowance_spent,
            "annual_cam_charges": record.monthly_cam_fee_psf * 12 * area,
            "remaining_term": remaining_months(record.lease_end_date, as_of),
            "original_lease_term": months_between(
                record.lease_start_date, record.lease_end_date
            ),
            "renewal_notice_date": shift_months(
                record.lease_end_date, -settings.lease.renewal_notice_months
            ),
        }
    )


def derive_all(
    records: Iterable[LeaseRecord],
    as_of: Optional[date] = None,
    settings: Optional[EngineSettings] = None,
) -> List[LeaseRecord]:
    """Derive every record against the same as-of date, preserving order."""
    settings = settings or EngineSettings()
    as_of = settings.resolve_as_of(as_of)
    derived = [derive(record, as_of, settings) for record in records]
    logger.debug(f"Derived {len(derived)} lease records as of {as_of}")
    return derived


def rentable_area(usable_area: float, load_factor: float) -> float:
    """Rentable (leased) area implied by a usable area and a load factor."""
    return usable_area * load_factor


def apply_load_factor(record: LeaseRecord) -> LeaseRecord:
    """
    Recompute ``leased_area`` from ``usable_area`` and ``load_factor``.

    Records without a usable area are returned unchanged. Derived fields are
    not refreshed here; pass the result through ``derive``.
    """
    if record.usable_area <= 0:
        return record
    return record.model_copy(
        update={"leased_area": rentable_area(record.usable_area, record.load_factor)}
    )
