# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
CAM expense allocation.

Spreads the total of a pool of shared expenses across a set of tenants under
one of four policies (``AllocationMethodEnum``). Share percentages are always
computed from leased area so they can be displayed whatever the policy; only
the pro-rata policy uses them to drive the allocated amount.

An allocation that does not add up to the expense total is not an error.
``CAMAllocation.is_balanced`` reports it so the caller can warn the user.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Union
from uuid import UUID

import numpy as np

from ..core.primitives.enums import AllocationMethodEnum
from ..core.primitives.model import Model
from ..core.primitives.settings import EngineSettings
from ..core.primitives.types import PositiveFloat
from ..lease.record import LeaseRecord
from .expenses import ExpenseCategory, total_expense

logger = logging.getLogger(__name__)

CustomAmounts = Mapping[Union[UUID, str], float]


class AllocationRecord(Model):
    """
    A single tenant's share of the CAM pool.

    Attributes:
        tenant_id: ``uid`` of the lease record
        tenant_name: Display name carried over from the lease record
        leased_area: Area used for the share computation; an entered area of zero
            or less is reported as 0, not as the value on the lease record
        share_percentage: Area share of the building total, 0-100
        allocation_amount: Annual amount charged to the tenant
        custom_amount: Custom amount on file for the tenant (used by the custom policy)
    """

    tenant_id: UUID
    tenant_name: str = ""
    leased_area: float
    share_percentage: float
    allocation_amount: float
    custom_amount: float = 0.0

    @property
    def monthly_amount(self) -> float:
        return self.allocation_amount / 12


class CAMAllocation(Model):
    """Result of allocating a CAM pool across tenants."""

    method: AllocationMethodEnum
    total_expense: float
    records: List[AllocationRecord]
    balance_tolerance: PositiveFloat = 0.01

    @property
    def total_allocated(self) -> float:
        return sum((r.allocation_amount for r in self.records), 0.0)

    @property
    def total_share_percentage(self) -> float:
        return sum((r.share_percentage for r in self.records), 0.0)

    @property
    def variance(self) -> float:
        """Allocated minus expensed; positive when allocations exceed expenses."""
        return self.total_allocated - self.total_expense

    @property
    def is_balanced(self) -> bool:
        return abs(self.variance) < self.balance_tolerance

    def for_tenant(self, tenant_id: Union[UUID, str]) -> Optional[AllocationRecord]:
        """Allocation record of ``tenant_id``, or None if the tenant is not part of it."""
        key = str(tenant_id)
        return next((r for r in self.records if str(r.tenant_id) == key), None)


def _area_shares(areas: np.ndarray) -> np.ndarray:
    """Percentage share of each area in the total; all zero when the total is zero."""
    total_area = areas.sum()
    if total_area <= 0:
        return np.zeros_like(areas)
    return areas / total_area * 100


def _custom_lookup(
    records: Sequence[LeaseRecord], custom_amounts: Optional[CustomAmounts]
) -> Dict[str, float]:
    """Custom amount per tenant: explicit overrides win over amounts already on file."""
    lookup = {
        str(r.uid): r.annual_cam_amount
        for r in records
        if r.annual_cam_amount is not None
    }
    if custom_amounts:
        known = {str(r.uid) for r in records}
        for tenant_id, amount in custom_amounts.items():
            key = str(tenant_id)
            if key not in known:
                logger.warning(f"Custom CAM amount given for unknown tenant {key}. Ignoring.")
                continue
            lookup[key] = float(amount)
    return lookup


def allocate(
    records: Sequence[LeaseRecord],
    expenses: Sequence[ExpenseCategory],
    method: Union[AllocationMethodEnum, str] = AllocationMethodEnum.PRO_RATA,
    custom_amounts: Optional[CustomAmounts] = None,
    settings: Optional[EngineSettings] = None,
) -> CAMAllocation:
    """
    Allocate the total of ``expenses`` across ``records``.

    Args:
        records: Lease records, in display order
        expenses: Expense categories forming the CAM pool
        method: Allocation policy (enum member or its string value)
        custom_amounts: Annual amount per tenant ``uid`` for the custom policy;
            tenants without an entry fall back to their applied
            ``annual_cam_amount`` and then to 0
        settings: Engine settings, defaults to ``EngineSettings()``

    Returns:
        CAMAllocation with one record per input record, in input order

    Policies:
        pro-rata: share / 100 * total expense
        fixed: total expense / tenant count
        custom: the tenant's custom amount
        none: 0
    """
    settings = settings or EngineSettings()
    method = AllocationMethodEnum(method)
    records = list(records)
    pool_total = total_expense(expenses)

    areas = np.array([r.effective_area for r in records], dtype=float)
    shares = _area_shares(areas)
    customs = _custom_lookup(records, custom_amounts)

    if method == AllocationMethodEnum.PRO_RATA:
        amounts = shares / 100 * pool_total
    elif method == AllocationMethodEnum.FIXED:
        # No tenants, no division
        amounts = np.full(len(records), pool_total / len(records) if records else 0.0)
    elif method == AllocationMethodEnum.CUSTOM:
        amounts = np.array([customs.get(str(r.uid), 0.0) for r in records], dtype=float)
    else:
        amounts = np.zeros(len(records))

    allocation = CAMAllocation(
        method=method,
        total_expense=pool_total,
        balance_tolerance=settings.allocation.balance_tolerance,
        records=[
            AllocationRecord(
                tenant_id=record.uid,
                tenant_name=record.tenant_name,
                leased_area=float(area),
                share_percentage=float(share),
                allocation_amount=float(amount),
                custom_amount=customs.get(str(record.uid), 0.0),
            )
            for record, area, share, amount in zip(records, areas, shares, amounts)
        ],
    )

    logger.debug(
        f"Allocated {pool_total:,.2f} across {len(records)} tenants using '{method.value}': "
        f"{allocation.total_allocated:,.2f} allocated"
    )
    if not allocation.is_balanced:
        logger.debug(f"CAM allocation is unbalanced by {allocation.variance:,.2f}")
    return allocation


def apply_allocation(
    records: Sequence[LeaseRecord], allocation: CAMAllocation
) -> List[LeaseRecord]:
    """
    Write allocated CAM amounts back onto the matching lease records.

    Records are matched by ``uid``; records absent from the allocation are
    returned unchanged. Order is preserved.
    """
    by_tenant = {str(r.tenant_id): r for r in allocation.records}
    updated = []
    for record in records:
        alloc = by_tenant.get(str(record.uid))
        if alloc is None:
            updated.append(record)
            continue
        updated.append(
            record.model_copy(
                update={
                    "annual_cam_amount": alloc.allocation_amount,
                    "monthly_cam_amount": alloc.monthly_amount,
                    "cam_share_percentage": alloc.share_percentage,
                }
            )
        )
    return updated
