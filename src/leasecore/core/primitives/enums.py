# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class AllocationMethodEnum(str, Enum):
    """
    Policies for spreading a pool of CAM expenses across tenants.

    Attributes:
        PRO_RATA: Share of the pool proportional to leased area
        FIXED: Pool divided equally between tenants, independent of area
        CUSTOM: Caller-supplied amount per tenant
        NONE: No CAM charges (shares still reported for display)
    """

    PRO_RATA = "pro-rata"
    FIXED = "fixed"
    CUSTOM = "custom"
    NONE = "none"

    @property
    def label(self) -> str:
        return _ALLOCATION_LABELS[self]


_ALLOCATION_LABELS = {
    AllocationMethodEnum.PRO_RATA: "Pro-Rata Share (Area)",
    AllocationMethodEnum.FIXED: "Fixed Amount",
    AllocationMethodEnum.CUSTOM: "Custom Allocation",
    AllocationMethodEnum.NONE: "No CAM Charges",
}


class TIProjectStatusEnum(str, Enum):
    """Lifecycle status of a tenant improvement project."""

    PLANNED = "Planned"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
