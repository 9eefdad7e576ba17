# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tabular views of engine results.

These functions only reshape results that were already computed; they never
perform financial calculations of their own.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from ..improvements.amortization import AmortizationSchedule
from ..lease.record import LeaseRecord
from ..recovery.allocation import CAMAllocation

RENT_ROLL_COLUMNS = [
    "Tenant",
    "Floor",
    "Suite",
    "Leased Area",
    "Lease Start",
    "Lease End",
    "Original Term",
    "Remaining Term",
    "Rent PSF",
    "Annual Rent",
    "Monthly Rent",
    "TI Allowance",
    "TI Spent",
    "TI Remaining",
    "Annual CAM Charges",
]

ALLOCATION_COLUMNS = [
    "Tenant",
    "Leased Area",
    "Share %",
    "Annual Amount",
    "Monthly Amount",
    "Custom Amount",
]

SCHEDULE_COLUMNS = ["Payment", "Principal", "Interest", "Balance"]


def rent_roll(records: Iterable[LeaseRecord]) -> pd.DataFrame:
    """
    Rent roll of derived lease records, one row per record indexed by ``uid``.

    Pass records through ``leasecore.lease.derive_all`` first; derived columns
    are read as stored.
    """
    records = list(records)
    data = [
        {
            "Tenant": r.tenant_name,
            "Floor": r.floor,
            "Suite": r.suite,
            "Leased Area": r.leased_area,
            "Lease Start": r.lease_start_date,
            "Lease End": r.lease_end_date,
            "Original Term": r.original_lease_term,
            "Remaining Term": r.remaining_term,
            "Rent PSF": r.rent_psf,
            "Annual Rent": r.rent_annual,
            "Monthly Rent": r.rent_monthly,
            "TI Allowance": r.ti_allowance_total,
            "TI Spent": r.ti_allowance_spent,
            "TI Remaining": r.ti_allowance_remaining,
            "Annual CAM Charges": r.annual_cam_charges,
        }
        for r in records
    ]
    return pd.DataFrame(
        data,
        columns=RENT_ROLL_COLUMNS,
        index=pd.Index([str(r.uid) for r in records], name="uid"),
    )


def allocation_frame(allocation: CAMAllocation) -> pd.DataFrame:
    """Allocation records indexed by tenant id, in allocation order."""
    df = pd.DataFrame(
        [
            {
                "Tenant": r.tenant_name,
                "Leased Area": r.leased_area,
                "Share %": r.share_percentage,
                "Annual Amount": r.allocation_amount,
                "Monthly Amount": r.monthly_amount,
                "Custom Amount": r.custom_amount,
            }
            for r in allocation.records
        ],
        columns=ALLOCATION_COLUMNS,
        index=pd.Index([str(r.tenant_id) for r in allocation.records], name="tenant_id"),
    )
    return df


def schedule_frame(schedule: AmortizationSchedule) -> pd.DataFrame:
    """Detail rows of an amortization schedule indexed by payment number."""
    df = pd.DataFrame(
        [
            {
                "Payment": row.payment,
                "Principal": row.principal,
                "Interest": row.interest,
                "Balance": row.balance,
            }
            for row in schedule.rows
        ],
        columns=SCHEDULE_COLUMNS,
        index=pd.Index([row.payment_number for row in schedule.rows], name="Period"),
    )
    return df
