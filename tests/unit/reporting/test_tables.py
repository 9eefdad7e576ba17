# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from leasecore.improvements import schedule
from leasecore.lease import derive_all
from leasecore.recovery import allocate
from leasecore.reporting import allocation_frame, rent_roll, schedule_frame
from leasecore.reporting.tables import ALLOCATION_COLUMNS, RENT_ROLL_COLUMNS, SCHEDULE_COLUMNS


def test_rent_roll(office_lease, tenants, as_of):
    records = derive_all([office_lease, *tenants], as_of)

    df = rent_roll(records)

    assert list(df.columns) == RENT_ROLL_COLUMNS
    assert len(df) == 4
    assert df.index.name == "uid"
    row = df.loc[str(office_lease.uid)]
    assert row["Tenant"] == "Acme Dental"
    assert row["Annual Rent"] == pytest.approx(80000.0)
    assert row["Remaining Term"] == 43


def test_empty_rent_roll():
    df = rent_roll([])

    assert df.empty
    assert list(df.columns) == RENT_ROLL_COLUMNS


def test_allocation_frame(tenants, expenses):
    df = allocation_frame(allocate(tenants, expenses))

    assert list(df.columns) == ALLOCATION_COLUMNS
    assert df["Annual Amount"].sum() == pytest.approx(20000.0)
    assert df.loc[str(tenants[2].uid), "Monthly Amount"] == pytest.approx(1000.0)


def test_schedule_frame():
    df = schedule_frame(schedule(120000.0, 6.0, 36))

    assert list(df.columns) == SCHEDULE_COLUMNS
    assert list(df.index) == list(range(1, 13))
    assert df.loc[1, "Interest"] == pytest.approx(600.0)


def test_schedule_frame_of_empty_schedule():
    assert schedule_frame(schedule(0.0, 6.0, 60)).empty
