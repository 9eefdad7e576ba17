# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for leasecore testing.

Provides lease record factories with sensible defaults so tests only spell
out the fields they care about.
"""

from __future__ import annotations

from datetime import date
from typing import List

import pytest

from leasecore.core.primitives import EngineSettings
from leasecore.lease import LeaseRecord
from leasecore.recovery import ExpenseCategory

AS_OF = date(2025, 6, 15)


def make_lease(**overrides) -> LeaseRecord:
    """
    Create a lease record for testing.

    Example:
        >>> record = make_lease(leased_area=1000.0)
        >>> record.leased_area
        1000.0
    """
    fields = {
        "tenant_name": "Test Tenant",
        "leased_area": 2500.0,
        "lease_start_date": date(2024, 1, 1),
        "lease_end_date": date(2029, 1, 1),
    }
    fields.update(overrides)
    return LeaseRecord(**fields)


@pytest.fixture
def as_of() -> date:
    return AS_OF


@pytest.fixture
def settings() -> EngineSettings:
    return EngineSettings(as_of_date=AS_OF)


@pytest.fixture
def office_lease() -> LeaseRecord:
    return make_lease(
        tenant_name="Acme Dental",
        floor="2",
        suite="210",
        tenant_type="Medical",
        leased_area=2500.0,
        rent_psf=32.0,
        ti_allowance_psf=40.0,
        ti_allowance_spent=25000.0,
        monthly_cam_fee_psf=0.5,
    )


@pytest.fixture
def tenants() -> List[LeaseRecord]:
    """Three tenants occupying 10%, 30% and 60% of the leased area."""
    return [
        make_lease(tenant_name="Cafe", leased_area=1000.0, floor="1", tenant_type="Retail"),
        make_lease(tenant_name="Law Office", leased_area=3000.0, floor="2", tenant_type="Office"),
        make_lease(tenant_name="Anchor", leased_area=6000.0, floor="1", tenant_type="Retail"),
    ]


@pytest.fixture
def expenses() -> List[ExpenseCategory]:
    return [
        ExpenseCategory(id="security", name="Security", amount=12000.0),
        ExpenseCategory(id="landscaping", name="Landscaping", amount=8000.0),
    ]


@pytest.fixture
def lease_factory():
    """Factory fixture wrapping ``make_lease`` for per-test customisation."""
    return make_lease
