# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging

import pytest

from leasecore.core.primitives import AllocationMethodEnum, AllocationSettings, EngineSettings
from leasecore.recovery import (
    ExpenseCategory,
    allocate,
    apply_allocation,
    default_expense_categories,
    total_expense,
)


class TestExpenses:
    def test_total_expense(self, expenses):
        assert total_expense(expenses) == pytest.approx(20000.0)

    def test_total_of_nothing_is_zero(self):
        assert total_expense([]) == 0.0

    def test_default_categories(self):
        categories = default_expense_categories()

        assert [c.id for c in categories] == [
            "landscaping",
            "security",
            "utilities",
            "maintenance",
            "management",
            "insurance",
            "taxes",
            "other",
        ]
        assert total_expense(categories) == 0.0

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError):
            ExpenseCategory(id="taxes", name="Property Taxes", amount=-1.0)


class TestProRata:
    def test_shares_follow_area(self, tenants, expenses):
        result = allocate(tenants, expenses, AllocationMethodEnum.PRO_RATA)

        assert [r.share_percentage for r in result.records] == pytest.approx([10.0, 30.0, 60.0])
        assert [r.allocation_amount for r in result.records] == pytest.approx(
            [2000.0, 6000.0, 12000.0]
        )

    def test_balanced_by_construction(self, tenants, expenses):
        result = allocate(tenants, expenses, "pro-rata")

        assert result.total_share_percentage == pytest.approx(100.0, abs=0.01)
        assert result.total_allocated == pytest.approx(result.total_expense, abs=0.01)
        assert result.is_balanced

    def test_uneven_areas_still_balance(self, lease_factory):
        records = [lease_factory(leased_area=a) for a in (333.3, 1234.56, 7.0, 999.99)]
        expenses = [ExpenseCategory(id="other", name="Other", amount=98765.43)]

        result = allocate(records, expenses)

        assert result.is_balanced
        assert result.total_share_percentage == pytest.approx(100.0, abs=0.01)

    def test_zero_total_area(self, lease_factory, expenses):
        records = [lease_factory(leased_area=0.0), lease_factory(leased_area=0.0)]

        result = allocate(records, expenses, "pro-rata")

        assert all(r.share_percentage == 0.0 for r in result.records)
        assert all(r.allocation_amount == 0.0 for r in result.records)

    def test_negative_area_counts_as_zero(self, lease_factory, expenses):
        records = [lease_factory(leased_area=-100.0), lease_factory(leased_area=400.0)]

        result = allocate(records, expenses)

        assert result.records[0].leased_area == 0.0
        assert result.records[0].share_percentage == 0.0
        assert result.records[1].share_percentage == pytest.approx(100.0)


class TestFixed:
    def test_equal_division(self, tenants, expenses):
        result = allocate(tenants, expenses, AllocationMethodEnum.FIXED)

        assert all(
            r.allocation_amount == pytest.approx(20000.0 / 3) for r in result.records
        )
        assert result.is_balanced

    def test_shares_still_by_area(self, tenants, expenses):
        result = allocate(tenants, expenses, "fixed")

        assert [r.share_percentage for r in result.records] == pytest.approx([10.0, 30.0, 60.0])

    def test_no_tenants(self, expenses):
        result = allocate([], expenses, "fixed")

        assert result.records == []
        assert result.total_allocated == 0.0


class TestCustom:
    def test_custom_amounts(self, tenants, expenses):
        cafe, law, anchor = tenants
        result = allocate(
            tenants,
            expenses,
            AllocationMethodEnum.CUSTOM,
            custom_amounts={cafe.uid: 5000.0, str(law.uid): 7000.0},
        )

        assert [r.allocation_amount for r in result.records] == [5000.0, 7000.0, 0.0]
        assert [r.custom_amount for r in result.records] == [5000.0, 7000.0, 0.0]
        assert [r.share_percentage for r in result.records] == pytest.approx([10.0, 30.0, 60.0])

    def test_imbalance_is_reported_not_raised(self, tenants, expenses):
        result = allocate(tenants, expenses, "custom", custom_amounts={tenants[0].uid: 5000.0})

        assert not result.is_balanced
        assert result.variance == pytest.approx(-15000.0)

    def test_previously_applied_amount_seeds_custom(self, lease_factory, expenses):
        record = lease_factory(annual_cam_amount=4200.0)

        result = allocate([record], expenses, "custom")

        assert result.records[0].allocation_amount == 4200.0

    def test_override_wins_over_applied_amount(self, lease_factory, expenses):
        record = lease_factory(annual_cam_amount=4200.0)

        result = allocate([record], expenses, "custom", custom_amounts={record.uid: 100.0})

        assert result.records[0].allocation_amount == 100.0

    def test_unknown_tenant_is_ignored_with_warning(self, tenants, expenses, caplog):
        with caplog.at_level(logging.WARNING, logger="leasecore.recovery.allocation"):
            result = allocate(tenants, expenses, "custom", custom_amounts={"no-such-tenant": 1.0})

        assert result.total_allocated == 0.0
        assert "no-such-tenant" in caplog.text

    def test_custom_amount_carried_under_other_policies(self, tenants, expenses):
        result = allocate(tenants, expenses, "pro-rata", custom_amounts={tenants[2].uid: 999.0})

        assert result.records[2].custom_amount == 999.0
        assert result.records[2].allocation_amount == pytest.approx(12000.0)

    def test_tolerance_from_settings(self, tenants, expenses):
        settings = EngineSettings(allocation=AllocationSettings(balance_tolerance=20000.01))

        result = allocate(tenants, expenses, "custom", settings=settings)

        assert result.is_balanced


class TestNone:
    def test_all_zero(self, tenants, expenses):
        result = allocate(tenants, expenses, AllocationMethodEnum.NONE)

        assert all(r.allocation_amount == 0.0 for r in result.records)
        assert [r.share_percentage for r in result.records] == pytest.approx([10.0, 30.0, 60.0])
        assert not result.is_balanced

    def test_balanced_when_nothing_to_allocate(self, tenants):
        assert allocate(tenants, [], "none").is_balanced


class TestAllocationResult:
    def test_preserves_input_order(self, tenants, expenses):
        reversed_tenants = list(reversed(tenants))

        result = allocate(reversed_tenants, expenses)

        assert [r.tenant_id for r in result.records] == [t.uid for t in reversed_tenants]
        assert [r.tenant_name for r in result.records] == ["Anchor", "Law Office", "Cafe"]

    def test_monthly_amount(self, tenants, expenses):
        result = allocate(tenants, expenses)

        assert result.records[2].monthly_amount == pytest.approx(1000.0)

    def test_for_tenant(self, tenants, expenses):
        result = allocate(tenants, expenses)

        assert result.for_tenant(tenants[1].uid).allocation_amount == pytest.approx(6000.0)
        assert result.for_tenant(str(tenants[1].uid)) is not None
        assert result.for_tenant("missing") is None

    def test_unknown_method_rejected(self, tenants, expenses):
        with pytest.raises(ValueError):
            allocate(tenants, expenses, "by-headcount")


class TestApplyAllocation:
    def test_writes_amounts_back(self, tenants, expenses):
        result = allocate(tenants, expenses)

        updated = apply_allocation(tenants, result)

        anchor = updated[2]
        assert anchor.annual_cam_amount == pytest.approx(12000.0)
        assert anchor.monthly_cam_amount == pytest.approx(1000.0)
        assert anchor.cam_share_percentage == pytest.approx(60.0)
        assert anchor.uid == tenants[2].uid

    def test_unmatched_records_unchanged(self, tenants, expenses, lease_factory):
        outsider = lease_factory(tenant_name="Outsider")
        result = allocate(tenants, expenses)

        updated = apply_allocation([*tenants, outsider], result)

        assert updated[-1] is outsider
        assert updated[-1].annual_cam_amount is None

    def test_inputs_not_mutated(self, tenants, expenses):
        apply_allocation(tenants, allocate(tenants, expenses))

        assert all(t.annual_cam_amount is None for t in tenants)
