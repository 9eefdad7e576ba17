# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
Leasecore - Lease Financial Derivation and Allocation Engine

Pure calculations behind a commercial lease-management application: derived
rent/TI/CAM fields on a lease record, CAM expense allocation across tenants,
and TI amortization schedules.

Key Entry Points:
- leasecore.lease.derive() - Recompute the derived fields of a lease record
- leasecore.recovery.allocate() - Allocate a CAM expense pool across tenants
- leasecore.improvements.schedule() - TI amortization schedule
- leasecore.core.months_between() - Calendar month arithmetic

Example Usage:
    ```python
    from datetime import date

    from leasecore.lease import LeaseRecord, derive
    from leasecore.recovery import ExpenseCategory, allocate

    record = derive(
        LeaseRecord(
            tenant_name="Acme Dental",
            leased_area=2500.0,
            rent_psf=32.0,
            lease_start_date=date(2024, 1, 1),
            lease_end_date=date(2029, 1, 1),
        ),
        as_of=date(2025, 6, 1),
    )
    allocation = allocate(
        [record],
        [ExpenseCategory(id="security", name="Security", amount=12000.0)],
        method="pro-rata",
    )
    print(allocation.is_balanced)
    ```
"""

# Libraries leave handler configuration to the application.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "improvements",
    "lease",
    "recovery",
    "reporting",
]


_LAZY_MODULES = {
    "core": "leasecore.core",
    "improvements": "leasecore.improvements",
    "lease": "leasecore.lease",
    "recovery": "leasecore.recovery",
    "reporting": "leasecore.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'leasecore' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
