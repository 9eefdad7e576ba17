# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Leasecore Core Primitives

Building blocks shared by every calculator: the immutable base model,
constrained numeric types, enums, settings and validation helpers.
"""

from .enums import AllocationMethodEnum, TIProjectStatusEnum
from .model import Model
from .settings import (
    AllocationSettings,
    AmortizationSettings,
    EngineSettings,
    LeaseSettings,
)
from .types import (
    PositiveFloat,
    PositiveInt,
    StrictlyPositiveFloat,
    StrictlyPositiveInt,
)
from .validation import validate_lease_dates

__all__ = [
    # Core models
    "Model",
    # Settings
    "EngineSettings",
    "AllocationSettings",
    "AmortizationSettings",
    "LeaseSettings",
    # Enums
    "AllocationMethodEnum",
    "TIProjectStatusEnum",
    # Types
    "PositiveFloat",
    "PositiveInt",
    "StrictlyPositiveFloat",
    "StrictlyPositiveInt",
    # Validation
    "validate_lease_dates",
]
