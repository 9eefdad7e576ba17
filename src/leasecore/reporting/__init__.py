# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Leasecore Reporting

pandas DataFrame views of derived lease records, CAM allocations and TI
amortization schedules.
"""

from .tables import allocation_frame, rent_roll, schedule_frame

__all__ = ["allocation_frame", "rent_roll", "schedule_frame"]
