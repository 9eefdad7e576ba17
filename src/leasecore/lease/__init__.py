# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lease records and their derived fields.
"""

from .derived import apply_load_factor, derive, derive_all, rentable_area
from .record import LeaseRecord
from .timeline import LeaseTimelineSpan, filter_records, lease_timeline_span

__all__ = [
    "LeaseRecord",
    "LeaseTimelineSpan",
    "apply_load_factor",
    "derive",
    "derive_all",
    "filter_records",
    "lease_timeline_span",
    "rentable_area",
]
