# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Date ranges for the lease timeline view."""

from __future__ import annotations

from typing import Iterable, List, Optional

import pandas as pd

from ..core.primitives.model import Model
from ..core.primitives.types import PositiveInt
from ..core.term import months_between, to_month
from .record import LeaseRecord

_ALL = "all"


class LeaseTimelineSpan(Model):
    """
    Month range covered by a set of leases.

    Attributes:
        earliest: Month of the earliest lease start
        latest: Month of the latest lease end
        total_months: Inclusive number of months from ``earliest`` to ``latest``
    """

    earliest: pd.Period
    latest: pd.Period
    total_months: PositiveInt

    @property
    def period_index(self) -> pd.PeriodIndex:
        """Monthly PeriodIndex covering the whole span."""
        return pd.period_range(start=self.earliest, periods=self.total_months, freq="M")

    def offset_of(self, value) -> int:
        """Month offset of ``value`` from the start of the span."""
        return months_between(self.earliest, value)


def lease_timeline_span(records: Iterable[LeaseRecord]) -> Optional[LeaseTimelineSpan]:
    """
    Span from the earliest lease start to the latest lease end.

    Returns None when there are no records to place on a timeline.
    """
    records = list(records)
    if not records:
        return None

    months = [to_month(r.lease_start_date) for r in records]
    months += [to_month(r.lease_end_date) for r in records]
    earliest = min(months)
    latest = max(months)
    return LeaseTimelineSpan(
        earliest=earliest,
        latest=latest,
        total_months=months_between(earliest, latest) + 1,
    )


def filter_records(
    records: Iterable[LeaseRecord],
    tenant_type: Optional[str] = None,
    floor: Optional[str] = None,
) -> List[LeaseRecord]:
    """Keep records matching ``tenant_type`` and ``floor``; None or "all" disables a filter."""
    filtered = list(records)
    if tenant_type is not None and tenant_type != _ALL:
        filtered = [r for r in filtered if r.tenant_type == tenant_type]
    if floor is not None and floor != _ALL:
        filtered = [r for r in filtered if r.floor == floor]
    return filtered
