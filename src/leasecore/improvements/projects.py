# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Optional, Union
from uuid import UUID, uuid4

from pydantic import Field, field_validator

from ..core.primitives.enums import TIProjectStatusEnum
from ..core.primitives.model import Model
from ..core.primitives.settings import EngineSettings
from ..core.primitives.types import PositiveFloat
from ..lease.derived import derive
from ..lease.record import LeaseRecord

logger = logging.getLogger(__name__)


class TIProject(Model):
    """A build-out project drawing on a tenant's TI allowance."""

    uid: UUID = Field(default_factory=uuid4)
    name: str
    description: str = ""
    amount: PositiveFloat = 0.0
    status: TIProjectStatusEnum = TIProjectStatusEnum.PLANNED
    contractor: str = ""
    completion_date: Optional[date] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("TI project name must not be empty")
        return v


class TIBudget(Model):
    """
    A tenant's TI allowance and the projects spending it.

    Every project counts toward spend regardless of its status. The remaining
    allowance goes negative when projects exceed the allowance.

    Example:
        >>> budget = TIBudget(allowance=50000.0).add_project(
        ...     TIProject(name="Demising walls", amount=20000.0)
        ... )
        >>> budget.remaining
        30000.0
    """

    allowance: PositiveFloat = 0.0
    projects: List[TIProject] = []

    @classmethod
    def from_lease(
        cls, record: LeaseRecord, projects: Iterable[TIProject] = ()
    ) -> "TIBudget":
        """Budget seeded with the record's derived ``ti_allowance_total``."""
        return cls(allowance=record.ti_allowance_total, projects=list(projects))

    @property
    def spent(self) -> float:
        return sum((p.amount for p in self.projects), 0.0)

    @property
    def remaining(self) -> float:
        return self.allowance - self.spent

    @property
    def utilization_percentage(self) -> float:
        """Share of the allowance already spent, in percent; 0 with no allowance."""
        if self.allowance <= 0:
            return 0.0
        return self.spent / self.allowance * 100

    @property
    def is_over_budget(self) -> bool:
        return self.remaining < 0

    def add_project(self, project: TIProject) -> "TIBudget":
        return self.model_copy(update={"projects": [*self.projects, project]})

    def update_project(self, project: TIProject) -> "TIBudget":
        """Replace the project sharing ``project.uid``; unknown projects raise KeyError."""
        if not any(p.uid == project.uid for p in self.projects):
            raise KeyError(f"No TI project with uid {project.uid}")
        return self.model_copy(
            update={"projects": [project if p.uid == project.uid else p for p in self.projects]}
        )

    def remove_project(self, project_id: Union[UUID, str]) -> "TIBudget":
        key = str(project_id)
        return self.model_copy(
            update={"projects": [p for p in self.projects if str(p.uid) != key]}
        )

    def apply_to(
        self,
        record: LeaseRecord,
        as_of: Optional[date] = None,
        settings: Optional[EngineSettings] = None,
    ) -> LeaseRecord:
        """Write the budget's spend into ``record`` and re-derive it."""
        if self.is_over_budget:
            logger.debug(
                f"TI spend for '{record.tenant_name}' exceeds allowance by {-self.remaining:,.2f}"
            )
        updated = record.model_copy(update={"ti_allowance_spent": self.spent})
        return derive(updated, as_of, settings)
