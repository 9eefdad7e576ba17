# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model shared by every lease entity.

    Records are snapshots: an edit produces a new instance through
    ``model_copy(update=...)`` and the old one is discarded.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,  # Snapshots; recomputation returns new instances
        extra="forbid",  # Catches typos in field names immediately
    )
