# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from ..debt.solver import SolverResult
from ..projection import ProjectionResult
from ..reporting import annual_summary, projection_summary, schedule_dataframe
from .scenario import HouseholdScenario


@dataclass(frozen=True)
class HouseholdAnalysisResult:
    """
    Results of a shared-household analysis.

    Attributes:
        scenario: Inputs the analysis was run with
        mortgage_payment: Level monthly mortgage payment
        solver: Outcome of the starting-payment search
        projection: Month-by-month projection, or None when the search failed
    """

    scenario: HouseholdScenario
    mortgage_payment: float
    solver: SolverResult
    projection: Optional[ProjectionResult]

    @property
    def converged(self) -> bool:
        return self.solver.converged

    @property
    def schedule(self) -> pd.DataFrame:
        return schedule_dataframe(self._require_projection(), self.scenario.start_date)

    @property
    def annual(self) -> pd.DataFrame:
        return annual_summary(self._require_projection())

    @property
    def summary(self) -> pd.Series:
        return projection_summary(self._require_projection())

    def _require_projection(self) -> ProjectionResult:
        if self.projection is None:
            # Re-raise the solver's failure with its diagnostics
            self.solver.unwrap()
        return self.projection
