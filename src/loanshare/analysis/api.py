# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared-household Analysis API

Explicit pipeline from a scenario to its projection. Callers hold the
scenario and decide when to recompute; nothing is cached between runs.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.primitives import SolverSettings
from ..debt.solver import solve_starting_payment
from ..projection import project_schedule
from .results import HouseholdAnalysisResult
from .scenario import HouseholdScenario

logger = logging.getLogger(__name__)


def run(
    scenario: HouseholdScenario,
    settings: Optional[SolverSettings] = None,
) -> HouseholdAnalysisResult:
    """
    Run the full projection pipeline for a scenario.

    Workflow:
      1) Compute the level mortgage payment
      2) Solve the loan's starting payment against that mortgage payment
      3) Project the loan month by month from the solved payment when the
         search converged

    Args:
        scenario: Loan, mortgage, inflation policy and household inputs.
        settings: Solver configuration; defaults to SolverSettings().

    Returns:
        HouseholdAnalysisResult. ``projection`` is None when the search did
        not converge; inspect ``solver`` for diagnostics.
    """
    settings = settings or SolverSettings()

    mortgage_payment = scenario.mortgage.monthly_payment
    logger.info(f"Mortgage payment ${mortgage_payment:,.2f}")

    solver = solve_starting_payment(
        scenario.loan, scenario.policy, mortgage_payment, settings
    )
    projection = None
    if solver.converged:
        projection = project_schedule(
            scenario.loan,
            scenario.policy,
            mortgage_payment,
            scenario.household,
            starting_payment=solver.starting_payment,
        )
    else:
        logger.warning("No starting payment amortizes the loan; projection skipped")

    return HouseholdAnalysisResult(
        scenario=scenario,
        mortgage_payment=mortgage_payment,
        solver=solver,
        projection=projection,
    )
