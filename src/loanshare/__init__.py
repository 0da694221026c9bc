# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Loanshare - Escalating Loan and Shared Household Cost Projection

Solves the starting payment of a loan whose payment escalates with
inflation (optionally coupled to a fixed mortgage payment), projects it
month by month, and splits the resulting household costs per person.

Key Entry Points:
- loanshare.fixed_annuity_payment() - Level payment of a fixed-rate loan
- loanshare.solve_starting_payment() - Bisection search for the starting payment
- loanshare.project_schedule() - Month-by-month projection
- loanshare.individual_share() - Per-person monthly cost
- loanshare.analysis.run() - End-to-end pipeline over a HouseholdScenario

Example Usage:
    ```python
    from loanshare import InflationPolicy, LoanTerms, HouseholdTerms
    from loanshare import fixed_annuity_payment, project_schedule

    mortgage_payment = fixed_annuity_payment(1_015_000, 3.625, 30)
    result = project_schedule(
        LoanTerms(principal=454_741.93, annual_interest_rate_percent=5, term_years=30),
        InflationPolicy(annual_inflation_rate_percent=2, couple_to_mortgage_payment=True),
        mortgage_payment,
        HouseholdTerms(num_people=4, monthly_utilities=800, utility_inflation_rate_percent=3),
    )
    print(f"Starting payment: ${result.starting_payment:,.2f}")
    ```
"""

import importlib
import logging

from .core import InvalidParameterError, NotConvergedError, SolverSettings
from .debt import (
    InflationPolicy,
    LoanTerms,
    SolverResult,
    fixed_annuity_payment,
    solve_starting_payment,
)
from .household import HouseholdTerms, individual_share
from .projection import ProjectionPoint, ProjectionResult, project_schedule

# Library logging stays silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [  # noqa: F822 - lazy loading
    # Functional surface
    "fixed_annuity_payment",
    "solve_starting_payment",
    "project_schedule",
    "individual_share",
    # Parameter records and results
    "LoanTerms",
    "InflationPolicy",
    "HouseholdTerms",
    "SolverSettings",
    "SolverResult",
    "ProjectionPoint",
    "ProjectionResult",
    # Errors
    "InvalidParameterError",
    "NotConvergedError",
    # Subpackages
    "analysis",
    "reporting",
]


_LAZY_MODULES = {
    "analysis": "loanshare.analysis",
    "reporting": "loanshare.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'loanshare' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
