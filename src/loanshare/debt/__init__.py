# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .annuity import fixed_annuity_payment
from .recurrence import (
    RecurrenceState,
    advance,
    final_balance,
    is_escalation_month,
    simulate_term,
)
from .solver import SolverResult, solve_starting_payment
from .terms import InflationPolicy, LoanTerms

__all__ = [
    # Parameter records
    "LoanTerms",
    "InflationPolicy",
    # Payment calculations
    "fixed_annuity_payment",
    # Monthly recurrence
    "RecurrenceState",
    "advance",
    "final_balance",
    "is_escalation_month",
    "simulate_term",
    # Starting payment search
    "SolverResult",
    "solve_starting_payment",
]
