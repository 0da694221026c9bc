# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Starting-payment search for escalating-payment loans.

Finds the first-month payment that, escalated by the inflation policy
every year, retires the loan exactly at the end of its term. The
end-of-term balance is monotonically decreasing in the starting payment,
so a bisection over [0, ∞) is sufficient: the upper bound is found by
doubling until the loan is over-paid, then the bracket is halved.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import Field, model_validator

from ..core.exceptions import NotConvergedError
from ..core.primitives import Model, SolverSettings
from .recurrence import final_balance
from .terms import InflationPolicy, LoanTerms

logger = logging.getLogger(__name__)


class SolverResult(Model):
    """
    Outcome of the starting-payment search.

    Either converged with a ``starting_payment``, or not converged with
    ``starting_payment`` left as None. ``final_balance`` is the end-of-term
    balance of the last payment tried in both cases.
    """

    converged: bool
    starting_payment: Optional[float] = None
    iterations: int = Field(..., ge=0)
    final_balance: float

    @model_validator(mode="after")
    def check_payment_matches_outcome(self) -> "SolverResult":
        if self.converged and self.starting_payment is None:
            raise ValueError("a converged result requires starting_payment")
        if not self.converged and self.starting_payment is not None:
            raise ValueError("starting_payment must be None when not converged")
        return self

    def unwrap(self) -> float:
        """Return the starting payment or raise NotConvergedError."""
        if not self.converged:
            raise NotConvergedError(self.iterations, self.final_balance)
        return self.starting_payment


def solve_starting_payment(
    loan: LoanTerms,
    policy: InflationPolicy,
    mortgage_payment: float,
    settings: Optional[SolverSettings] = None,
) -> SolverResult:
    """
    Solve for the starting monthly payment that fully amortizes ``loan``.

    Each iteration re-simulates the entire term from the original principal.
    The initial guess is the level annuity payment of the loan.

    Args:
        loan: Loan to amortize
        policy: Annual escalation rule for the payment
        mortgage_payment: Fixed mortgage payment the escalation may be coupled to
        settings: Iteration budget and balance tolerance

    Returns:
        SolverResult; check ``converged`` before using ``starting_payment``
    """
    settings = settings or SolverSettings()

    mid = loan.monthly_payment
    low = 0.0
    high: Optional[float] = None
    balance = 0.0

    for iteration in range(1, settings.max_iterations + 1):
        balance = final_balance(loan, policy, mortgage_payment, mid)
        logger.debug(
            f"Iteration {iteration}: payment ${mid:,.6f} leaves ${balance:,.6f}"
        )

        if abs(balance) < settings.tolerance:
            logger.info(
                f"Starting payment ${mid:,.2f} converged after {iteration} iterations"
            )
            return SolverResult(
                converged=True,
                starting_payment=mid,
                iterations=iteration,
                final_balance=balance,
            )

        if balance > 0:
            # Under-paid: raise the floor, then double until over-paid
            low = mid
            mid = mid * 2 if high is None else (mid + high) / 2
        else:
            high = mid
            mid = (mid + low) / 2

    logger.warning(
        f"Starting payment search exhausted {settings.max_iterations} iterations "
        f"(last balance ${balance:,.2f})"
    )
    return SolverResult(
        converged=False,
        starting_payment=None,
        iterations=settings.max_iterations,
        final_balance=balance,
    )
