# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Chronological projection of an escalating-payment loan.

Solves the starting payment, then walks the recurrence forward month by
month, recording the balance, the payment and each person's share of the
household's monthly costs.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from ..core.primitives import Model, MonthIndex, SolverSettings
from ..debt.recurrence import RecurrenceState, advance
from ..debt.solver import solve_starting_payment
from ..debt.terms import InflationPolicy, LoanTerms
from ..household.allocation import individual_share
from ..household.terms import HouseholdTerms

logger = logging.getLogger(__name__)


class ProjectionPoint(Model):
    """One month of the projection, recorded after that month's payment."""

    month: MonthIndex
    balance: float
    monthly_payment: float
    per_person_share: float


class ProjectionResult(Model):
    """
    Full month-by-month projection of a loan.

    Attributes:
        series: Chronological points, one per month of the loan term
        total_payment: Sum of the loan's monthly payments over the term
        starting_payment: Solved first-month payment
        mortgage_payment: Fixed mortgage payment included in each share
    """

    series: Tuple[ProjectionPoint, ...]
    total_payment: float
    starting_payment: float
    mortgage_payment: float

    @property
    def final_balance(self) -> float:
        return self.series[-1].balance

    def to_dataframe(self, start_date: Optional[pd.Period] = None) -> pd.DataFrame:
        """
        Tabulate the series.

        Args:
            start_date: Calendar month of the first payment. When given the
                frame is indexed by a monthly PeriodIndex, otherwise by the
                zero-based month number.

        Returns:
            DataFrame with columns Year, Balance, Payment, Per Person Share
        """
        months = np.array([point.month for point in self.series])
        df = pd.DataFrame(
            {
                "Month": months,
                "Year": months // 12,
                "Balance": [point.balance for point in self.series],
                "Payment": [point.monthly_payment for point in self.series],
                "Per Person Share": [point.per_person_share for point in self.series],
            }
        )
        if start_date is not None:
            df.index = pd.period_range(start=start_date, periods=len(df), freq="M")
            df.index.name = "Period"
            df.drop(columns="Month", inplace=True)
        else:
            df.set_index("Month", inplace=True)
        return df


def project_schedule(
    loan: LoanTerms,
    policy: InflationPolicy,
    mortgage_payment: float,
    household: HouseholdTerms,
    settings: Optional[SolverSettings] = None,
    starting_payment: Optional[float] = None,
) -> ProjectionResult:
    """
    Project the loan over its full term from the solved starting payment.

    Args:
        loan: Loan to project
        policy: Annual escalation rule for the loan payment
        mortgage_payment: Fixed mortgage payment
        household: People and utilities the monthly costs are split across
        settings: Solver configuration
        starting_payment: Already-solved first-month payment; when given the
            search is skipped and ``settings`` is unused

    Returns:
        ProjectionResult with ``loan.term_months`` points

    Raises:
        NotConvergedError: If no starting payment amortizes the loan
            within the solver's iteration budget
    """
    if starting_payment is None:
        starting_payment = solve_starting_payment(
            loan, policy, mortgage_payment, settings
        ).unwrap()

    state = RecurrenceState(balance=loan.principal, monthly_payment=starting_payment)
    series = []
    total_payment = 0.0
    for month in range(loan.term_months):
        state = advance(state, month, loan, policy, mortgage_payment)
        share = individual_share(state.monthly_payment, month, household, mortgage_payment)
        series.append(
            ProjectionPoint(
                month=month,
                balance=state.balance,
                monthly_payment=state.monthly_payment,
                per_person_share=share,
            )
        )
        total_payment += state.monthly_payment

    logger.debug(
        f"Projected {len(series)} months: total payments ${total_payment:,.2f}, "
        f"final balance ${state.balance:,.4f}"
    )

    return ProjectionResult(
        series=tuple(series),
        total_payment=total_payment,
        starting_payment=starting_payment,
        mortgage_payment=mortgage_payment,
    )
