# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional

import pandas as pd
from pydantic import Field, field_validator

from ..core.primitives import Model
from ..debt.terms import InflationPolicy, LoanTerms
from ..household.terms import HouseholdTerms


class HouseholdScenario(Model):
    """
    Complete set of inputs for a shared-household projection.

    Attributes:
        loan: Escalating-payment loan whose starting payment is solved
        policy: Escalation rule for the loan payment
        mortgage: Fixed-rate mortgage paid alongside the loan
        household: People and utilities the monthly costs are split across
        start_date: Calendar month of the first payment, used to label reports

    Example:
        >>> scenario = HouseholdScenario(
        ...     loan=LoanTerms(principal=454_741.93, annual_interest_rate_percent=5, term_years=30),
        ...     policy=InflationPolicy(annual_inflation_rate_percent=2, couple_to_mortgage_payment=True),
        ...     mortgage=LoanTerms(principal=1_015_000, annual_interest_rate_percent=3.625, term_years=30),
        ...     household=HouseholdTerms(num_people=4, monthly_utilities=800),
        ... )
    """

    loan: LoanTerms
    policy: InflationPolicy = Field(default_factory=InflationPolicy)
    mortgage: LoanTerms
    household: HouseholdTerms
    start_date: Optional[pd.Period] = None

    @field_validator("start_date", mode="before")
    @classmethod
    def coerce_start_date(cls, v):
        if v is None:
            return v
        if isinstance(v, pd.Period):
            return v.asfreq("M", how="start")
        return pd.Period(v, freq="M")
