# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Loan and inflation parameter records"""

from __future__ import annotations

from pydantic import Field

from ..core.primitives import Model, PositiveFloat, PositiveInt
from .annuity import fixed_annuity_payment


class LoanTerms(Model):
    """
    Terms of a fixed-rate amortizing loan.

    Attributes:
        principal: Amount borrowed
        annual_interest_rate_percent: Nominal annual rate in percent (5 means 5%)
        term_years: Loan term in whole years

    Example:
        >>> loan = LoanTerms(principal=100_000, annual_interest_rate_percent=6, term_years=30)
        >>> loan.term_months
        360
        >>> round(loan.monthly_payment, 2)
        599.55
    """

    principal: PositiveFloat
    annual_interest_rate_percent: float = Field(
        ..., description="Nominal annual interest rate in percent (e.g. 5.0 for 5%)"
    )
    term_years: PositiveInt

    @property
    def term_months(self) -> int:
        return self.term_years * 12

    @property
    def monthly_rate(self) -> float:
        """Monthly interest rate as a decimal; zero for non-positive annual rates."""
        if self.annual_interest_rate_percent <= 0:
            return 0.0
        return self.annual_interest_rate_percent / 100 / 12

    @property
    def monthly_payment(self) -> float:
        """Level monthly payment that amortizes this loan over its term."""
        return fixed_annuity_payment(
            self.principal, self.annual_interest_rate_percent, self.term_years
        )


class InflationPolicy(Model):
    """
    Annual escalation rule for a loan's own monthly payment.

    When ``couple_to_mortgage_payment`` is set, it is the combined loan
    payment plus mortgage payment that grows at the inflation rate; the
    loan payment absorbs the whole increase since the mortgage payment is
    fixed.

    Attributes:
        annual_inflation_rate_percent: Yearly escalation in percent (2 means 2%)
        couple_to_mortgage_payment: Escalate loan + mortgage as one stream
    """

    annual_inflation_rate_percent: float = Field(
        default=0.0, description="Annual payment escalation in percent"
    )
    couple_to_mortgage_payment: bool = Field(
        default=False,
        description="Apply inflation to the loan payment plus the mortgage payment",
    )

    @property
    def growth_factor(self) -> float:
        return 1 + self.annual_inflation_rate_percent / 100
