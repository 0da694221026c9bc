# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for loanshare tests.

The reference scenario is a $454,741.93 loan at 5% over 30 years whose
payment, together with a $1,015,000 3.625% mortgage payment, grows 2% a
year, shared by a four-person household.
"""

from __future__ import annotations

import pytest

from loanshare import HouseholdTerms, InflationPolicy, LoanTerms, fixed_annuity_payment


@pytest.fixture
def loan() -> LoanTerms:
    return LoanTerms(principal=454_741.93, annual_interest_rate_percent=5, term_years=30)


@pytest.fixture
def mortgage() -> LoanTerms:
    return LoanTerms(principal=1_015_000, annual_interest_rate_percent=3.625, term_years=30)


@pytest.fixture
def mortgage_payment(mortgage: LoanTerms) -> float:
    return fixed_annuity_payment(
        mortgage.principal, mortgage.annual_interest_rate_percent, mortgage.term_years
    )


@pytest.fixture
def coupled_policy() -> InflationPolicy:
    return InflationPolicy(annual_inflation_rate_percent=2, couple_to_mortgage_payment=True)


@pytest.fixture
def uncoupled_policy() -> InflationPolicy:
    return InflationPolicy(annual_inflation_rate_percent=2, couple_to_mortgage_payment=False)


@pytest.fixture
def household() -> HouseholdTerms:
    return HouseholdTerms(
        num_people=4, monthly_utilities=800, utility_inflation_rate_percent=3
    )
