# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Per-person split of monthly household costs"""

from .terms import HouseholdTerms


def inflated_utilities(month: int, household: HouseholdTerms) -> float:
    """Utilities for ``month``, compounded once for each completed year."""
    year = month // 12
    return household.monthly_utilities * (
        1 + household.utility_inflation_rate_percent / 100
    ) ** year


def individual_share(
    loan_monthly_payment: float,
    month: int,
    household: HouseholdTerms,
    mortgage_payment: float,
) -> float:
    """
    Each person's share of the loan payment, utilities and mortgage payment.

    Example:
        >>> household = HouseholdTerms(
        ...     num_people=4, monthly_utilities=800, utility_inflation_rate_percent=10
        ... )
        >>> round(individual_share(1000, 12, household, 2000), 2)
        970.0
    """
    total = loan_monthly_payment + inflated_utilities(month, household) + mortgage_payment
    return total / household.num_people
