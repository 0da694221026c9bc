#!/usr/bin/env python3
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared Household Loan Example

Four people share a house. The house carries a $1,015,000 mortgage at
3.625% over 30 years, and a separate $454,741.93 loan at 5% over 30 years
covers the rest of the purchase. Rather than paying the loan off in level
installments, the household wants its combined loan + mortgage outlay to
grow 2% a year, roughly in line with income growth.

The analysis:

1. Computes the level mortgage payment
2. Solves the loan's starting payment so the escalating payments retire it
   exactly at the end of year 30
3. Projects the loan month by month and splits the loan, mortgage and
   utilities (starting at $800/month, growing 3% a year) four ways
"""

import logging

from loanshare.analysis import HouseholdScenario, run
from loanshare.debt import InflationPolicy, LoanTerms
from loanshare.household import HouseholdTerms


def create_scenario() -> HouseholdScenario:
    return HouseholdScenario(
        loan=LoanTerms(principal=454_741.93, annual_interest_rate_percent=5, term_years=30),
        policy=InflationPolicy(annual_inflation_rate_percent=2, couple_to_mortgage_payment=True),
        mortgage=LoanTerms(principal=1_015_000, annual_interest_rate_percent=3.625, term_years=30),
        household=HouseholdTerms(
            num_people=4, monthly_utilities=800, utility_inflation_rate_percent=3
        ),
        start_date="2025-01",
    )


def print_results(result) -> None:
    print("=" * 80)
    print("SHARED HOUSEHOLD LOAN PROJECTION")
    print("=" * 80)
    print(f"Mortgage Payment: ${result.mortgage_payment:,.2f}/month")

    if not result.converged:
        print(
            f"No starting payment found after {result.solver.iterations} iterations "
            f"(last balance ${result.solver.final_balance:,.2f})"
        )
        return

    summary = result.summary
    print(f"Starting Loan Payment: ${summary['Starting Payment']:,.2f}/month "
          f"(solved in {result.solver.iterations} iterations)")
    print(f"Final Loan Payment: ${summary['Final Payment']:,.2f}/month")
    print(f"Total Loan Payments: ${summary['Total Payments']:,.0f}")
    print(f"Residual Balance: ${summary['Final Balance']:,.4f}")
    print()

    print("ANNUAL SCHEDULE (every 5 years):")
    print("-" * 80)
    annual = result.annual
    print(annual.iloc[::5].to_string(float_format=lambda v: f"{v:,.2f}"))
    print()
    print("=" * 80)


def main():
    """Run the shared household projection and print a summary."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    result = run(create_scenario())
    print_results(result)
    return result


if __name__ == "__main__":
    # Execute the example
    results = main()
