# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tabular views of a loan projection.

Monthly detail, calendar-year rollups, and a headline summary, returned as
pandas objects ready for display or export by the caller.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd

from ..projection import ProjectionResult


def schedule_dataframe(
    result: ProjectionResult, start_date: Optional[pd.Period] = None
) -> pd.DataFrame:
    """Monthly schedule; see ProjectionResult.to_dataframe."""
    return result.to_dataframe(start_date=start_date)


def annual_summary(result: ProjectionResult) -> pd.DataFrame:
    """
    Roll the monthly schedule up to loan years.

    Returns:
        DataFrame indexed by zero-based loan year with columns:
            - Monthly Payment: Payment in force during the year
            - Total Payment: Sum of the year's payments
            - Per Person Share: Average monthly share per person
            - End Balance: Balance after the year's last payment
    """
    df = result.to_dataframe()
    summary = df.groupby("Year").agg(
        **{
            "Monthly Payment": ("Payment", "first"),
            "Total Payment": ("Payment", "sum"),
            "Per Person Share": ("Per Person Share", "mean"),
            "End Balance": ("Balance", "last"),
        }
    )
    return summary


def projection_summary(result: ProjectionResult) -> pd.Series:
    """
    Headline figures for a projection.

    Returns:
        Series with:
            - Months: Number of months projected
            - Starting Payment: Solved first-month payment
            - Final Payment: Payment in the last month
            - Total Payments: Sum of all loan payments
            - Mortgage Payment: Fixed mortgage payment
            - Peak Per Person Share: Largest monthly share per person
            - Final Balance: Residual balance (within solver tolerance of zero)
    """
    return pd.Series(
        {
            "Months": len(result.series),
            "Starting Payment": result.starting_payment,
            "Final Payment": result.series[-1].monthly_payment,
            "Total Payments": result.total_payment,
            "Mortgage Payment": result.mortgage_payment,
            "Peak Per Person Share": max(p.per_person_share for p in result.series),
            "Final Balance": result.final_balance,
        }
    )
