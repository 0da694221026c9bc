# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Closed-form fixed-rate loan payment"""

import numpy_financial as npf

from ..core.exceptions import InvalidParameterError


def fixed_annuity_payment(
    principal: float, annual_rate_percent: float, term_years: int
) -> float:
    """
    Monthly payment that fully amortizes a fixed-rate loan over its term.

    Formula: M = P * i / (1 - (1 + i)^-n)
    Where:
        i = annual_rate_percent / 100 / 12
        n = term_years * 12

    A rate at or below zero is treated as an interest-free loan repaid in
    equal straight-line installments.

    Args:
        principal: Amount borrowed
        annual_rate_percent: Nominal annual rate in percent (e.g. 6 for 6%)
        term_years: Loan term in whole years

    Returns:
        Monthly payment amount

    Raises:
        InvalidParameterError: If the term is not positive or the principal is negative

    Example:
        >>> round(fixed_annuity_payment(100_000, 6, 30), 2)
        599.55
    """
    if term_years <= 0:
        raise InvalidParameterError(f"term_years must be positive, got {term_years}")
    if principal < 0:
        raise InvalidParameterError(f"principal must be non-negative, got {principal}")

    total_payments = term_years * 12
    if annual_rate_percent <= 0:
        return principal / total_payments

    monthly_rate = annual_rate_percent / 100 / 12
    # pmt() follows cash flow sign convention: borrowed money in, payments out
    return float(npf.pmt(monthly_rate, total_payments, -principal))
