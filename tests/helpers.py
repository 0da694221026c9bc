# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Independent financial formulas used to validate the library (no library imports)."""

from __future__ import annotations


def manual_annuity_payment(principal: float, annual_rate_percent: float, years: int) -> float:
    """
    Standard mortgage formula.

    Formula: M = P * [r(1+r)^n] / [(1+r)^n - 1]
    """
    n = years * 12
    if annual_rate_percent <= 0:
        return principal / n
    r = annual_rate_percent / 100 / 12
    return principal * r * (1 + r) ** n / ((1 + r) ** n - 1)
