# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .model import Model
from .types import PositiveFloat, PositiveInt


class SolverSettings(Model):
    """
    Configuration for the starting-payment bisection search.

    Usage Examples:
        # Default budget (100 iterations, one-cent tolerance)
        settings = SolverSettings()

        # Tighter tolerance for reconciliation reports
        settings = SolverSettings(tolerance=0.0001, max_iterations=200)
    """

    max_iterations: PositiveInt = Field(
        default=100,
        description="Maximum number of full-term simulations before giving up.",
    )
    tolerance: PositiveFloat = Field(
        default=0.01,
        description="Absolute end-of-term balance accepted as fully amortized.",
    )
