# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from ..core.primitives import Model, NonNegativeFloat, PositiveInt


class HouseholdTerms(Model):
    """
    People sharing the monthly housing costs, and the utilities they split.

    Attributes:
        num_people: Number of people splitting costs
        monthly_utilities: Utilities cost in the first year
        utility_inflation_rate_percent: Annual utility cost growth in percent
    """

    num_people: PositiveInt
    monthly_utilities: NonNegativeFloat = 0.0
    utility_inflation_rate_percent: float = Field(
        default=0.0, description="Annual utility cost growth in percent (e.g. 3 for 3%)"
    )
