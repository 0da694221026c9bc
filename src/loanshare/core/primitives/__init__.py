# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Loanshare Core Primitives

Building blocks shared by every calculation: the immutable model base,
constrained numeric types, and solver configuration.
"""

from .model import Model
from .settings import SolverSettings
from .types import MonthIndex, NonNegativeFloat, PositiveFloat, PositiveInt

__all__ = [
    # Core models
    "Model",
    # Settings
    "SolverSettings",
    # Types
    "MonthIndex",
    "NonNegativeFloat",
    "PositiveFloat",
    "PositiveInt",
]
