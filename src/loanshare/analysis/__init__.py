# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .api import run
from .results import HouseholdAnalysisResult
from .scenario import HouseholdScenario

__all__ = [
    "HouseholdAnalysisResult",
    "HouseholdScenario",
    "run",
]
