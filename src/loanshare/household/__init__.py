# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .allocation import individual_share, inflated_utilities
from .terms import HouseholdTerms

__all__ = [
    "HouseholdTerms",
    "individual_share",
    "inflated_utilities",
]
