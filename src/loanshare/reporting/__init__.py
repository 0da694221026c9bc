# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .schedule import annual_summary, projection_summary, schedule_dataframe

__all__ = [
    "annual_summary",
    "projection_summary",
    "schedule_dataframe",
]
