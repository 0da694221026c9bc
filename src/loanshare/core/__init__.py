# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .exceptions import InvalidParameterError, NotConvergedError
from .primitives import Model, SolverSettings

__all__ = [
    "InvalidParameterError",
    "Model",
    "NotConvergedError",
    "SolverSettings",
]
