# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .projector import ProjectionPoint, ProjectionResult, project_schedule

__all__ = [
    "ProjectionPoint",
    "ProjectionResult",
    "project_schedule",
]
