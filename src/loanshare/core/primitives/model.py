# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable value objects. Every computation receives its
    inputs as instances of these models; nothing is mutated in place.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,  # Parameters are value objects passed by parameter
        extra="forbid",  # Catches typos in parameter names immediately
    )
