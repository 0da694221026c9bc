# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field

# constrained types
MonthIndex = Annotated[int, Field(ge=0)]
PositiveInt = Annotated[int, Field(gt=0)]
PositiveFloat = Annotated[float, Field(gt=0)]
NonNegativeFloat = Annotated[float, Field(ge=0)]
