# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised at the boundaries of the projection engine."""


class InvalidParameterError(ValueError):
    """A raw parameter is outside the domain the engine is defined on."""


class NotConvergedError(RuntimeError):
    """The starting-payment search exhausted its iteration budget."""

    def __init__(self, iterations: int, final_balance: float):
        # Constructor arguments stay in args so the error survives pickling
        super().__init__(iterations, final_balance)
        self.iterations = iterations
        self.final_balance = final_balance

    def __str__(self) -> str:
        return (
            f"Starting payment search did not converge after {self.iterations} iterations "
            f"(last end-of-term balance ${self.final_balance:,.2f})"
        )
