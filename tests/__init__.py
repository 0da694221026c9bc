# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Loanshare test suite.

Unit, integration and end-to-end tests for the projection engine.
"""
