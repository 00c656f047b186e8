# btocore Test Suite
# Copyright 2024 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
btocore test suite.

Unit tests for the primitives, ledgers, eligibility engine, registry,
reporting and service layer, plus integration tests of the full
application flow.
"""
