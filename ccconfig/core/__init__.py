# SPDX-License-Identifier: MIT
"""Core override resolution: resolved state, resolver, validator and errors."""
