# SPDX-License-Identifier: MIT
"""Configuration loading: environment snapshot, JSON schema and loaders."""
