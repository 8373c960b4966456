# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for jobopts.

This module collects the configuration, error types, structured logging and
small helpers used across the jobopts codebase.
"""
