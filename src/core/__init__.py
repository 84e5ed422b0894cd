"""Shared core models.

This module holds errors, constants, typed models, configuration,
and logging used by every other package.
"""
