"""Shared core models.

This module holds typed timeline models, configuration, errors,
and logging setup used by every other layer.
"""
