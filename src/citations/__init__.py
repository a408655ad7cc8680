"""Citation and description template resolution.

This module classifies raw template dictionaries by name and resolves
their fields through ordered alias chains. Failures are dropped silently.
"""
