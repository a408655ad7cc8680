"""Feed decoding entry points.

This module composes raw parsing, classification, and template resolution
into one call that returns a complete typed timeline or raises.
"""
