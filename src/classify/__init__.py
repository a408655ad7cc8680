"""Timeline classification layer.

This module turns raw event and change records into typed variants.
Any record that fails classification fails its whole container.
"""
