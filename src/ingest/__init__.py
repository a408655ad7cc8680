"""Feed ingestion layer.

This module reads feed documents and destructures them into raw records.
It prepares loosely-typed input for the classification layer.
"""
