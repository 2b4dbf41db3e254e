"""Sheet ingestion pipeline.

This module fetches and parses the editorial sheet export.
It prepares validated feed items for the merge and store layers.
"""
