"""Feed storage layer.

This module persists the published feed as a JSON array.
It owns reading, fallback on damaged files, and wholesale rewrites.
"""
