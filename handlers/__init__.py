"""
Handlers for range-based operations.
"""
