"""Shared value types and representation tables."""
