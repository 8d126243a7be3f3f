"""
Formatting utilities for imgdedupe.

Provides human-readable formatting for numbers and file sizes.
"""

from __future__ import annotations

# Re-export format_size from models for convenience
from ..models import format_size


def format_number(n: int) -> str:
    """
    Format large numbers with commas for readability.

    Examples:
        >>> format_number(1234567)
        '1,234,567'
    """
    return f"{n:,}"


__all__ = ['format_number', 'format_size']
