"""
Utilities package for imgdedupe.

Provides:
- formatters: Human-readable formatting for numbers and file sizes
- validators: Input validation for directories
"""

from __future__ import annotations

from . import formatters
from . import validators

from .formatters import format_number, format_size
from .validators import validate_directory

__all__ = [
    # Submodules
    'formatters',
    'validators',
    # Formatters
    'format_number',
    'format_size',
    # Validators
    'validate_directory',
]
