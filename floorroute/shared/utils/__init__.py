"""Shared utilities."""
from .logging_utils import setup_logging, get_logger, get_context_logger, ContextLogger
from .validation_utils import (
    validate_grid_dimensions, validate_location
)

__all__ = [
    'setup_logging', 'get_logger', 'get_context_logger', 'ContextLogger',
    'validate_grid_dimensions', 'validate_location'
]
