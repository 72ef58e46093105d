"""General utility functions for the narrative engine system."""

from .logging import setup_logging

__all__ = ["setup_logging"]
