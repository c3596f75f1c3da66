"""Utility functions for nxerp."""

from nxerp.utils.date_parser import parse_date
from nxerp.utils.amount_parser import parse_amount
from nxerp.utils.logging_config import setup_logging

__all__ = ["parse_date", "parse_amount", "setup_logging"]
