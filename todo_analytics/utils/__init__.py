"""Utility functions."""

from .config import load_config, get_default_config
from .datetime_utils import local_date_key, iso_week_key, month_key
from .logging_config import setup_logging
from .text_utils import extract_hashtags, extract_page_links, format_number

__all__ = [
    'load_config',
    'get_default_config',
    'local_date_key',
    'iso_week_key',
    'month_key',
    'setup_logging',
    'extract_hashtags',
    'extract_page_links',
    'format_number',
]
