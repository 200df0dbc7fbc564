"""Text and number helpers."""

import math
import re
from typing import List, Optional, Union

HASHTAG_PATTERN = re.compile(r"#(\w+)", re.ASCII)
PAGE_LINK_PATTERN = re.compile(r"\[\[(.*?)\]\]")


def extract_hashtags(text: str) -> List[str]:
    """Extract hashtag names (without '#') in order of occurrence."""
    if not text:
        return []
    return HASHTAG_PATTERN.findall(text)


def extract_page_links(text: str) -> List[str]:
    """Extract the contents of every [[page]] reference."""
    if not text:
        return []
    return PAGE_LINK_PATTERN.findall(text)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def format_number(num: Optional[Union[int, float]]) -> str:
    """Format a number with thousands separators."""
    if num is None:
        return '0'
    if isinstance(num, float) and not num.is_integer():
        whole, _, fraction = str(num).partition('.')
        return f"{int(whole):,}.{fraction}"
    return f"{int(num):,}"


def truncate(text: str, limit: int) -> str:
    """Cut text to at most `limit` characters."""
    return text[:limit]
