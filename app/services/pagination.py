"""
Page arithmetic shared by the listing endpoints.
"""
import math


def page_offset(page: int, limit: int) -> int:
    """Number of records to skip for a 1-based page."""
    return (page - 1) * limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)
