# src/new_contributors/services/validation.py
"""
Validation of caller-supplied year/month against repository history.

Runs before any contributor listing so bad requests cost one metadata call.
"""

import logging
import re
from datetime import datetime
from typing import Optional

from new_contributors.errors import BadRequest

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


def parse_leading_int(value: str) -> Optional[int]:
    """
    Parse the leading integer of a string, ignoring anything after it.

    "2013" -> 2013, "05" -> 5, "2013abc" -> 2013, "abc" -> None
    """
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


def validate_date_params(
    created_at: datetime,
    year: Optional[str],
    month: Optional[str]
) -> None:
    """
    Reject year/month filters that cannot match any contributor.

    Args:
        created_at: Repository creation time (UTC)
        year: Requested four-digit year, or None for an unscoped query
        month: Requested month, only checked when a year is given

    Raises:
        BadRequest: If the year is not a number or precedes creation, if
            the month precedes creation within the creation year, or if
            the month is outside 1-12
    """
    if not year:
        return

    query_year = parse_leading_int(year)
    if query_year is None or query_year < created_at.year:
        raise BadRequest('Requested year is before repository creation date.')

    if not month:
        return

    query_month = parse_leading_int(month)
    if query_month is None:
        # Non-numeric months are not rejected; projection finds no bucket
        logger.warning(f"Month {month!r} is not numeric and was not validated")
        return

    if query_year == created_at.year and query_month < created_at.month:
        raise BadRequest('Requested month is before repository creation date.')

    if query_month < 1 or query_month > 12:
        raise BadRequest('Invalid month. Must be between 01 and 12.')
