# src/new_contributors/services/bucketing.py
from typing import Any, Dict, Iterable, List, Optional, Union

from new_contributors.models.contributors import (
    ContributionBucket,
    ContributorStructure,
    FirstCommitAuthor,
)

Projection = Union[Dict[str, Any], List[Any]]


def build_contributor_structure(authors: Iterable[FirstCommitAuthor]) -> ContributorStructure:
    """Group authors by the UTC year and month of their first commit."""
    structure: ContributorStructure = {}
    for author in authors:
        authored_at = author.authored_at
        year = f"{authored_at.year:04d}"
        month = f"{authored_at.month:02d}"
        structure.setdefault(year, {}).setdefault(month, ContributionBucket()).add(author)
    return structure


def structure_to_dict(structure: ContributorStructure) -> Dict[str, Dict[str, dict]]:
    return {
        year: {month: bucket.to_dict() for month, bucket in months.items()}
        for year, months in structure.items()
    }


def project_contributors(
    structure: ContributorStructure,
    year: Optional[str] = None,
    month: Optional[str] = None
) -> Projection:
    """
    Narrow the cached structure to the requested granularity.

    Keys are matched exactly as given, so month "3" does not find bucket
    "03". Absent years or months project to an empty list.
    """
    if year and month:
        bucket = structure.get(year, {}).get(month)
        return bucket.to_dict() if bucket is not None else []

    if year:
        months = structure.get(year)
        if not months:
            return []
        return {
            'totalCount': sum(bucket.total_count for bucket in months.values()),
            'monthlyContributors': {m: bucket.to_dict() for m, bucket in months.items()}
        }

    return structure_to_dict(structure)
