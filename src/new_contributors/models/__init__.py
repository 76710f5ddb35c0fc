# models package
from new_contributors.models.contributors import (
    ContributionBucket,
    ContributorStructure,
    ContributorSummary,
    FirstCommitAuthor,
    RepositoryMetadata,
    RepositoryRef,
)

__all__ = [
    'ContributionBucket',
    'ContributorStructure',
    'ContributorSummary',
    'FirstCommitAuthor',
    'RepositoryMetadata',
    'RepositoryRef',
]
