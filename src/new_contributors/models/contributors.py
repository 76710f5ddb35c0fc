# src/new_contributors/models/contributors.py
"""
Data models for the new contributors pipeline.

Wire-facing models are immutable and built through ``from_api_response``
factories, which translate GitHub REST payloads into our own types and
reject malformed shapes instead of letting missing fields travel further.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def parse_github_timestamp(value: str) -> datetime:
    """
    Parse an ISO 8601 timestamp as GitHub renders it.

    Args:
        value: Timestamp such as "2013-05-24T16:15:54Z"

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        TypeError: If value is not a string
        ValueError: If value is not a valid timestamp
    """
    if not isinstance(value, str):
        raise TypeError(f"timestamp must be a string, got {type(value).__name__}")
    parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass(frozen=True)
class RepositoryRef:
    """Organization + repository name pair identifying one repository."""
    org: str
    name: str

    @property
    def full_name(self) -> str:
        """Return the full repository name in org/repo format."""
        return f"{self.org}/{self.name}"


@dataclass(frozen=True)
class RepositoryMetadata:
    """Repository facts needed to validate a request. Never cached."""
    name: str
    full_name: str
    created_at: datetime       # Always UTC

    @classmethod
    def from_api_response(cls, data: Any) -> 'RepositoryMetadata':
        """
        Create RepositoryMetadata from a GET /repos/{org}/{repo} response.

        Raises:
            KeyError: If required fields are missing
            TypeError: If the payload or a field has the wrong type
            ValueError: If created_at is not a valid timestamp
        """
        if not isinstance(data, dict):
            raise TypeError("repository payload must be an object")

        created_at = data.get('created_at')
        if not created_at:
            raise KeyError("created_at is required")

        name = data.get('name')
        if not name:
            raise KeyError("name is required")

        return cls(
            name=str(name),
            full_name=str(data.get('full_name') or name),
            created_at=parse_github_timestamp(created_at)
        )


@dataclass(frozen=True)
class ContributorSummary:
    """One entry of the contributor listing, in provider order."""
    login: str
    raw: Dict[str, Any] = field(repr=False, compare=False)

    @classmethod
    def from_api_response(cls, item: Any) -> 'ContributorSummary':
        if not isinstance(item, dict):
            raise TypeError("contributor entry must be an object")
        login = item.get('login')
        if not login or not isinstance(login, str):
            raise KeyError("login is required")
        return cls(login=login, raw=item)


@dataclass(frozen=True)
class FirstCommitAuthor:
    """
    Author block of a contributor's earliest commit.

    ``date`` keeps GitHub's string verbatim so it is echoed back to callers
    unchanged; ``authored_at`` is the parsed form used for bucketing.
    """
    name: str
    email: str
    date: str

    @classmethod
    def from_api_response(cls, commits: Any) -> Optional['FirstCommitAuthor']:
        """
        Pick the author of the first commit in a GET /commits response.

        Returns:
            FirstCommitAuthor, or None when the list holds no commit or the
            commit has no author block

        Raises:
            TypeError: If the payload is not a list of objects
            ValueError: If the author date is not a valid timestamp
        """
        if not isinstance(commits, list):
            raise TypeError("commit listing must be an array")
        if not commits:
            return None

        first = commits[0]
        if not isinstance(first, dict):
            raise TypeError("commit entry must be an object")

        commit = first.get('commit') or {}
        if not isinstance(commit, dict):
            raise TypeError("commit must be an object")

        author = commit.get('author')
        if not author:
            return None
        if not isinstance(author, dict):
            raise TypeError("commit.author must be an object")

        date = author.get('date')
        parse_github_timestamp(date)  # validate only

        return cls(
            name=str(author.get('name') or ''),
            email=str(author.get('email') or ''),
            date=date
        )

    @property
    def authored_at(self) -> datetime:
        return parse_github_timestamp(self.date)

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'email': self.email,
            'date': self.date
        }


@dataclass
class ContributionBucket:
    """
    First-time contributors of one month.

    Only ``add`` should grow the bucket so that ``total_count`` always
    equals ``len(contributors)``.
    """
    total_count: int = 0
    contributors: List[FirstCommitAuthor] = field(default_factory=list)

    def add(self, author: FirstCommitAuthor) -> None:
        self.contributors.append(author)
        self.total_count += 1

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'totalCount': self.total_count,
            'contributors': [c.to_dict() for c in self.contributors]
        }


# year ("2013") -> month ("05") -> bucket
ContributorStructure = Dict[str, Dict[str, ContributionBucket]]
