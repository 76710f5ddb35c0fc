# src/new_contributors/adapters/github_api.py
"""
Anti-corruption layer for GitHub's REST API.

This adapter:
1. Translates GitHub API responses to our domain models
2. Classifies every failed call into our error taxonomy in one place
3. Pages through contributor listings lazily with a hard page ceiling
4. Isolates external API changes from our core logic

It never retries: the first failure of any call is terminal for the request.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Generator, List, Optional

import requests

from new_contributors.config.settings import GitHubConfig
from new_contributors.errors import (
    NewContributorsError,
    NotFound,
    RateLimited,
    UpstreamFailure,
)
from new_contributors.models.contributors import (
    ContributorSummary,
    FirstCommitAuthor,
    RepositoryMetadata,
    RepositoryRef,
)

logger = logging.getLogger(__name__)

RATE_LIMIT_MARKER = 'API rate limit exceeded'

REPO_FAILURE = 'Failed to fetch repository info from GitHub.'
CONTRIBUTORS_FAILURE = 'Failed to fetch Contributors info from GitHub.'
FIRST_COMMIT_FAILURE = 'Failed to fetch First Commit info from GitHub.'


def parse_reset_header(value: Optional[str]) -> Optional[datetime]:
    """Turn an X-RateLimit-Reset epoch header into a local datetime."""
    if not value:
        return None
    try:
        return datetime.fromtimestamp(int(float(value)))
    except (TypeError, ValueError, OverflowError, OSError):
        logger.debug(f"Unparseable rate limit reset header: {value!r}")
        return None


def format_reset_time(reset_at: Optional[datetime]) -> str:
    """
    Render a reset time as a medium date with a short time.

    Example: "May 24, 2013, 3:04 PM". Returns "later" when unknown.
    """
    if reset_at is None:
        return 'later'
    hour = reset_at.hour % 12 or 12
    return (
        f"{reset_at:%b} {reset_at.day}, {reset_at.year}, "
        f"{hour}:{reset_at:%M} {reset_at:%p}"
    )


class GitHubRESTAdapter:
    """
    Anti-corruption layer for the three GitHub REST endpoints we use.

    All calls go through one ``requests.Session`` whose credentials are
    fixed at construction from the supplied ``GitHubConfig``.
    """

    def __init__(self, config: GitHubConfig, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()
        self._session.headers.update({
            'Accept': 'application/vnd.github+json',
            'User-Agent': 'New-Contributors-Tracker/1.0'
        })
        if config.token:
            self._session.headers['Authorization'] = f'Bearer {config.token}'
        else:
            logger.warning(
                "GITHUB_TOKEN not set - unauthenticated requests are limited to 60 per hour"
            )

    def _classify_github_error(
        self,
        response: requests.Response,
        failure_message: str
    ) -> NewContributorsError:
        """
        Map a failed GitHub response onto our error taxonomy.

        Shared by every call so lookup, listing and resolution failures
        are reported identically.
        """
        status = response.status_code
        message = ''
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            message = str(payload.get('message') or '')
        logger.debug(f"GitHub error {status} for {response.url}: {payload!r}")

        if status in (403, 429) and RATE_LIMIT_MARKER in message:
            reset_at = parse_reset_header(response.headers.get('X-RateLimit-Reset'))
            logger.warning(f"GitHub rate limit exceeded, resets at {reset_at or 'unknown'}")
            return RateLimited(
                f"GitHub API rate limit exceeded. "
                f"Please try again after {format_reset_time(reset_at)}.",
                reset_at=reset_at
            )

        if status == 404:
            return NotFound('Repository not found.')

        logger.error(f"GitHub API error: {status} - {message or response.reason}")
        return UpstreamFailure(failure_message)

    def _get(
        self,
        path: str,
        failure_message: str,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Issue one GET and return the decoded JSON body (None for 204)."""
        url = f"{self._config.api_base}{path}"
        try:
            response = self._session.get(url, params=params, timeout=self._config.timeout)
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise UpstreamFailure(failure_message) from e

        if not response.ok:
            raise self._classify_github_error(response, failure_message)

        if response.status_code == 204:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            raise UpstreamFailure(failure_message) from e

    def get_repository(self, repo: RepositoryRef) -> RepositoryMetadata:
        """
        Fetch repository metadata.

        Raises:
            NotFound: If the repository does not exist
            RateLimited: If the GitHub quota is exhausted
            UpstreamFailure: On any other failure, including malformed payloads
        """
        logger.info(f"Fetching repository metadata for {repo.full_name}")
        data = self._get(f"/repos/{repo.org}/{repo.name}", REPO_FAILURE)
        try:
            return RepositoryMetadata.from_api_response(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed repository payload for {repo.full_name}: {e}")
            raise UpstreamFailure(REPO_FAILURE) from e

    def iter_contributor_pages(
        self,
        repo: RepositoryRef
    ) -> Generator[List[ContributorSummary], None, None]:
        """
        Yield the contributor listing one page at a time.

        Pages are requested sequentially from page 1 and the sequence ends
        at the first empty page, or after ``max_pages`` pages if GitHub
        never returns one.

        Yields:
            Non-empty lists of ContributorSummary in provider order
        """
        per_page = self._config.per_page
        path = f"/repos/{repo.org}/{repo.name}/contributors"

        for page in range(1, self._config.max_pages + 1):
            data = self._get(
                path,
                CONTRIBUTORS_FAILURE,
                params={'per_page': per_page, 'page': page}
            )
            if data is None:
                data = []
            if not isinstance(data, list):
                logger.error(f"Contributor page {page} for {repo.full_name} is not a list")
                raise UpstreamFailure(CONTRIBUTORS_FAILURE)
            if not data:
                return

            try:
                summaries = [ContributorSummary.from_api_response(item) for item in data]
            except (KeyError, TypeError) as e:
                logger.error(f"Malformed contributor entry on page {page}: {e}")
                raise UpstreamFailure(CONTRIBUTORS_FAILURE) from e

            logger.debug(f"Contributor page {page}: {len(summaries)} entries")
            yield summaries

        logger.warning(
            f"Stopped listing contributors for {repo.full_name} after "
            f"{self._config.max_pages} pages without reaching an empty page"
        )

    def list_contributors(self, repo: RepositoryRef) -> List[ContributorSummary]:
        """Fetch the complete contributor listing."""
        contributors: List[ContributorSummary] = []
        for page in self.iter_contributor_pages(repo):
            contributors.extend(page)
        logger.info(f"Fetched {len(contributors):,} contributors for {repo.full_name}")
        return contributors

    def get_first_commit_author(
        self,
        repo: RepositoryRef,
        login: str
    ) -> Optional[FirstCommitAuthor]:
        """
        Fetch the author block of the earliest commit authored by ``login``.

        Returns:
            FirstCommitAuthor, or None if no commit is found
        """
        logger.debug(f"Resolving first commit of {login} in {repo.full_name}")
        data = self._get(
            f"/repos/{repo.org}/{repo.name}/commits",
            FIRST_COMMIT_FAILURE,
            params={
                'author': login,
                'per_page': 1,
                'sort': 'author-date',
                'order': 'asc'
            }
        )
        try:
            return FirstCommitAuthor.from_api_response(data if data is not None else [])
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed commit payload for {login}: {e}")
            raise UpstreamFailure(FIRST_COMMIT_FAILURE) from e

    def close(self):
        """Clean up resources."""
        self._session.close()
        logger.info("GitHub API adapter closed")
