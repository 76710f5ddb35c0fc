# src/new_contributors/services/new_contributors.py
"""
Service answering "who were the new contributors to a repository, by month?".

Coordinates the four pipeline stages without containing the logic of any:
1. Repository lookup (adapter)
2. Parameter validation
3. Contributor resolution (only on cache miss or refetch)
4. Bucketing, caching and projection
"""

import logging
from typing import Any, Dict, Optional, Union

from new_contributors.adapters.github_api import GitHubRESTAdapter
from new_contributors.cache.contributor_cache import ContributorCache
from new_contributors.config.settings import GitHubConfig
from new_contributors.models.contributors import ContributorStructure, RepositoryRef
from new_contributors.services.bucketing import (
    build_contributor_structure,
    project_contributors,
)
from new_contributors.services.contributor_resolver import ContributorResolver
from new_contributors.services.validation import validate_date_params

logger = logging.getLogger(__name__)


def parse_refetch_flag(value: Union[str, bool, None]) -> bool:
    """Only the exact string "true" (or a real True) requests a refetch."""
    if isinstance(value, bool):
        return value
    return value == 'true'


class NewContributorsService:
    """
    Entry point of the new contributors pipeline.

    One instance owns one cache, so repeated requests against the same
    instance reuse earlier resolutions until a refetch replaces them.
    """

    def __init__(
        self,
        github_config: GitHubConfig,
        adapter: Optional[GitHubRESTAdapter] = None,
        cache: Optional[ContributorCache] = None
    ):
        """
        Initialize the service.

        Args:
            github_config: Configuration for GitHub API access
            adapter: Pre-built adapter, created lazily from config if omitted
            cache: Shared cache, a private one is created if omitted
        """
        self._github_config = github_config
        self._github_adapter = adapter
        self._cache = cache if cache is not None else ContributorCache()

    def _ensure_initialized(self) -> GitHubRESTAdapter:
        """Lazy initialization of the adapter."""
        if self._github_adapter is None:
            self._github_adapter = GitHubRESTAdapter(self._github_config)
        return self._github_adapter

    @property
    def cache(self) -> ContributorCache:
        return self._cache

    def _load_structure(self, repo: RepositoryRef, refetch: bool) -> ContributorStructure:
        """Return the cached structure, resolving it first on miss or refetch."""
        key = repo.full_name
        if not refetch:
            # Readers of a populated key never wait on a running refetch
            cached = self._cache.get(key)
            if cached is not None:
                logger.info(f"Cache hit for {key}")
                return cached

        with self._cache.lock_for(key):
            cached = self._cache.get(key)
            if cached is not None and not refetch:
                logger.info(f"Cache hit for {key}")
                return cached

            logger.info(f"{'Refetching' if refetch else 'Cache miss for'} {key}, resolving contributors")
            resolver = ContributorResolver(
                self._ensure_initialized(),
                candidate_limit=self._github_config.candidate_limit
            )
            structure = build_contributor_structure(resolver.resolve(repo))
            self._cache.replace(key, structure)
            return structure

    def compute_new_contributors(
        self,
        repo_name: str,
        year: Optional[str] = None,
        month: Optional[str] = None,
        refetch: bool = False
    ) -> Dict[str, Any]:
        """
        Report first-time contributors of a repository.

        Args:
            repo_name: Repository name within the configured organization
            year: Optional four-digit year to narrow the report
            month: Optional two-digit month, used only with a year
            refetch: Ignore and replace any cached resolution

        Returns:
            Dictionary with org, repository, the supplied year/month and
            newContributors projected to the requested granularity

        Raises:
            BadRequest: If year/month are invalid for this repository
            NotFound: If the repository does not exist
            RateLimited: If the GitHub quota is exhausted
            UpstreamFailure: On any other GitHub or network failure
        """
        repo = RepositoryRef(org=self._github_config.org, name=repo_name)
        metadata = self._ensure_initialized().get_repository(repo)

        validate_date_params(metadata.created_at, year, month)

        structure = self._load_structure(repo, refetch)

        result: Dict[str, Any] = {
            'org': repo.org,
            'repository': repo_name
        }
        if year:
            result['year'] = year
            if month:
                result['month'] = month
        result['newContributors'] = project_contributors(structure, year, month)
        return result

    def close(self) -> None:
        if self._github_adapter is not None:
            self._github_adapter.close()
            self._github_adapter = None

    def __enter__(self) -> 'NewContributorsService':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
