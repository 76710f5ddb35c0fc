# src/new_contributors/services/contributor_resolver.py
"""
Resolution of each candidate contributor's earliest authored commit.

Only a bounded prefix of the contributor listing is resolved. GitHub
orders the listing by contribution count, so the candidates are the most
active contributors, not every contributor the repository ever had.
"""

import logging
from typing import List, Set

from new_contributors.adapters.github_api import GitHubRESTAdapter
from new_contributors.models.contributors import FirstCommitAuthor, RepositoryRef

logger = logging.getLogger(__name__)


class ContributorResolver:
    """
    Resolves first commits for the first ``candidate_limit`` contributors.

    Every remote call is sequential. Any failure propagates out of
    ``resolve`` unchanged so the caller never sees a partial result.
    """

    def __init__(self, adapter: GitHubRESTAdapter, candidate_limit: int = 12):
        self._adapter = adapter
        self._candidate_limit = candidate_limit

    def resolve(self, repo: RepositoryRef) -> List[FirstCommitAuthor]:
        """
        Run one full resolution pass.

        Args:
            repo: Repository to resolve

        Returns:
            First-commit authors in candidate order, at most one per login
        """
        contributors = self._adapter.list_contributors(repo)
        candidates = contributors[:self._candidate_limit]

        seen: Set[str] = set()
        authors: List[FirstCommitAuthor] = []

        for contributor in candidates:
            login = contributor.login
            if login in seen:
                continue
            seen.add(login)

            author = self._adapter.get_first_commit_author(repo, login)
            if author is None:
                logger.debug(f"No authored commit found for {login}, skipping")
                continue

            authors.append(author)

        logger.info(
            f"Resolved {len(authors)} of {len(candidates)} candidates "
            f"({len(contributors):,} contributors listed) for {repo.full_name}"
        )
        return authors
