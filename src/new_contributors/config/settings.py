# src/new_contributors/config/settings.py
import os
from dataclasses import dataclass


@dataclass(frozen=True)  # Immutable configuration
class GitHubConfig:
    token: str
    org: str = 'facebook'
    api_base: str = 'https://api.github.com'
    per_page: int = 100  # Contributors per listing page (max 100)
    candidate_limit: int = 12  # Contributors resolved per population pass
    max_pages: int = 400  # Hard ceiling on contributor listing pages
    timeout: float = 30.0  # Seconds per HTTP request

    @classmethod
    def from_env(cls) -> 'GitHubConfig':
        return cls(
            token=os.getenv('GITHUB_TOKEN', ''),
            org=os.getenv('GITHUB_ORG', 'facebook'),
            api_base=os.getenv('GITHUB_API_URL', 'https://api.github.com').rstrip('/'),
            per_page=int(os.getenv('GITHUB_PER_PAGE', '100')),
            candidate_limit=int(os.getenv('CANDIDATE_LIMIT', '12')),
            max_pages=int(os.getenv('MAX_CONTRIBUTOR_PAGES', '400')),
            timeout=float(os.getenv('GITHUB_TIMEOUT', '30')),
        )
