# cache package
from new_contributors.cache.contributor_cache import ContributorCache

__all__ = ['ContributorCache']
