# adapters package
from new_contributors.adapters.github_api import GitHubRESTAdapter, format_reset_time

__all__ = ['GitHubRESTAdapter', 'format_reset_time']
