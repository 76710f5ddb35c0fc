# config package
from new_contributors.config.settings import GitHubConfig

__all__ = ['GitHubConfig']
