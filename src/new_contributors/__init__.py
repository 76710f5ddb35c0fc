"""Report the first-time contributors of a GitHub repository by year and month."""

__version__ = '0.1.0'
