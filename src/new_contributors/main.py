# src/new_contributors/main.py
"""
Command-line entry point for the New Contributors Tracker.

1. Load configuration from .env and the environment
2. Initialize the service
3. Compute the new contributors report
4. Print it as JSON
"""

import json
import logging
import sys
from dataclasses import replace
from typing import Optional

import click
from dotenv import load_dotenv

from new_contributors.config.settings import GitHubConfig
from new_contributors.errors import NewContributorsError
from new_contributors.services.new_contributors import (
    NewContributorsService,
    parse_refetch_flag,
)

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)  # stdout carries the JSON report
        ]
    )


@click.command()
@click.argument('repository', required=True)
@click.argument('year', required=False)
@click.argument('month', required=False)
@click.option('--refetch', is_flag=False, flag_value='true', default='false',
              help='Ignore cached results and resolve contributors again ("true" to enable)')
@click.option('--org', default=None, help='GitHub organization (default: GITHUB_ORG or facebook)')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(repository: str, year: Optional[str], month: Optional[str],
        refetch: str, org: Optional[str], verbose: bool):
    """
    Report the first-time contributors of a GitHub repository.

    REPOSITORY: Repository name inside the organization (e.g. react)
    YEAR: Optional four-digit year
    MONTH: Optional two-digit month (requires YEAR)

    Examples:
      new-contributors react 2013
      new-contributors react 2013 05 --refetch
    """
    load_dotenv()
    configure_logging(verbose)

    try:
        github_config = GitHubConfig.from_env()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)
    if org:
        github_config = replace(github_config, org=org)

    try:
        with NewContributorsService(github_config) as service:
            result = service.compute_new_contributors(
                repository, year, month, refetch=parse_refetch_flag(refetch)
            )
    except NewContributorsError as e:
        logger.error(f"{e.kind}: {e.message}")
        click.echo(json.dumps(e.to_dict(), indent=2), err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        sys.exit(130)
    except Exception as e:
        logger.exception(f"Unexpected failure: {e}")
        sys.exit(1)

    click.echo(json.dumps(result, indent=2))


if __name__ == '__main__':
    cli()
