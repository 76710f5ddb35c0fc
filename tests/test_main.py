"""Tests for the command-line entry point."""

import json
from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from new_contributors.errors import NotFound
from new_contributors.main import cli


def patched_service(result=None, error=None):
    service = MagicMock()
    service.__enter__.return_value = service
    if error is not None:
        service.compute_new_contributors.side_effect = error
    else:
        service.compute_new_contributors.return_value = result
    return service


class TestCli:

    def test_prints_report(self):
        report = {'org': 'facebook', 'repository': 'react', 'year': '2013', 'newContributors': []}
        service = patched_service(result=report)

        with patch('new_contributors.main.NewContributorsService', return_value=service), \
                patch('new_contributors.main.load_dotenv'), \
                patch('new_contributors.main.configure_logging'):
            result = CliRunner().invoke(cli, ['react', '2013', '--refetch'], env={'GITHUB_TOKEN': 't'})

        assert result.exit_code == 0
        assert json.loads(result.output) == report
        service.compute_new_contributors.assert_called_once_with('react', '2013', None, refetch=True)

    def test_org_option_overrides_environment(self):
        service = patched_service(result={})

        with patch('new_contributors.main.NewContributorsService', return_value=service) as factory, \
                patch('new_contributors.main.load_dotenv'), \
                patch('new_contributors.main.configure_logging'):
            CliRunner().invoke(cli, ['pytorch', '--org', 'pytorch'], env={'GITHUB_ORG': 'facebook'})

        config = factory.call_args[0][0]
        assert config.org == 'pytorch'

    def test_classified_error_exits_nonzero(self):
        service = patched_service(error=NotFound('Repository not found.'))

        with patch('new_contributors.main.NewContributorsService', return_value=service), \
                patch('new_contributors.main.load_dotenv'), \
                patch('new_contributors.main.configure_logging'):
            result = CliRunner().invoke(cli, ['nope'])

        assert result.exit_code == 1
        assert '"not_found"' in result.output

    def test_refetch_accepts_explicit_value(self):
        service = patched_service(result={})

        with patch('new_contributors.main.NewContributorsService', return_value=service), \
                patch('new_contributors.main.load_dotenv'), \
                patch('new_contributors.main.configure_logging'):
            CliRunner().invoke(cli, ['react', '--refetch=false'])
            CliRunner().invoke(cli, ['react', '--refetch=yes'])

        refetches = [c.kwargs['refetch'] for c in service.compute_new_contributors.call_args_list]
        assert refetches == [False, False]

    def test_refetch_defaults_to_cached(self):
        service = patched_service(result={})

        with patch('new_contributors.main.NewContributorsService', return_value=service), \
                patch('new_contributors.main.load_dotenv'), \
                patch('new_contributors.main.configure_logging'):
            CliRunner().invoke(cli, ['react'])

        assert service.compute_new_contributors.call_args.kwargs['refetch'] is False

    def test_missing_token_not_reported_by_cli(self, caplog):
        service = patched_service(result={})

        with patch('new_contributors.main.NewContributorsService', return_value=service), \
                patch('new_contributors.main.load_dotenv'), \
                patch('new_contributors.main.configure_logging'), \
                patch.dict('os.environ', {}, clear=True):
            CliRunner().invoke(cli, ['react'])

        assert 'GITHUB_TOKEN' not in caplog.text
