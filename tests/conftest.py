"""Shared fixtures: canned GitHub responses and a fake HTTP session."""

import json
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest
import requests

from new_contributors.adapters.github_api import GitHubRESTAdapter
from new_contributors.config.settings import GitHubConfig


def make_response(
    status: int = 200,
    body: Any = None,
    headers: Optional[Dict[str, str]] = None,
    url: str = 'https://api.github.com/test'
) -> requests.Response:
    """Build a real requests.Response carrying a JSON body."""
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.reason = 'OK' if status < 400 else 'Error'
    if body is not None:
        response._content = json.dumps(body).encode('utf-8')
    else:
        response._content = b''
    response.headers.update(headers or {})
    return response


def commit_payload(name: str, email: str, date: str) -> List[dict]:
    return [{'commit': {'author': {'name': name, 'email': email, 'date': date}}}]


class FakeGitHub:
    """
    Routes session.get calls to canned data.

    ``contributors`` is the full listing; it is served in pages honouring
    per_page/page. ``commits`` maps login -> commit list.
    """

    def __init__(self, repo: Optional[dict] = None, contributors: Optional[List[dict]] = None,
                 commits: Optional[Dict[str, List[dict]]] = None):
        self.repo = repo if repo is not None else {
            'name': 'react',
            'full_name': 'facebook/react',
            'created_at': '2013-05-24T16:15:54Z'
        }
        self.contributors = contributors or []
        self.commits = commits or {}
        self.calls: List[tuple] = []

    def get(self, url: str, params: Optional[dict] = None, timeout: Any = None) -> requests.Response:
        params = params or {}
        self.calls.append((url, dict(params)))
        if url.endswith('/contributors'):
            per_page = params['per_page']
            start = (params['page'] - 1) * per_page
            return make_response(body=self.contributors[start:start + per_page], url=url)
        if url.endswith('/commits'):
            return make_response(body=self.commits.get(params['author'], []), url=url)
        return make_response(body=self.repo, url=url)

    def calls_to(self, suffix: str) -> List[tuple]:
        return [c for c in self.calls if c[0].endswith(suffix)]


@pytest.fixture
def config() -> GitHubConfig:
    return GitHubConfig(token='test-token')


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def session(fake_github: FakeGitHub) -> MagicMock:
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    session.get.side_effect = fake_github.get
    return session


@pytest.fixture
def adapter(config: GitHubConfig, session: MagicMock) -> GitHubRESTAdapter:
    return GitHubRESTAdapter(config, session=session)
