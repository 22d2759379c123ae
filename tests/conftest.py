"""
Shared pytest fixtures for the load test suite.

Workflows are exercised through real Locust users and sessions. Only the
transport is replaced: a scripted requests adapter answers every call, so the
tests observe exactly what Locust would record (request events with or
without an exception) without a running service.
"""

from __future__ import annotations

import json
from urllib.parse import parse_qs, urlsplit

from locust.env import Environment  # noqa: I001 - locust must monkey-patch ssl before requests loads
import pytest
import requests
from requests.adapters import BaseAdapter

import config
from locustfile import PullRequestAuthor, TeamManager
from models import TeamRegistry

TEST_TOKEN = "test-token"


class FakeServiceAdapter(BaseAdapter):
    """
    Transport adapter answering requests from a scripted route table.

    Routes map ``(method, path)`` to a status code, a ``(status, body)``
    tuple, an exception instance to raise, or a list of those consumed one
    per call. Unknown routes answer 404.
    """

    def __init__(self, routes=None):
        super().__init__()
        self.routes = dict(routes or {})
        self.calls = []
        self.timeouts = []

    def send(self, request, **kwargs):
        self.calls.append(request)
        self.timeouts.append(kwargs.get("timeout"))
        path = urlsplit(request.url).path
        outcome = self.routes.get((request.method, path), 404)
        if isinstance(outcome, list):
            outcome = outcome.pop(0)
        if isinstance(outcome, Exception):
            raise outcome

        status, body = outcome if isinstance(outcome, tuple) else (outcome, {})
        response = requests.Response()
        response.status_code = status
        response._content = json.dumps(body).encode() if status != 304 else b""
        response.headers["Content-Type"] = "application/json"
        response.url = request.url
        response.request = request
        response.reason = "Scripted"
        response.connection = self
        return response

    def close(self):
        pass

    def requests_to(self, path):
        return [call for call in self.calls if urlsplit(call.url).path == path]

    def json_bodies(self, path):
        return [json.loads(call.body) for call in self.requests_to(path)]

    def queries(self, path):
        return [parse_qs(urlsplit(call.url).query) for call in self.requests_to(path)]


@pytest.fixture
def environment():
    return Environment()


@pytest.fixture
def request_log(environment):
    """Collect (name, exception) for every request Locust reports."""
    records = []

    def on_request(name, exception=None, **kwargs):
        records.append((name, exception))

    environment.events.request.add_listener(on_request)
    return records


@pytest.fixture
def service():
    return FakeServiceAdapter()


@pytest.fixture
def session_token(monkeypatch):
    monkeypatch.setitem(config.SESSION, "token", TEST_TOKEN)
    return TEST_TOKEN


@pytest.fixture
def registry():
    return TeamRegistry()


def _start_behavior(user_class, behavior_class, environment, service, registry):
    user = user_class(environment)
    user.client.mount("http://", service)
    user.client.mount("https://", service)
    behavior = behavior_class(user)
    behavior.registry = registry
    behavior.on_start()
    return behavior


@pytest.fixture
def team_behavior(environment, service, registry, session_token):
    from behaviors import TeamManagementBehavior
    return _start_behavior(TeamManager, TeamManagementBehavior, environment, service, registry)


@pytest.fixture
def pr_behavior(environment, service, registry, session_token):
    from behaviors import PullRequestBehavior
    return _start_behavior(PullRequestAuthor, PullRequestBehavior, environment, service, registry)
