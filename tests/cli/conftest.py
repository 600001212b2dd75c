# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Shared fixtures for CLI tests."""

import pytest
from click.testing import CliRunner

from ..helpers import issue_payload, plain_console, pull_request_payload


@pytest.fixture(autouse=True)
def uncolored_cli_console(monkeypatch):
    monkeypatch.setattr('jirapr.cli.main.console', plain_console())
    monkeypatch.setattr('jirapr.cli.helpers.err_console', plain_console(stderr=True))


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def jira_env():
    return {
        'JIRA_EMAIL': 'dev@acme.io',
        'JIRA_API_TOKEN': 'secret-token',
        'JIRA_DOMAIN': 'acme.atlassian.net',
        'JIRA_STATUS_ORDER': None,
        'JIRA_MAX_CONCURRENCY': None,
        'JIRA_TIMEOUT': None,
        'JIRA_SCHEME': None,
    }


@pytest.fixture
def sample_issues():
    return [
        issue_payload('WEB-1', '10001', 'Fix widget rendering', 'Doing'),
        issue_payload('WEB-2', '10002', 'Write release notes', 'To Do'),
    ]


@pytest.fixture
def sample_details():
    return {
        '10001': [
            pull_request_payload(
                'https://github.com/acme/widgets/pull/9',
                status='OPEN',
                name='Fix widget rendering',
                approvals=(True,),
            )
        ],
    }
