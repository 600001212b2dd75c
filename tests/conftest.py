# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Shared fixtures for jira-prs tests."""

import logging

import pytest

from jirapr.classes import JiraConfig


@pytest.fixture
def jira_config():
    return JiraConfig(email='dev@acme.io', api_token='secret-token', domain='acme.atlassian.net')


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging() replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
