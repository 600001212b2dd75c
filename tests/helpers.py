# The MIT License (MIT)
# Copyright © 2025 Entrius

"""Builders for Jira API payloads and responses used across tests."""

from unittest.mock import Mock

from rich.console import Console


def make_response(status_code=200, payload=None):
    """requests.Response stand-in with a JSON body."""
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload if payload is not None else {}
    return response


def issue_payload(key, issue_id, summary, status):
    return {'key': key, 'id': issue_id, 'fields': {'summary': summary, 'status': {'name': status}}}


def pull_request_payload(url, status='OPEN', name='', approvals=()):
    return {
        'url': url,
        'status': status,
        'name': name,
        'reviewers': [{'name': f'reviewer{i}', 'approved': approved} for i, approved in enumerate(approvals)],
    }


class FakeJira:
    """Routes patched ``requests.get`` calls to canned search and dev-status payloads.

    ``details`` maps issue id -> list of pull request payloads, or an int status
    code to simulate a failing lookup.
    """

    def __init__(self, issues, details=None, search_status=200):
        self.issues = issues
        self.details = details or {}
        self.search_status = search_status
        self.calls = []

    def __call__(self, url, params=None, **kwargs):
        self.calls.append((url, dict(params or {}), kwargs))
        if url.endswith('/rest/api/3/search'):
            return make_response(self.search_status, {'issues': self.issues})

        entry = self.details.get(params['issueId'], [])
        if isinstance(entry, int):
            return make_response(entry, {'errorMessages': ['failure']})
        detail = [{'pullRequests': entry, 'branches': []}] if entry else []
        return make_response(200, {'detail': detail, 'errors': []})

    @property
    def dev_status_calls(self):
        return [call for call in self.calls if call[0].endswith('/rest/dev-status/latest/issue/detail')]


def plain_console(**kwargs):
    """Console without color or wrapping so output can be matched as text."""
    return Console(emoji=False, highlight=False, color_system=None, **kwargs)
