# The MIT License (MIT)
# Copyright © 2025 Entrius

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from jirapr.constants import DEFAULT_REQUEST_TIMEOUT, DEFAULT_SCHEME


@dataclass(frozen=True)
class JiraConfig:
    """Connection settings for one Jira site, read once at start-up."""

    email: str
    api_token: str
    domain: str
    scheme: str = DEFAULT_SCHEME
    timeout: float = DEFAULT_REQUEST_TIMEOUT

    @property
    def base_url(self) -> str:
        return f'{self.scheme}://{self.domain}'


@dataclass(frozen=True)
class Issue:
    """Jira issue snapshot as returned by the search endpoint"""

    key: str
    id: str
    summary: str
    status: str

    @classmethod
    def from_jira_response(cls, data: Dict[str, Any]) -> 'Issue':
        fields = data.get('fields') or {}
        status = fields.get('status') or {}
        return cls(
            key=str(data.get('key', '')),
            id=str(data.get('id', '')),
            summary=fields.get('summary') or '',
            status=status.get('name') or '',
        )


@dataclass(frozen=True)
class Reviewer:
    """Pull request reviewer"""

    name: str
    approved: bool

    @classmethod
    def from_jira_response(cls, data: Dict[str, Any]) -> 'Reviewer':
        return cls(name=data.get('name') or '', approved=bool(data.get('approved', False)))


@dataclass(frozen=True)
class PullRequest:
    """Pull request linked to an issue through the dev-status endpoint.

    ``status`` keeps the raw tracker value (OPEN, MERGED, DECLINED, UNKNOWN, ...).
    """

    url: str
    status: str
    name: str
    reviewers: List[Reviewer] = field(default_factory=list)

    @classmethod
    def from_jira_response(cls, data: Dict[str, Any]) -> 'PullRequest':
        return cls(
            url=data.get('url') or '',
            status=data.get('status') or '',
            name=data.get('name') or '',
            reviewers=[Reviewer.from_jira_response(r) for r in data.get('reviewers') or []],
        )


@dataclass(frozen=True)
class DevelopmentDetail:
    """Development information for a single issue"""

    pull_requests: List[PullRequest] = field(default_factory=list)

    @classmethod
    def from_jira_response(cls, data: Optional[Dict[str, Any]]) -> Optional['DevelopmentDetail']:
        if data is None:
            return None
        return cls(pull_requests=[PullRequest.from_jira_response(pr) for pr in data.get('pullRequests') or []])


@dataclass(frozen=True)
class RepoSummary:
    """Flattened view of a pull request used for display"""

    repo: str  # owner/repo, empty when the URL is not a GitHub repository URL
    status: str
    approved: bool
    title: str


@dataclass(frozen=True)
class IssueReport:
    """An issue together with the repositories of its linked pull requests"""

    issue: Issue
    repositories: List[RepoSummary] = field(default_factory=list)

    @property
    def has_pull_requests(self) -> bool:
        return len(self.repositories) > 0
