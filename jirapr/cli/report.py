# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Report building and console rendering.

Issues with linked pull requests are sorted by workflow status and printed
with one sub-line per pull request. Issues without pull requests follow in a
separate section, in the order the search returned them.
"""

from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape

from jirapr.classes import DevelopmentDetail, Issue, IssueReport, JiraConfig, RepoSummary
from jirapr.constants import (
    APPROVED_EMOJI,
    BROWSE_PATH,
    NOT_APPROVED_EMOJI,
    STATUS_EMOJI,
    UNKNOWN_STATUS_EMOJI,
    WORKFLOW_STATUS_ORDER,
)
from jirapr.utils.extraction import extract_repositories

WITHOUT_PR_HEADING = 'Issues without pull requests'
OTHER_STATUS_HEADING = 'Other statuses'


def get_status_emoji(status: str) -> str:
    """Map a raw pull request status to its symbol."""
    return STATUS_EMOJI.get(status, UNKNOWN_STATUS_EMOJI)


def get_approval_emoji(approved: bool) -> str:
    return APPROVED_EMOJI if approved else NOT_APPROVED_EMOJI


def create_ticket_link(config: JiraConfig, key: str) -> str:
    return f'{config.base_url}{BROWSE_PATH}/{key}'


def status_index(status: str, order: Sequence[str] = WORKFLOW_STATUS_ORDER) -> int:
    """Position of a status in the workflow, -1 when it is not part of it."""
    try:
        return list(order).index(status)
    except ValueError:
        return -1


def workflow_heading(status: str, order: Sequence[str] = WORKFLOW_STATUS_ORDER) -> str:
    """Group heading for a status; statuses outside the workflow share one group."""
    return status if status_index(status, order) >= 0 else OTHER_STATUS_HEADING


def sort_by_workflow_status(
    reports: Sequence[IssueReport], order: Sequence[str] = WORKFLOW_STATUS_ORDER
) -> List[IssueReport]:
    """Stable sort by workflow position; unknown statuses come first."""
    return sorted(reports, key=lambda report: status_index(report.issue.status, order))


def build_reports(issues: Sequence[Issue], details: Sequence[Optional[DevelopmentDetail]]) -> List[IssueReport]:
    """Pair each issue with the repositories of its own development detail."""
    if len(issues) != len(details):
        raise ValueError(f'Expected {len(issues)} development details, got {len(details)}')
    return [
        IssueReport(issue=issue, repositories=extract_repositories(detail)) for issue, detail in zip(issues, details)
    ]


def partition_reports(reports: Sequence[IssueReport]) -> Tuple[List[IssueReport], List[IssueReport]]:
    """Split into (with pull requests, without pull requests), keeping order."""
    with_prs = [report for report in reports if report.has_pull_requests]
    without_prs = [report for report in reports if not report.has_pull_requests]
    return with_prs, without_prs


def format_issue_line(config: JiraConfig, issue: Issue) -> str:
    link = create_ticket_link(config, issue.key)
    line = f'[blue]{escape(link)}[/blue] - {escape(issue.summary)}'
    if issue.status:
        line += f' [dim]({escape(issue.status)})[/dim]'
    return line


def format_repository_line(repo: RepoSummary) -> str:
    line = (
        f'    {get_status_emoji(repo.status)} {escape(repo.repo)} - '
        f'[green]Status:[/green] {escape(repo.status)} '
        f'[green]Approved:[/green] {get_approval_emoji(repo.approved)}'
    )
    if repo.title:
        line += f' - {escape(repo.title)}'
    return line


def render_report(
    console: Console,
    config: JiraConfig,
    with_prs: Sequence[IssueReport],
    without_prs: Sequence[IssueReport],
    order: Sequence[str] = WORKFLOW_STATUS_ORDER,
) -> None:
    """Print both report sections to the console."""
    current_heading = None
    for report in sort_by_workflow_status(with_prs, order):
        heading = workflow_heading(report.issue.status, order)
        if heading != current_heading:
            current_heading = heading
            console.print(f'\n[bold magenta]{escape(heading)}[/bold magenta]', soft_wrap=True)

        console.print(format_issue_line(config, report.issue), soft_wrap=True)
        for repo in report.repositories:
            console.print(format_repository_line(repo), soft_wrap=True)

    if without_prs:
        console.print(f'\n[bold yellow]{WITHOUT_PR_HEADING}[/bold yellow]', soft_wrap=True)
        for report in without_prs:
            console.print(format_issue_line(config, report.issue), soft_wrap=True)
