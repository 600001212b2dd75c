# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
jira-prs CLI - Main entry point

Usage:
    jira-prs "<JQL query>"           - Report linked pull requests for matching issues
    jira-prs "<JQL query>" -v        - Same, with debug logging on stderr
    jira-prs "<JQL query>" --best-effort
                                     - Skip issues whose development information fails to load
"""

import logging

import click
from dotenv import find_dotenv, load_dotenv

from jirapr import __version__
from jirapr.config import load_config
from jirapr.constants import DEFAULT_MAX_CONCURRENCY, DEFAULT_REQUEST_TIMEOUT, DEFAULT_SCHEME, MISSING_QUERY_MESSAGE
from jirapr.utils.jira_api_tools import JiraAPIError, JiraClient, fetch_development_details
from jirapr.utils.logging import setup_logging

from .helpers import console, parse_status_order, print_error
from .report import build_reports, partition_reports, render_report

logger = logging.getLogger(__name__)


@click.command(name='jira-prs')
@click.argument('jql', required=False)
@click.option('--email', envvar='JIRA_EMAIL', help='Atlassian account email (env: JIRA_EMAIL)')
@click.option('--token', envvar='JIRA_API_TOKEN', help='Jira API token (env: JIRA_API_TOKEN)')
@click.option('--domain', envvar='JIRA_DOMAIN', help='Jira site host, e.g. acme.atlassian.net (env: JIRA_DOMAIN)')
@click.option(
    '--scheme',
    envvar='JIRA_SCHEME',
    default=DEFAULT_SCHEME,
    show_default=True,
    help='URL scheme for the Jira site (env: JIRA_SCHEME)',
)
@click.option(
    '--timeout',
    envvar='JIRA_TIMEOUT',
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_REQUEST_TIMEOUT,
    show_default=True,
    help='Per-request timeout in seconds (env: JIRA_TIMEOUT)',
)
@click.option(
    '--max-concurrency',
    envvar='JIRA_MAX_CONCURRENCY',
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_CONCURRENCY,
    show_default=True,
    help='Maximum development-info requests in flight (env: JIRA_MAX_CONCURRENCY)',
)
@click.option(
    '--status-order',
    envvar='JIRA_STATUS_ORDER',
    default=None,
    help='Comma-separated workflow status ordering used for sorting (env: JIRA_STATUS_ORDER)',
)
@click.option(
    '--best-effort',
    is_flag=True,
    help='Report issues whose development information fails to load as having no pull requests',
)
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging on stderr')
@click.version_option(version=__version__, prog_name='jira-prs')
def cli(
    jql: str,
    email: str,
    token: str,
    domain: str,
    scheme: str,
    timeout: float,
    max_concurrency: int,
    status_order: str,
    best_effort: bool,
    verbose: bool,
):
    """Show the GitHub pull requests linked to the Jira issues matching JQL.

    Issues with pull requests are grouped and sorted by workflow status, each
    followed by one line per pull request with its state and approval.
    Issues without pull requests are listed last.

    \b
    Example:
        jira-prs "project = WEB AND sprint in openSprints()"
        JIRA_DOMAIN=acme.atlassian.net jira-prs "assignee = currentUser()"
    """
    if not jql:
        print_error(MISSING_QUERY_MESSAGE)
        raise SystemExit(1)

    setup_logging(verbose)

    config = load_config(email, token, domain, scheme=scheme, timeout=timeout)
    order = parse_status_order(status_order)
    client = JiraClient(config)

    try:
        issues = client.search_issues(jql)
        details = fetch_development_details(client, issues, max_concurrency=max_concurrency, best_effort=best_effort)
    except JiraAPIError as e:
        logger.debug(f'Aborting report: {e}')
        print_error(str(e))
        raise SystemExit(1) from e

    if not issues:
        console.print('[yellow]No issues found.[/yellow]')
        return

    with_prs, without_prs = partition_reports(build_reports(issues, details))
    render_report(console, config, with_prs, without_prs, order)


def main():
    """Main entry point for the CLI"""
    load_dotenv(find_dotenv(usecwd=True))
    cli()


if __name__ == '__main__':
    main()
