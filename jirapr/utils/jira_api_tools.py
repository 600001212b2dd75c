# The MIT License (MIT)
# Copyright © 2025 Entrius

import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence

import requests
from requests.auth import HTTPBasicAuth

from jirapr.classes import DevelopmentDetail, Issue, JiraConfig
from jirapr.constants import (
    DEFAULT_MAX_CONCURRENCY,
    DEV_STATUS_APPLICATION_TYPE,
    DEV_STATUS_DATA_TYPE,
    DEV_STATUS_DETAIL_PATH,
    SEARCH_PATH,
)

logger = logging.getLogger(__name__)


class JiraAPIError(Exception):
    """A Jira request failed: transport error, non-2xx status or unreadable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def make_headers() -> Dict[str, str]:
    """Build standard Jira HTTP headers.

    Returns:
        Dict[str, str]: Mapping of HTTP header names to values.
    """
    return {'Accept': 'application/json'}


class JiraClient:
    """Thin client for the two Jira endpoints the report needs.

    Every call is a single request: no retries, no caching, no pagination.
    """

    def __init__(self, config: JiraConfig):
        self.config = config
        self.auth = HTTPBasicAuth(config.email, config.api_token)

    def _get(self, path: str, params: Dict[str, Any], context: str) -> Dict[str, Any]:
        url = f'{self.config.base_url}{path}'
        logger.debug(f'GET {url} params={params}')

        try:
            response = requests.get(
                url,
                params=params,
                auth=self.auth,
                headers=make_headers(),
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise JiraAPIError(f'{context}: {e}') from e

        if not 200 <= response.status_code < 300:
            raise JiraAPIError(
                f'{context}: Request failed with status code {response.status_code}',
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise JiraAPIError(f'{context}: Invalid JSON response ({e})', status_code=response.status_code) from e

        if not isinstance(data, dict):
            raise JiraAPIError(f'{context}: Unexpected response body', status_code=response.status_code)
        return data

    def search_issues(self, jql: str) -> List[Issue]:
        """Run a JQL search and return the matching issues.

        Args:
            jql (str): Query in Jira's query language, passed through unescaped.
        Returns:
            List[Issue]: Issues from the first page of results.
        Raises:
            JiraAPIError: If the request fails for any reason.
        """
        data = self._get(SEARCH_PATH, {'jql': jql}, 'Error fetching Jira issues')
        issues = [Issue.from_jira_response(item) for item in data.get('issues') or []]
        logger.debug(f'Search returned {len(issues)} issues')
        return issues

    def get_development_info(self, issue_id: str) -> Optional[DevelopmentDetail]:
        """Fetch the GitHub development detail linked to an issue.

        Args:
            issue_id (str): Numeric Jira issue id (not the key).
        Returns:
            Optional[DevelopmentDetail]: First entry of the ``detail`` array, or None when there is none.
        Raises:
            JiraAPIError: If the request fails for any reason.
        """
        params = {
            'issueId': issue_id,
            'applicationType': DEV_STATUS_APPLICATION_TYPE,
            'dataType': DEV_STATUS_DATA_TYPE,
        }
        data = self._get(DEV_STATUS_DETAIL_PATH, params, 'Error fetching development information')
        details = data.get('detail') or []
        return DevelopmentDetail.from_jira_response(details[0]) if details else None


async def _gather_development_details(
    client: JiraClient, issues: Sequence[Issue], max_concurrency: int, best_effort: bool
) -> List[Optional[DevelopmentDetail]]:
    semaphore = asyncio.Semaphore(max_concurrency)
    failed = asyncio.Event()

    async def fetch(issue: Issue) -> Optional[DevelopmentDetail]:
        async with semaphore:
            # No new lookups start once one has failed
            if failed.is_set():
                return None
            try:
                return await asyncio.to_thread(client.get_development_info, issue.id)
            except JiraAPIError:
                if not best_effort:
                    failed.set()
                raise

    tasks = [asyncio.create_task(fetch(issue)) for issue in issues]

    if not best_effort:
        try:
            return list(await asyncio.gather(*tasks))
        except JiraAPIError:
            for task in tasks:
                task.cancel()
            raise

    results: List[Optional[DevelopmentDetail]] = []
    for issue, outcome in zip(issues, await asyncio.gather(*tasks, return_exceptions=True)):
        if isinstance(outcome, JiraAPIError):
            logger.warning(f'Skipping development information for {issue.key}: {outcome}')
            results.append(None)
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            results.append(outcome)
    return results


def fetch_development_details(
    client: JiraClient,
    issues: Sequence[Issue],
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    best_effort: bool = False,
) -> List[Optional[DevelopmentDetail]]:
    """Look up development information for every issue concurrently.

    At most ``max_concurrency`` requests are in flight at once. Results are
    returned in the same order as ``issues``.

    By default the first failure aborts the whole lookup and is re-raised.
    With ``best_effort`` a failed lookup is logged and recorded as None.
    """
    if max_concurrency < 1:
        raise ValueError(f'max_concurrency must be at least 1 (got {max_concurrency})')
    if not issues:
        return []

    logger.debug(f'Fetching development information for {len(issues)} issues (max {max_concurrency} in flight)')
    return asyncio.run(_gather_development_details(client, issues, max_concurrency, best_effort))
