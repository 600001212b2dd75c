# The MIT License (MIT)
# Copyright © 2025 Entrius

import logging
import re
from typing import Iterable, List, Optional

from jirapr.classes import DevelopmentDetail, RepoSummary, Reviewer
from jirapr.constants import GITHUB_REPO_URL_PATTERN

logger = logging.getLogger(__name__)

_REPO_URL_RE = re.compile(GITHUB_REPO_URL_PATTERN)


def parse_repo_name(url: str) -> str:
    """Return 'owner/repo' from a GitHub URL, or '' if the URL does not match."""
    match = _REPO_URL_RE.search(url or '')
    if match:
        return match.group(1)
    if url:
        logger.warning(f'Could not determine repository from pull request URL: {url}')
    return ''


def is_approved(reviewers: Iterable[Reviewer]) -> bool:
    """True if at least one reviewer approved."""
    return any(reviewer.approved for reviewer in reviewers)


def extract_repositories(detail: Optional[DevelopmentDetail]) -> List[RepoSummary]:
    """Flatten the pull requests of a development detail into display records.

    A missing detail or one without pull requests yields an empty list.
    """
    if detail is None or not detail.pull_requests:
        return []

    return [
        RepoSummary(
            repo=parse_repo_name(pr.url),
            status=pr.status,
            approved=is_approved(pr.reviewers),
            title=pr.name,
        )
        for pr in detail.pull_requests
    ]
