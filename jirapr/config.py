# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Configuration for the Jira client.

Values come from CLI options, which fall back to environment variables:

    JIRA_EMAIL        Atlassian account email
    JIRA_API_TOKEN    API token for that account
    JIRA_DOMAIN       Jira site host, e.g. acme.atlassian.net
    JIRA_SCHEME       URL scheme (default: https)

A .env file in the working directory is loaded before options are parsed.
"""

import logging
from typing import Optional, Tuple

from jirapr.classes import JiraConfig
from jirapr.constants import DEFAULT_REQUEST_TIMEOUT, DEFAULT_SCHEME
from jirapr.utils.utils import mask_secret

logger = logging.getLogger(__name__)


def normalize_domain(domain: str, scheme: str = DEFAULT_SCHEME) -> Tuple[str, str]:
    """Split an optional scheme prefix off a domain and drop trailing slashes.

    Returns (scheme, host).
    """
    domain = (domain or '').strip()
    if '://' in domain:
        scheme, domain = domain.split('://', 1)
    return scheme, domain.rstrip('/')


def load_config(
    email: Optional[str],
    api_token: Optional[str],
    domain: Optional[str],
    scheme: str = DEFAULT_SCHEME,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
) -> JiraConfig:
    """Build the immutable client configuration.

    Credentials are not validated; missing values are only reported as warnings
    and the request will fail at the remote end.
    """
    for name, value in (('JIRA_EMAIL', email), ('JIRA_API_TOKEN', api_token), ('JIRA_DOMAIN', domain)):
        if not value:
            logger.warning(f'{name} is not set')

    scheme, host = normalize_domain(domain or '', scheme)
    config = JiraConfig(
        email=email or '',
        api_token=api_token or '',
        domain=host,
        scheme=scheme,
        timeout=timeout,
    )

    logger.debug(
        f'Jira config: base_url={config.base_url} email={config.email} '
        f'token={mask_secret(config.api_token)} timeout={config.timeout}s'
    )
    return config
