# The MIT License (MIT)
# Copyright © 2025 Entrius

# =============================================================================
# Jira API
# =============================================================================
DEFAULT_SCHEME = 'https'
SEARCH_PATH = '/rest/api/3/search'
DEV_STATUS_DETAIL_PATH = '/rest/dev-status/latest/issue/detail'
BROWSE_PATH = '/browse'

DEV_STATUS_APPLICATION_TYPE = 'GitHub'
DEV_STATUS_DATA_TYPE = 'branch'

DEFAULT_REQUEST_TIMEOUT = 30  # seconds
DEFAULT_MAX_CONCURRENCY = 8  # simultaneous development-info lookups

# =============================================================================
# GitHub
# =============================================================================
GITHUB_REPO_URL_PATTERN = r'https://github\.com/([^/]+/[^/]+)'

# =============================================================================
# Workflow
# =============================================================================
WORKFLOW_STATUS_ORDER = [
    'Backlog',
    'To Do',
    'Doing',
    'To Review',
    'To check by Product',
    'To test',
    'To deploy in Dev',
    'To deploy in staging',
    'To deploy in Production',
    'Done',
]

# =============================================================================
# Display
# =============================================================================
STATUS_EMOJI = {
    'MERGED': '✅',
    'DECLINED': '❌',
    'OPEN': '🟡',
}
UNKNOWN_STATUS_EMOJI = '❓'
APPROVED_EMOJI = '🟢'
NOT_APPROVED_EMOJI = '🔴'

MISSING_QUERY_MESSAGE = 'Please provide a JQL query as a command line argument.'
