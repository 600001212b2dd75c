# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
jira-prs CLI

Usage:
    jira-prs "<JQL query>"
    jira-prs "project = WEB AND sprint in openSprints()" --max-concurrency 4
"""

from .main import cli

__all__ = ['cli']
