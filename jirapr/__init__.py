# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
jira-prs - Jira issue and GitHub pull request status reporting
"""

__version__ = '1.0.0'
