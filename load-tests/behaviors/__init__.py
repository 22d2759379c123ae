"""
Behavior modules for Locust load testing.
Each behavior class represents a distinct user workflow.
"""

from .base import BaseReviewerBehavior
from .team_behavior import TeamManagementBehavior
from .pull_request_behavior import PullRequestBehavior

__all__ = [
    'BaseReviewerBehavior',
    'TeamManagementBehavior',
    'PullRequestBehavior',
]
