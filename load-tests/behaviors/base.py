"""
Base behavior class providing the shared session and team creation.
"""

import logging
from locust import TaskSet
from config import SESSION, TEAMS, REQUEST_TIMEOUT
from utils import api_path, get_auth_headers

logger = logging.getLogger(__name__)


class BaseReviewerBehavior(TaskSet):
    """
    Base class for all PR reviewers behaviors with shared functionality.

    All child classes inherit:
    - on_start(): Picks up the session token obtained during setup
    - registry: The process-wide team registry
    - post_team(): Team creation request used by every workflow

    Child classes should define @task decorated methods for specific workflows.
    """

    registry = TEAMS

    def on_start(self):
        """Reuse the token from the setup phase; there is no per-user login"""
        self.token = SESSION.get("token")
        if not self.token:
            logger.warning("No session token available, workflows will be skipped")
            self.headers = {}
            return
        self.headers = get_auth_headers(self.token)

    def post_team(self, team_name, members, **kwargs):
        """POST /team/add; extra kwargs (catch_response, name) go to the Locust client"""
        return self.client.post(
            api_path("/team/add"),
            json={
                "team_name": team_name,
                "members": members
            },
            headers=self.headers,
            timeout=REQUEST_TIMEOUT,
            **kwargs
        )
