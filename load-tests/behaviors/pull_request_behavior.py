"""
Pull request lifecycle workflow.
"""

import logging
from locust import task
from behaviors.base import BaseReviewerBehavior
from config import REQUEST_TIMEOUT
from models import Team
from utils import api_path, build_members, generate_uuid, random_string, unique_team_name

logger = logging.getLogger(__name__)


class PullRequestBehavior(BaseReviewerBehavior):
    """
    Simulates a developer opening and merging a pull request:
    - Pick a known team (or create a temporary one when none exist yet)
    - Open a pull request authored by one of its members
    - Merge it straight away

    The merge is sent even when creation failed, so a failed create is
    usually followed by a failed merge for the same pull request id.
    """

    @task
    def pull_request_workflow(self):
        """Create a pull request for a random team member and merge it"""
        if not self.token:
            return

        if not self.registry and not self.create_temporary_team():
            return

        team = self.registry.choose()
        author_id = team.choose_member()
        pr_id = generate_uuid()
        pr_name = f"PR_{random_string(10)}"

        # Step 1: Open the pull request
        with self.client.post(
            api_path("/pullRequest/create"),
            json={
                "author_id": author_id,
                "pull_request_id": pr_id,
                "pull_request_name": pr_name
            },
            headers=self.headers,
            timeout=REQUEST_TIMEOUT,
            catch_response=True,
            name="1. Create PR"
        ) as response:
            if response.status_code == 201:
                response.success()
            else:
                response.failure(f"Failed to create PR: {response.status_code}")

        # Step 2: Merge it, regardless of the create outcome
        with self.client.post(
            api_path("/pullRequest/merge"),
            json={"pull_request_id": pr_id},
            headers=self.headers,
            timeout=REQUEST_TIMEOUT,
            catch_response=True,
            name="2. Merge PR"
        ) as response:
            if response.status_code == 200:
                response.success()
            else:
                response.failure(f"Failed to merge PR: {response.status_code}")

    def create_temporary_team(self) -> bool:
        """
        Create a team for the pull request to be authored in.

        Only used while the registry is still empty. Returns True when the
        service created the team and it was registered.
        """
        team_name = unique_team_name("temp_team")
        members = build_members()
        response = self.post_team(team_name, members, name="0. Create Temporary Team")
        if response.status_code != 201:
            logger.debug(f"Temporary team not created ({response.status_code}), skipping iteration")
            return False

        self.registry.add(Team.from_members(team_name, members))
        return True
