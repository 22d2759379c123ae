"""
Team management workflow.
"""

from locust import task
from behaviors.base import BaseReviewerBehavior
from config import REQUEST_TIMEOUT
from models import Team
from utils import api_path, build_members, unique_team_name

CREATE_TEAM_STATUSES = (201, 304)


class TeamManagementBehavior(BaseReviewerBehavior):
    """
    Simulates a team lead registering a new team:
    - Create a team with two fresh members
    - Read the team back by name
    - Share newly created teams with the pull request workflow

    Failed checks are recorded on the Locust stats and never abort the run.
    """

    @task
    def team_workflow(self):
        """Create a team, read it back, and register it when newly created"""
        if not self.token:
            return

        team_name = unique_team_name("team")
        members = build_members()

        # Step 1: Create the team (304 means it already exists)
        with self.post_team(
            team_name,
            members,
            catch_response=True,
            name="1. Create Team"
        ) as response:
            created_status = response.status_code
            if created_status in CREATE_TEAM_STATUSES:
                response.success()
            else:
                response.failure(f"Failed to create team: {created_status}")

        # Step 2: Read it back
        with self.client.get(
            api_path("/team/get"),
            params={"team_name": team_name},
            headers=self.headers,
            timeout=REQUEST_TIMEOUT,
            catch_response=True,
            name="2. Get Team"
        ) as response:
            if response.status_code == 200:
                response.success()
            else:
                response.failure(f"Failed to get team: {response.status_code}")

        # Only brand new teams are shared, duplicates may belong to another run
        if created_status == 201:
            self.registry.add(Team.from_members(team_name, members))
