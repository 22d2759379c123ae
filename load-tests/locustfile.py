"""
Locust load testing entry point for the PR reviewers service

This script drives two workflows concurrently, each at a constant arrival rate:
1. Team Management: Create team → Read team back → Share it for pull requests
2. Pull Requests: Pick team member → Create pull request → Merge pull request

Features:
- Setup Phase: One dummy login per process, plus 10 seed teams so pull requests can start immediately
- Shared Team Registry: Teams created by either workflow are reused as pull request authors
- Constant Arrival Rate: Each user is paced with a fixed throughput and a 100ms minimum pause
- Load Shape: Fixed user count for a fixed duration, then the test stops
- Thresholds: The process exits with code 1 when failure ratio >= 0.01% or p99 >= 100ms

Configuration:
- config.py: Scenario rates, duration, user counts, timeouts and thresholds
- behaviors/: Workflow implementations for the two scenarios
- seeding.py: Setup phase run before any users are spawned
- utils/: Helper functions

Run with: locust --headless --host=http://pr-reviewers-service:8080
"""

import logging
from locust import HttpUser, LoadTestShape, events
from locust.runners import MasterRunner, WorkerRunner
from behaviors import TeamManagementBehavior, PullRequestBehavior
from config import (
    DEFAULT_HOST,
    PR_SCENARIO_RATE,
    SCENARIO_DURATION,
    SESSION,
    TEAM_SCENARIO_RATE,
    TEAMS,
    USERS_PER_SCENARIO,
)
from seeding import run_setup
from utils import check_thresholds, paced_throughput

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@events.init.add_listener
def on_locust_init(environment, **kwargs):
    """
    Log in and seed teams when Locust starts.
    This runs once per process before any users are spawned. In distributed
    mode the master generates no load, so only workers seed their own registry.
    A missing token raises SetupError and aborts the run.
    """
    if isinstance(environment.runner, MasterRunner):
        return

    base_url = environment.host or DEFAULT_HOST
    SESSION["token"] = run_setup(base_url, TEAMS)


@events.quitting.add_listener
def on_locust_quitting(environment, **kwargs):
    """Fail the process when aggregated results break the run thresholds"""
    if isinstance(environment.runner, WorkerRunner):
        return

    violations = check_thresholds(environment.stats.total)
    for violation in violations:
        logger.error(f"Threshold failed: {violation}")
    if violations:
        environment.process_exit_code = 1


# User classes - one per scenario, equal share of the user pool

class TeamManager(HttpUser):
    """
    Team lead registering teams - 50% of users.

    Each user runs TEAM_SCENARIO_RATE / USERS_PER_SCENARIO iterations per
    second so the scenario as a whole approximates the configured rate.
    """
    host = DEFAULT_HOST
    tasks = [TeamManagementBehavior]
    wait_time = paced_throughput(TEAM_SCENARIO_RATE / USERS_PER_SCENARIO)
    weight = 50


class PullRequestAuthor(HttpUser):
    """
    Developer opening and merging pull requests - 50% of users.
    """
    host = DEFAULT_HOST
    tasks = [PullRequestBehavior]
    wait_time = paced_throughput(PR_SCENARIO_RATE / USERS_PER_SCENARIO)
    weight = 50


class ConstantArrivalRateShape(LoadTestShape):
    """
    Spawn every user at once, hold for SCENARIO_DURATION seconds, then stop.
    """
    duration = SCENARIO_DURATION
    user_count = 2 * USERS_PER_SCENARIO

    def tick(self):
        if self.get_run_time() >= self.duration:
            return None
        return (self.user_count, self.user_count)
