"""
Configuration constants for load testing.
"""

import os

from models import TeamRegistry

# Target service (overridden by `locust --host`)
DEFAULT_HOST = os.environ.get('PR_REVIEWERS_HOST', 'http://pr-reviewers-service:8080')
API_PREFIX = '/api/v1'

# Scenario configuration: each workflow runs at a constant arrival rate
TEAM_SCENARIO_RATE = float(os.environ.get('TEAM_SCENARIO_RATE', '250'))  # iterations per second
PR_SCENARIO_RATE = float(os.environ.get('PR_SCENARIO_RATE', '250'))      # iterations per second
SCENARIO_DURATION = int(os.environ.get('SCENARIO_DURATION', '60'))       # seconds
USERS_PER_SCENARIO = int(os.environ.get('USERS_PER_SCENARIO', '70'))     # pre-allocated users per workflow

# Minimum pause between iterations of the same user
ITERATION_DELAY = 0.1

# Request timeouts (seconds)
REQUEST_TIMEOUT = 5
SETUP_TIMEOUT = 10

# Seed data created once before load generation
SEED_TEAM_COUNT = 10
MEMBERS_PER_TEAM = 2

# Pass/fail thresholds evaluated when Locust quits
MAX_FAIL_RATIO = 0.0001         # 0.01% of requests
MAX_P99_RESPONSE_TIME_MS = 100

# Global run state (populated during Locust initialization)
TEAMS = TeamRegistry()
SESSION = {"token": None}
