"""
Setup phase: obtain a session token and seed teams before load generation.

Runs once per Locust process, outside the Locust HTTP client, so none of
these calls count towards the measured request statistics.
"""

import logging
import time
import requests
from config import SEED_TEAM_COUNT, SETUP_TIMEOUT
from models import SetupError, Team
from utils import api_path, build_members, get_auth_headers

logger = logging.getLogger(__name__)

SEED_STATUSES = (201, 304)


def login(base_url: str) -> str:
    """Authenticate against the dummy login endpoint and return the bearer token"""
    try:
        response = requests.post(
            f"{base_url}{api_path('/dummyLogin')}",
            json={},
            headers={"Content-Type": "application/json"},
            timeout=SETUP_TIMEOUT
        )
    except requests.RequestException as e:
        raise SetupError(f"Login request failed: {e}") from e

    try:
        token = response.json().get("token")
    except (ValueError, AttributeError):
        token = None
    if not token:
        raise SetupError(f"Login response has no token (status {response.status_code})")
    return token


def seed_teams(base_url: str, token: str, registry, count: int = SEED_TEAM_COUNT) -> int:
    """
    Sequentially create `count` seed teams, registering the ones the service accepted.

    A team is registered when the service reports it as created (201) or
    already present (304). Any other outcome is logged and skipped, never retried.

    Returns:
        Number of teams added to the registry
    """
    headers = get_auth_headers(token)
    seeded = 0
    for i in range(count):
        team_name = f"init_team_{i}_{int(time.time() * 1000)}"
        members = build_members()
        try:
            response = requests.post(
                f"{base_url}{api_path('/team/add')}",
                json={"team_name": team_name, "members": members},
                headers=headers,
                timeout=SETUP_TIMEOUT
            )
        except requests.RequestException as e:
            logger.warning(f"Seed team {team_name} not created: {e}")
            continue

        if response.status_code in SEED_STATUSES:
            registry.add(Team.from_members(team_name, members))
            seeded += 1
        else:
            logger.warning(f"Seed team {team_name} rejected: {response.status_code}")
    return seeded


def run_setup(base_url: str, registry) -> str:
    """
    Log in once and seed the shared team registry.

    Raises:
        SetupError: login did not yield a token; the run must not start
    """
    logger.info(f"Running setup against {base_url}...")
    token = login(base_url)
    seeded = seed_teams(base_url, token, registry)
    logger.info(f"Seeded {seeded} of {SEED_TEAM_COUNT} teams")
    logger.info(f"Teams available: {', '.join(t.team_name for t in registry.snapshot())}")
    return token
