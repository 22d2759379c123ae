"""
Helper functions for building requests, pacing users and judging results.
"""

import random
import string
import time
import uuid
from locust import constant_throughput
from config import (
    API_PREFIX,
    ITERATION_DELAY,
    MEMBERS_PER_TEAM,
    MAX_FAIL_RATIO,
    MAX_P99_RESPONSE_TIME_MS,
)

USER_AGENT = "PR-Reviewers-LoadTest/1.0"


def generate_uuid() -> str:
    """Return a random (version 4) UUID in its canonical text form"""
    return str(uuid.uuid4())


def random_string(length: int) -> str:
    """Return `length` random lowercase ASCII letters"""
    return ''.join(random.choices(string.ascii_lowercase, k=length))


def api_path(path: str) -> str:
    return f"{API_PREFIX}{path}"


def get_auth_headers(token: str) -> dict:
    """
    Build the headers sent with every authenticated API call.

    Args:
        token: Bearer token obtained from the dummy login endpoint

    Returns:
        Header dictionary with JSON content type and Authorization
    """
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {token}",
        "User-Agent": USER_AGENT,
    }


def build_members(count: int = MEMBERS_PER_TEAM) -> list:
    """
    Generate fresh team members, never reused across teams.

    Usernames follow the pattern user<N>_<6 random letters>.
    """
    return [
        {
            "user_id": generate_uuid(),
            "username": f"user{n}_{random_string(6)}",
        }
        for n in range(1, count + 1)
    ]


def unique_team_name(prefix: str) -> str:
    """Team name unique to one iteration: <prefix>_<epoch ms>_<8 random letters>"""
    return f"{prefix}_{int(time.time() * 1000)}_{random_string(8)}"


def paced_throughput(task_runs_per_second: float, min_delay: float = ITERATION_DELAY):
    """
    Wait time function combining constant throughput with a minimum delay.

    Each user aims for `task_runs_per_second` iterations, but always pauses at
    least `min_delay` seconds between iterations.

    Usage:
        class MyUser(HttpUser):
            wait_time = paced_throughput(3.5)
    """
    pacing = constant_throughput(task_runs_per_second)

    def wait_time_func(self):
        return max(min_delay, pacing(self))

    return wait_time_func


def check_thresholds(stats_total) -> list:
    """
    Compare aggregated request stats against the run's pass/fail thresholds.

    Args:
        stats_total: Locust StatsEntry for all requests (environment.stats.total)

    Returns:
        List of human readable violations, empty when the run passed
    """
    violations = []
    if stats_total.fail_ratio >= MAX_FAIL_RATIO:
        violations.append(
            f"failure ratio {stats_total.fail_ratio:.4%} exceeds {MAX_FAIL_RATIO:.4%}"
        )
    p99 = stats_total.get_response_time_percentile(0.99)
    if p99 >= MAX_P99_RESPONSE_TIME_MS:
        violations.append(
            f"p99 response time {p99}ms exceeds {MAX_P99_RESPONSE_TIME_MS}ms"
        )
    return violations
