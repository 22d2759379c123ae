"""
Utility functions for load testing.
"""

from .helpers import (
    generate_uuid,
    random_string,
    api_path,
    get_auth_headers,
    build_members,
    unique_team_name,
    paced_throughput,
    check_thresholds,
)

__all__ = [
    'generate_uuid',
    'random_string',
    'api_path',
    'get_auth_headers',
    'build_members',
    'unique_team_name',
    'paced_throughput',
    'check_thresholds',
]
