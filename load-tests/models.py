"""
Shared data types for the load test run.
"""

import random
import threading
from dataclasses import dataclass
from typing import Tuple


class SetupError(RuntimeError):
    """Raised when the setup phase cannot produce a usable session."""


class EmptyRegistryError(LookupError):
    """Raised when a team is requested from an empty registry."""


@dataclass(frozen=True)
class Team:
    """A team known to exist on the service, with the ids of its members."""
    team_name: str
    user_ids: Tuple[str, ...]

    @classmethod
    def from_members(cls, team_name: str, members: list) -> "Team":
        return cls(team_name=team_name, user_ids=tuple(m["user_id"] for m in members))

    def choose_member(self) -> str:
        return random.choice(self.user_ids)


class TeamRegistry:
    """
    Append-only collection of teams shared by every simulated user in a process.

    Teams are added by the setup phase and by both workflows, and picked at
    random by the pull request workflow. Entries are never edited or removed.
    """

    def __init__(self):
        self._teams = []
        self._lock = threading.Lock()

    def add(self, team: Team) -> None:
        with self._lock:
            self._teams.append(team)

    def choose(self) -> Team:
        """Pick a team uniformly at random"""
        with self._lock:
            if not self._teams:
                raise EmptyRegistryError("no teams registered")
            return random.choice(self._teams)

    def snapshot(self) -> Tuple[Team, ...]:
        with self._lock:
            return tuple(self._teams)

    def __len__(self) -> int:
        with self._lock:
            return len(self._teams)

    def __bool__(self) -> bool:
        return len(self) > 0
