"""Platform path-syntax policies.

A ``PathPolicy`` bundles the separator set, the absolute-prefix predicate
and the reserved prefix length for one path syntax. Normalization and
stringification are pure functions of a policy plus their input.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class PathPolicy:
    """Path syntax rules for one platform family."""

    name: str
    separators: frozenset[str]
    separator: str
    reserved_prefix: int
    drive_letter: bool

    def is_absolute(self, raw: str) -> bool:
        """Return whether ``raw`` carries this platform's absolute prefix."""
        if self.drive_letter:
            return len(raw) >= 2 and raw[1] == ":" and raw[0] not in self.separators
        return raw.startswith(self.separator)


POSIX_POLICY = PathPolicy(
    name="posix",
    separators=frozenset("/"),
    separator="/",
    reserved_prefix=0,
    drive_letter=False,
)

# Windows accepts ``/`` everywhere, so it is also the emitted separator.
WINDOWS_POLICY = PathPolicy(
    name="windows",
    separators=frozenset("/\\"),
    separator="/",
    reserved_prefix=1,
    drive_letter=True,
)

POLICIES = {policy.name: policy for policy in (POSIX_POLICY, WINDOWS_POLICY)}


def host_policy() -> PathPolicy:
    """Return the policy matching the running interpreter's platform."""
    return WINDOWS_POLICY if os.name == "nt" else POSIX_POLICY


def policy_for_name(name: str | None) -> PathPolicy:
    """Resolve a policy by name, falling back to the host policy."""
    if name is None:
        return host_policy()
    return POLICIES.get(name.strip().lower(), host_policy())


__all__ = [
    "PathPolicy",
    "POSIX_POLICY",
    "WINDOWS_POLICY",
    "POLICIES",
    "host_policy",
    "policy_for_name",
]
