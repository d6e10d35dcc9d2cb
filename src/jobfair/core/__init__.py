"""Domain rules for the job fair."""

from __future__ import annotations

from .policies import (
    DEFAULT_POLICIES,
    CoopPolicy,
    EligibilityPolicy,
    RegularPolicy,
    can_apply,
    policy_for,
)

__all__ = [
    "DEFAULT_POLICIES",
    "CoopPolicy",
    "EligibilityPolicy",
    "RegularPolicy",
    "can_apply",
    "policy_for",
]
