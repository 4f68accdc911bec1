"""Password policy evaluation for passpolicy.

Evaluates candidate passwords against configurable strength rules.
"""

from .engine import (
    PasswordPolicyEngine,
    PasswordPolicyViolation,
    PolicyResult,
    validate_password,
)
from .options import DEFAULT_POLICY, CharRequirement, PolicyConfig, PolicyConfigError
from .rules import DEFAULT_RULES, PasswordRule, RuleType, estimate_entropy

__all__ = [
    "DEFAULT_POLICY",
    "DEFAULT_RULES",
    "CharRequirement",
    "PasswordPolicyEngine",
    "PasswordPolicyViolation",
    "PasswordRule",
    "PolicyConfig",
    "PolicyConfigError",
    "PolicyResult",
    "RuleType",
    "estimate_entropy",
    "validate_password",
]
