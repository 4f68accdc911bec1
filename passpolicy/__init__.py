"""passpolicy: password strength policy evaluation.

Checks candidate passwords against configurable rules and reports every
violated rule, in a fixed order.
"""

from .dictionary import COMMON_WORDS, DictionaryProvider, get_default_provider
from .policy import (
    DEFAULT_POLICY,
    DEFAULT_RULES,
    CharRequirement,
    PasswordPolicyEngine,
    PasswordPolicyViolation,
    PasswordRule,
    PolicyConfig,
    PolicyConfigError,
    PolicyResult,
    RuleType,
    estimate_entropy,
    validate_password,
)

__version__ = "0.1.0"

__all__ = [
    "COMMON_WORDS",
    "DEFAULT_POLICY",
    "DEFAULT_RULES",
    "CharRequirement",
    "DictionaryProvider",
    "PasswordPolicyEngine",
    "PasswordPolicyViolation",
    "PasswordRule",
    "PolicyConfig",
    "PolicyConfigError",
    "PolicyResult",
    "RuleType",
    "estimate_entropy",
    "get_default_provider",
    "validate_password",
]
