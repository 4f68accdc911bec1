"""CLI interface for checking a password against a policy.

Usage:
    python -m passpolicy [password|-] [config.yaml]

The password is read from stdin when omitted or given as "-". The config
path falls back to PASSPOLICY_CONFIG_PATH, then to the built-in defaults.
"""

import sys
from typing import List, Optional

import yaml

from .common.config import load_policy_config
from .common.logger import setup_logger
from .common.settings import get_settings
from .policy.engine import PasswordPolicyEngine
from .policy.options import PolicyConfig, PolicyConfigError

USAGE = "Usage: python -m passpolicy [password|-] [config.yaml]"

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the password checker CLI."""
    args = sys.argv[1:] if argv is None else argv

    if len(args) > 2 or (args and args[0] in ("-h", "--help")):
        print(USAGE, file=sys.stderr)
        return EXIT_USAGE

    settings = get_settings()
    try:
        logger = setup_logger(
            "passpolicy",
            log_dir=settings.log_dir,
            level=settings.log_level,
            file_logging=settings.file_logging,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    config_path = args[1] if len(args) > 1 else settings.config_path
    if config_path:
        try:
            policy = load_policy_config(config_path)
        except (FileNotFoundError, TypeError, yaml.YAMLError, PolicyConfigError) as e:
            logger.error(f"Could not load policy from {config_path}: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_USAGE
    else:
        policy = PolicyConfig()

    if not args or args[0] == "-":
        password = sys.stdin.readline().rstrip("\r\n")
    else:
        password = args[0]

    result = PasswordPolicyEngine(policy).evaluate(password)

    if result.is_valid:
        print("OK")
        return EXIT_VALID

    for violation in result.violations:
        print(violation)
    return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
