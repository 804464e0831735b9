import logging
import os
import sys
from pathlib import Path

from src.rules.models import Rules

logger = logging.getLogger(__name__)


def validate_ops_rules(rules: Rules, base_dir: Path) -> None:
    """
    Validate operational requirements before startup.
    Exits the process if a requirement is not met.
    """
    ops = rules.ops

    missing = [env_var for env_var in ops.required_env if env_var not in os.environ]
    if missing:
        logger.critical("Missing required environment variables: %s", ", ".join(missing))
        sys.exit(1)

    migrations_dir = base_dir / ops.migrations_dir
    if not migrations_dir.is_dir():
        logger.critical("Migrations directory not found: %s", migrations_dir)
        sys.exit(1)

    logger.info("Configuration validated.")
