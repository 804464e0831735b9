import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

logger = logging.getLogger(__name__)


def load_rules(path: Path) -> Rules:
    """
    Read rules.yaml and validate it against the Rules model.

    Raises FileNotFoundError if the file is missing, ValueError if it is not
    YAML or does not match the model.
    """
    if not path.is_file():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.debug("Loaded rules %s v%s", rules.project.slug, rules.project.rules_version)
    return rules
