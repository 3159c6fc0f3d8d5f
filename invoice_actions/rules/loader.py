import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from invoice_actions.rules.models import Rules

logger = logging.getLogger(__name__)


def load_rules(path: Path, *, required: bool = False) -> Rules:
    """
    Load and validate the rules file.

    A missing file yields the built-in defaults unless ``required`` is set,
    in which case FileNotFoundError is raised.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        if required:
            raise FileNotFoundError(f"Rules file not found at: {path}")
        logger.info("No rules file at %s, using defaults", path)
        return Rules()

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data or {})
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
