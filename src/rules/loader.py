import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import LoggingRules, Rules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = "calculator_rules.yaml"


def rules_path_from_env() -> Path:
    return Path(os.environ.get("CALC_RULES_PATH", DEFAULT_RULES_PATH))


def _strip_markdown_fences(content: str) -> str:
    # Use the first ```yaml block if there is one, else the whole file
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break

        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    clean_content = _strip_markdown_fences(path.read_text(encoding="utf-8"))

    try:
        data = yaml.safe_load(clean_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data or {})
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def load_rules_or_default(path: Path) -> Rules:
    """Like load_rules, but a missing file yields the defaults."""
    if not path.exists():
        logger.warning("Rules file %s not found, using defaults", path)
        return Rules()
    return load_rules(path)


def resolve_log_level(rules: Rules) -> str:
    """
    Level from CALC_LOG_LEVEL if set, else from the rules file.
    Raises ValueError if the override is not a known level.
    """
    override = os.environ.get("CALC_LOG_LEVEL")
    if override is None:
        return rules.logging.level

    try:
        return LoggingRules(level=override.upper()).level
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
