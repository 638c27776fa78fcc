import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from registry.rules.models import Rules

# Rules may sit inside a ```yaml fence in a markdown file; an unclosed fence runs to EOF.
_YAML_FENCE = re.compile(
    r"^[ \t]*```yaml[^\n]*\n(?P<body>.*?)(?:^[ \t]*```|\Z)",
    re.MULTILINE | re.DOTALL,
)


def _extract_yaml(content: str) -> str:
    match = _YAML_FENCE.search(content)
    if match is None:
        return content
    return match.group("body")


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_extract_yaml(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
