"""
Username slug validation.

Usernames are lowercase ASCII letters, digits and hyphens, bounded by the
username rule in registry.yaml.
"""

from __future__ import annotations

import re

from registry.rules.models import RegexRule


def is_valid_slug(value: str, rule: RegexRule) -> bool:
    if not rule.min <= len(value) <= rule.max:
        return False
    return re.fullmatch(rule.pattern, value) is not None
