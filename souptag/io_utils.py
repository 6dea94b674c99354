"""Utility helpers for tree dumps and logging."""

from __future__ import annotations

import json
import sys
from typing import Any

import yaml

from .tags import HtmlTag


def stable_json_dumps(obj: object) -> str:
    """Serialize JSON in a stable, human-readable way with a trailing newline."""
    return json.dumps(obj, ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def stable_yaml_dumps(obj: Any) -> str:
    return yaml.safe_dump(obj, allow_unicode=True, sort_keys=True, default_flow_style=False)


def tag_to_json(tag: HtmlTag) -> str:
    return stable_json_dumps(tag.to_dict())


def tag_to_yaml(tag: HtmlTag) -> str:
    return stable_yaml_dumps(tag.to_dict())


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
