"""Jinja2 integration for tag trees."""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, StrictUndefined, select_autoescape

from .mapper import map_markup_string
from .models import ConversionOptions
from .tags import HtmlTag


def _to_tag_filter(options: ConversionOptions):
    def to_tag(value: Any) -> HtmlTag | None:
        return map_markup_string(value, options)

    return to_tag


def _add_class_filter(tag: HtmlTag, *tokens: str) -> HtmlTag:
    return tag.add_classes(tokens)


def tag_environment(options: ConversionOptions | None = None, **kwargs: Any) -> Environment:
    """Create an autoescaping Jinja environment that understands tags.

    Tags render through ``__html__`` so they are never double escaped. The
    ``to_tag`` filter converts markup (usually a ``Markup`` value) into a
    tag tree and ``add_class`` adds class tokens to one.
    """

    options = options or ConversionOptions()
    kwargs.setdefault("autoescape", select_autoescape(default_for_string=True, default=True))
    kwargs.setdefault("undefined", StrictUndefined)
    env = Environment(**kwargs)
    env.filters["to_tag"] = _to_tag_filter(options)
    env.filters["add_class"] = _add_class_filter
    return env
