"""Map parsed BeautifulSoup elements onto the mutable tag model.

The variant of each output tag is picked once from the element name (and,
for ``<input>``, its ``type`` attribute). Attributes are copied in source
order with ``id`` routed to the identifier slot. Children are mapped in
document order: elements recursively, text nodes and everything else
(comments, CDATA, processing instructions) as literal tags.
"""

from __future__ import annotations

from typing import Any, Callable, Dict

from bs4 import NavigableString, Tag
from bs4.element import PageElement, PreformattedString

from .models import ConversionOptions
from .parsing import MarkupParser, SoupParser
from .tags import (
    HtmlTag,
    TagKind,
    checkbox_tag,
    definition_list_tag,
    div_tag,
    form_tag,
    hidden_tag,
    line_break_tag,
    link_tag,
    literal_tag,
    new_tag,
    select_tag,
    table_row_tag,
    table_tag,
    textbox_tag,
)

KIND_BY_TAG_NAME: Dict[str, TagKind] = {
    "select": TagKind.SELECT,
    "dl": TagKind.DEFINITION_LIST,
    "table": TagKind.TABLE,
    "tr": TagKind.TABLE_ROW,
    "form": TagKind.FORM,
    "br": TagKind.LINE_BREAK,
    "div": TagKind.DIV,
    "a": TagKind.LINK,
}

KIND_BY_INPUT_TYPE: Dict[str, TagKind] = {
    "textbox": TagKind.TEXTBOX,
    "hidden": TagKind.HIDDEN,
    "checkbox": TagKind.CHECKBOX,
}

_SIMPLE_FACTORIES: Dict[TagKind, Callable[[], HtmlTag]] = {
    TagKind.SELECT: select_tag,
    TagKind.DEFINITION_LIST: definition_list_tag,
    TagKind.TABLE: table_tag,
    TagKind.TABLE_ROW: table_row_tag,
    TagKind.FORM: form_tag,
    TagKind.LINE_BREAK: line_break_tag,
    TagKind.DIV: div_tag,
    TagKind.HIDDEN: hidden_tag,
    TagKind.TEXTBOX: textbox_tag,
}


def _attr_value(value: Any) -> str:
    # bs4 hands multi-valued attributes (class, rel, ...) back as lists
    # unless the soup was built with multi_valued_attributes=None.
    if isinstance(value, str):
        return value
    return " ".join(value)


def _find_attr(element: Tag, name: str) -> str | None:
    for attr_name, value in element.attrs.items():
        if attr_name.lower() == name:
            return _attr_value(value)
    return None


def _has_attr(element: Tag, name: str) -> bool:
    return any(attr_name.lower() == name for attr_name in element.attrs)


def select_kind(element: Tag) -> TagKind:
    """Return the output variant for ``element``."""
    name = element.name.lower()
    if name == "input":
        input_type = (_find_attr(element, "type") or "").lower()
        return KIND_BY_INPUT_TYPE.get(input_type, TagKind.GENERIC)
    return KIND_BY_TAG_NAME.get(name, TagKind.GENERIC)


def _new_output_tag(element: Tag, kind: TagKind) -> HtmlTag:
    if kind is TagKind.LINK:
        href = _find_attr(element, "href")
        if href is None:
            href = _find_attr(element, "src")
        classes = (_find_attr(element, "class") or "").split()
        return link_tag(element.get_text(), href, classes)
    if kind is TagKind.CHECKBOX:
        return checkbox_tag(_has_attr(element, "checked"))
    factory = _SIMPLE_FACTORIES.get(kind)
    if factory is not None:
        return factory()
    return new_tag(TagKind.GENERIC, element.name)


def _map_child(child: PageElement, options: ConversionOptions) -> HtmlTag:
    if isinstance(child, Tag):
        return map_element(child, options)
    if isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
        if options.escape_text:
            # The minimal formatter leaves script/style text untouched.
            return literal_tag(child.output_ready(formatter="minimal"))
        return literal_tag(str(child))
    if isinstance(child, PreformattedString):
        # Doctype.SUFFIX ends with a newline that is not part of the source.
        return literal_tag(child.PREFIX + str(child) + child.SUFFIX.rstrip("\n"))
    return literal_tag(str(child))


def map_element(element: Tag, options: ConversionOptions | None = None) -> HtmlTag:
    """Convert ``element`` and its subtree into an :class:`HtmlTag` tree."""
    options = options or ConversionOptions()
    tag = _new_output_tag(element, select_kind(element))

    for name, value in element.attrs.items():
        if name.lower() == "id":
            tag.set_id(_attr_value(value))
        else:
            # class is split into unique tokens; an empty class attribute is dropped.
            tag.set_attr(name, _attr_value(value))

    for child in element.contents:
        tag.append(_map_child(child, options))

    return tag


def map_markup_string(
    raw: Any,
    options: ConversionOptions | None = None,
    parser: MarkupParser | None = None,
) -> HtmlTag | None:
    """Parse ``raw`` and convert its first element.

    ``None`` gives ``None`` and an existing :class:`HtmlTag` is returned
    unchanged; neither touches the parser. Objects implementing
    ``__html__`` (such as ``markupsafe.Markup``) are parsed from that text.
    """
    if raw is None:
        return None
    if isinstance(raw, HtmlTag):
        return raw

    options = options or ConversionOptions()
    markup = raw.__html__() if hasattr(raw, "__html__") else str(raw)
    active_parser = parser or SoupParser(options.parser)
    return map_element(active_parser.parse(markup), options)
