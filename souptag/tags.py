"""Mutable tag model for building HTML programmatically."""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional


class TagKind(Enum):
    GENERIC = "generic"
    SELECT = "select"
    TABLE = "table"
    TABLE_ROW = "table_row"
    DEFINITION_LIST = "definition_list"
    FORM = "form"
    LINE_BREAK = "line_break"
    LINK = "link"
    DIV = "div"
    CHECKBOX = "checkbox"
    HIDDEN = "hidden"
    TEXTBOX = "textbox"
    LITERAL = "literal"


# Tag name each variant renders with.
KIND_TAG_NAMES: Dict[TagKind, str] = {
    TagKind.SELECT: "select",
    TagKind.TABLE: "table",
    TagKind.TABLE_ROW: "tr",
    TagKind.DEFINITION_LIST: "dl",
    TagKind.FORM: "form",
    TagKind.LINE_BREAK: "br",
    TagKind.LINK: "a",
    TagKind.DIV: "div",
    TagKind.CHECKBOX: "input",
    TagKind.HIDDEN: "input",
    TagKind.TEXTBOX: "input",
    TagKind.LITERAL: "",
}

# Elements that never have a closing tag.
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


@dataclass
class HtmlTag:
    """A node of the output tree.

    ``attrs`` keeps generic attributes and the identifier in insertion order.
    Class tokens live apart from ``attrs`` and render after them. ``text`` is
    the raw payload of a literal tag and the label of a link tag.
    """

    name: str
    kind: TagKind = TagKind.GENERIC
    attrs: Dict[str, str] = field(default_factory=dict)
    class_tokens: List[str] = field(default_factory=list)
    children: List["HtmlTag"] = field(default_factory=list)
    text: Optional[str] = None
    checked: bool = False

    @property
    def id(self) -> Optional[str]:
        return self.attrs.get("id")

    @id.setter
    def id(self, value: str) -> None:
        self.set_id(value)

    def set_id(self, value: str) -> "HtmlTag":
        self.attrs["id"] = value
        return self

    def attr(self, name: str) -> Optional[str]:
        if name.lower() == "class":
            return " ".join(self.class_tokens) if self.class_tokens else None
        if name.lower() == "id":
            return self.id
        return self.attrs.get(name)

    def set_attr(self, name: str, value: str) -> "HtmlTag":
        """Set an attribute; ``id`` and ``class`` go to their dedicated slots."""
        lowered = name.lower()
        if lowered == "id":
            return self.set_id(value)
        if lowered == "class":
            return self.add_classes(value.split())
        self.attrs[name] = value
        return self

    def has_attr(self, name: str) -> bool:
        if name.lower() == "class":
            return bool(self.class_tokens)
        if name.lower() == "id":
            return "id" in self.attrs
        return name in self.attrs

    def remove_attr(self, name: str) -> "HtmlTag":
        lowered = name.lower()
        if lowered == "class":
            self.class_tokens.clear()
        elif lowered == "id":
            self.attrs.pop("id", None)
        else:
            self.attrs.pop(name, None)
        return self

    def add_class(self, token: str) -> "HtmlTag":
        if token and token not in self.class_tokens:
            self.class_tokens.append(token)
        return self

    def add_classes(self, tokens: Iterable[str]) -> "HtmlTag":
        for token in tokens:
            self.add_class(token)
        return self

    def has_class(self, token: str) -> bool:
        return token in self.class_tokens

    @property
    def classes(self) -> List[str]:
        return list(self.class_tokens)

    @property
    def is_literal(self) -> bool:
        return self.kind is TagKind.LITERAL

    @property
    def is_void(self) -> bool:
        return self.kind is TagKind.LINE_BREAK or self.name in VOID_ELEMENTS

    def append(self, child: "HtmlTag") -> "HtmlTag":
        if self.is_literal:
            raise ValueError("literal tags cannot have children")
        self.children.append(child)
        return self

    def descendants(self) -> Iterator["HtmlTag"]:
        return iter_descendants(self)

    def render(self) -> str:
        return render_tag(self)

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view of the tree, for JSON/YAML dumps."""
        if self.is_literal:
            return {"kind": self.kind.value, "text": self.text}
        data: Dict[str, Any] = {"kind": self.kind.value, "name": self.name}
        if self.attrs:
            data["attrs"] = dict(self.attrs)
        if self.class_tokens:
            data["classes"] = list(self.class_tokens)
        if self.kind is TagKind.LINK:
            data["text"] = self.text
        if self.kind is TagKind.CHECKBOX:
            data["checked"] = self.checked
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


def _render_attrs(tag: HtmlTag) -> str:
    parts = [f'{name}="{html.escape(value, quote=True)}"' for name, value in tag.attrs.items()]
    if tag.class_tokens:
        parts.append(f'class="{html.escape(" ".join(tag.class_tokens), quote=True)}"')
    if not parts:
        return ""
    return " " + " ".join(parts)


def render_tag(tag: HtmlTag) -> str:
    if tag.is_literal:
        return tag.text or ""
    attrs = _render_attrs(tag)
    if tag.is_void:
        return f"<{tag.name}{attrs} />"
    if tag.children:
        inner = "".join(render_tag(child) for child in tag.children)
    elif tag.kind is TagKind.LINK and tag.text:
        inner = html.escape(tag.text, quote=False)
    else:
        inner = ""
    return f"<{tag.name}{attrs}>{inner}</{tag.name}>"


def iter_descendants(tag: HtmlTag) -> Iterator[HtmlTag]:
    """Yield every descendant of ``tag`` depth-first, pre-order, root excluded."""
    stack = list(reversed(tag.children))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def new_tag(kind: TagKind, name: str | None = None) -> HtmlTag:
    tag_name = name if name is not None else KIND_TAG_NAMES.get(kind)
    if tag_name is None:
        raise ValueError(f"a tag name is required for {kind.value} tags")
    return HtmlTag(name=tag_name.lower(), kind=kind)


def literal_tag(raw: str) -> HtmlTag:
    return HtmlTag(name="", kind=TagKind.LITERAL, text=raw)


def div_tag() -> HtmlTag:
    return new_tag(TagKind.DIV)


def select_tag() -> HtmlTag:
    return new_tag(TagKind.SELECT)


def table_tag() -> HtmlTag:
    return new_tag(TagKind.TABLE)


def table_row_tag() -> HtmlTag:
    return new_tag(TagKind.TABLE_ROW)


def definition_list_tag() -> HtmlTag:
    return new_tag(TagKind.DEFINITION_LIST)


def form_tag() -> HtmlTag:
    return new_tag(TagKind.FORM)


def line_break_tag() -> HtmlTag:
    return new_tag(TagKind.LINE_BREAK)


def link_tag(text: str, href: str | None, classes: Iterable[str] = ()) -> HtmlTag:
    tag = HtmlTag(name="a", kind=TagKind.LINK, text=text)
    if href is not None:
        tag.set_attr("href", href)
    return tag.add_classes(classes)


def checkbox_tag(checked: bool) -> HtmlTag:
    return HtmlTag(name="input", kind=TagKind.CHECKBOX, checked=checked)


def hidden_tag() -> HtmlTag:
    return new_tag(TagKind.HIDDEN)


def textbox_tag() -> HtmlTag:
    return new_tag(TagKind.TEXTBOX)


__all__ = [
    "HtmlTag",
    "KIND_TAG_NAMES",
    "TagKind",
    "VOID_ELEMENTS",
    "checkbox_tag",
    "definition_list_tag",
    "div_tag",
    "form_tag",
    "hidden_tag",
    "iter_descendants",
    "line_break_tag",
    "link_tag",
    "literal_tag",
    "new_tag",
    "render_tag",
    "select_tag",
    "table_row_tag",
    "table_tag",
    "textbox_tag",
]
