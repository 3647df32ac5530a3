"""Minimal JSX node tree.

Section builders construct Element/Text trees; serialize() is the only place
markup text is produced, so escaping happens in exactly one step.
"""

import re
from dataclasses import dataclass
from typing import Union

DEFAULT_ACCENT = "#ffffff"

VOID_TAGS = frozenset({"img", "input", "br", "hr"})

_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "`": "&#96;",
    "{": "&#123;",
    "}": "&#125;",
}
_ESCAPE_RE = re.compile("[" + re.escape("".join(_ESCAPES)) + "]")

# Colors, lengths, keywords and rgb()/hsl() calls
_SAFE_STYLE_VALUE = re.compile(r"^[#A-Za-z0-9.,%() \-]+$")

INDENT = "  "


def escape_text(value: str) -> str:
    """Escape a string for use as JSX text or a quoted attribute value.

    Braces and backticks are replaced along with the HTML specials, so
    neither a JSX expression nor a template literal interpolation can be
    opened from page content.
    """
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group()], value)


def sanitize_style_value(value: str | int | float, fallback: str = DEFAULT_ACCENT) -> str:
    """Return a CSS value safe to embed in a single-quoted JSX style literal."""
    text = str(value).strip()
    if not text or not _SAFE_STYLE_VALUE.match(text):
        return fallback
    return text


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Element:
    """A JSX element.

    Attributes:
        tag: Element name.
        class_name: Tailwind classes (emitted as className).
        attrs: Ordered (name, value) attribute pairs.
        style: Ordered (property, value) inline style pairs. Numbers are
            emitted bare; strings are sanitized and single-quoted.
        children: Child nodes.
    """

    tag: str
    class_name: str = ""
    attrs: tuple[tuple[str, str], ...] = ()
    style: tuple[tuple[str, Union[str, int]], ...] = ()
    children: tuple["Node", ...] = ()


Node = Union[Element, Text]


def el(
    tag: str,
    class_name: str = "",
    *children: Node | str | None,
    attrs: dict[str, str] | None = None,
    style: dict[str, str | int] | None = None,
) -> Element:
    """Build an Element; str children become Text and None children are dropped.

    Example:
        >>> serialize(el("p", "text-sm", "Hello"))
        '<p className="text-sm">Hello</p>'
    """
    nodes = tuple(
        Text(child) if isinstance(child, str) else child
        for child in children
        if child is not None
    )
    return Element(
        tag=tag,
        class_name=class_name,
        attrs=tuple((attrs or {}).items()),
        style=tuple((style or {}).items()),
        children=nodes,
    )


# =============================================================================
# Serialization
# =============================================================================


def _style_literal(style: tuple[tuple[str, str | int], ...]) -> str:
    parts = []
    for prop, value in style:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            parts.append(f"{prop}: {value}")
        else:
            parts.append(f"{prop}: '{sanitize_style_value(value)}'")
    return "{{ " + ", ".join(parts) + " }}"


def _open_tag(node: Element) -> str:
    parts = [node.tag]
    classes = " ".join(node.class_name.split())
    if classes:
        parts.append(f'className="{escape_text(classes)}"')
    for name, value in node.attrs:
        parts.append(f'{name}="{escape_text(value)}"')
    if node.style:
        parts.append(f"style={_style_literal(node.style)}")
    return "<" + " ".join(parts)


def serialize(node: Node, indent: int = 0) -> str:
    """Serialize a node tree to indented JSX.

    Args:
        node: Root node.
        indent: Indentation depth of the root, in levels of two spaces.

    Returns:
        JSX source text without a trailing newline.
    """
    pad = INDENT * indent
    if isinstance(node, Text):
        return pad + escape_text(node.value)

    head = _open_tag(node)
    if node.tag in VOID_TAGS:
        return f"{pad}{head} />"
    if not node.children:
        return f"{pad}{head}></{node.tag}>"
    if len(node.children) == 1 and isinstance(node.children[0], Text):
        return f"{pad}{head}>{escape_text(node.children[0].value)}</{node.tag}>"

    lines = [f"{pad}{head}>"]
    lines.extend(serialize(child, indent + 1) for child in node.children)
    lines.append(f"{pad}</{node.tag}>")
    return "\n".join(lines)


__all__ = [
    "DEFAULT_ACCENT",
    "Element",
    "Text",
    "Node",
    "el",
    "escape_text",
    "sanitize_style_value",
    "serialize",
]
