# topmark:header:start
#
#   project      : DocForge
#   file         : markup.py
#   file_relpath : src/docforge/rendering/markup.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Inline console markup for DocForge output.

Console messages are written as templates with tagged spans::

    "Scanning @value@src/@c"
    "Found @count@12@c classes"

A span opens with ``@tag@`` and is closed by ``@c``; ``@c`` always closes the
most recently opened span, so spans nest. The tag set is closed (see
`MarkupTag`). Everything else is literal text:

- an unknown tag such as ``@option@`` is printed as-is, delimiters included;
- a ``@c`` with no open span is printed as-is;
- a span left open at the end of the template extends to the end;
- ``@@`` is an escaped ``@`` and never starts a marker.

`markup` escapes the text it wraps, so values such as paths containing
``@c`` cannot close their span early.

Rendering never raises on malformed markup. With color enabled each span is
styled by its tag's yachalk colorizer; with color disabled the tags are
stripped and only the literal content remains.

Example:
    ```python
    render_markup("Scanning @value@src/@c", color=False)  # 'Scanning src/'
    ```
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple, Protocol

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Iterator


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`; DocForge always calls
    colorizers with a single string.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return the styled rendering of ``args`` joined by ``sep``."""
        ...


class MarkupTag(str, Enum):
    """Closed set of span tags, each carrying the colorizer that styles it.

    The enum value is the tag name as written between ``@`` delimiters; the
    colorizer is stored separately (`style`) so Enum semantics stay intact.
    """

    _value_: str
    _style: Colorizer

    def __new__(cls, name: str, style: Colorizer) -> MarkupTag:
        """Construct a tag member from its name and colorizer."""
        obj: MarkupTag = str.__new__(cls, name)
        obj._value_ = name
        obj._style = style
        return obj

    HEADER = ("header", chalk.blue.bold)
    VALUE = ("value", chalk.green)
    COUNT = ("count", chalk.blue.bold)
    ERROR = ("error", chalk.red)

    @property
    def style(self) -> Colorizer:
        """Return the colorizer applied to this tag's spans."""
        return self._style

    @property
    def opener(self) -> str:
        """Return the opening marker of this tag (e.g. ``@value@``)."""
        return f"@{self._value_}@"


#: Marker closing the most recently opened span.
CLOSE_MARKER = "@c"

#: Escaped form of a literal ``@``.
ESCAPED_AT = "@@"


class TokenKind(str, Enum):
    """Kinds of tokens produced by `tokenize`."""

    TEXT = "text"
    OPEN = "open"
    CLOSE = "close"
    ESCAPE = "escape"


class MarkupToken(NamedTuple):
    """A lexical unit of a markup template.

    Attributes:
        kind (TokenKind): Literal text, escaped ``@``, span opener or span closer.
        text (str): The source text of the token (markers included).
        tag (MarkupTag | None): The tag opened by an ``OPEN`` token.
    """

    kind: TokenKind
    text: str
    tag: MarkupTag | None = None


# Escapes are tried first, then the closer, then the openers. The closer must not
# be the start of a word ("@config"); "@c@value@" reads as a closer and an opener.
_TOKEN_RE: re.Pattern[str] = re.compile(
    "@@|@c(?![A-Za-z0-9_])|@(" + "|".join(re.escape(t.value) for t in MarkupTag) + ")@"
)


def tokenize(template: str) -> Iterator[MarkupToken]:
    """Split ``template`` into text, escape, opener and closer tokens.

    Args:
        template (str): Markup template.

    Yields:
        MarkupToken: Tokens in source order. Adjacent literal text is not merged
            across markers; empty text tokens are never produced.
    """
    pos = 0
    for match in _TOKEN_RE.finditer(template):
        if match.start() > pos:
            yield MarkupToken(TokenKind.TEXT, template[pos : match.start()])
        tag_name: str | None = match.group(1)
        if match.group(0) == ESCAPED_AT:
            yield MarkupToken(TokenKind.ESCAPE, match.group(0))
        elif tag_name is None:
            yield MarkupToken(TokenKind.CLOSE, match.group(0))
        else:
            yield MarkupToken(TokenKind.OPEN, match.group(0), MarkupTag(tag_name))
        pos = match.end()
    if pos < len(template):
        yield MarkupToken(TokenKind.TEXT, template[pos:])


def render_markup(template: str, *, color: bool) -> str:
    """Render a markup template for the console.

    Args:
        template (str): Text with ``@tag@...@c`` spans.
        color (bool): Style spans with their tag colorizer when True; strip the
            markers when False.

    Returns:
        str: The rendered text.
    """
    # Stack of open spans; the bottom frame collects top-level text.
    frames: list[tuple[MarkupTag | None, list[str]]] = [(None, [])]

    def close_span() -> None:
        tag, parts = frames.pop()
        content: str = "".join(parts)
        if color and tag is not None and content:
            content = tag.style(content)
        frames[-1][1].append(content)

    for token in tokenize(template):
        if token.kind is TokenKind.OPEN:
            frames.append((token.tag, []))
        elif token.kind is TokenKind.ESCAPE:
            frames[-1][1].append("@")
        elif token.kind is TokenKind.CLOSE:
            if len(frames) > 1:
                close_span()
            else:
                frames[-1][1].append(token.text)
        else:
            frames[-1][1].append(token.text)

    while len(frames) > 1:
        close_span()
    return "".join(frames[0][1])


def escape_markup(text: str) -> str:
    """Return ``text`` with every ``@`` doubled so it renders literally."""
    return text.replace("@", ESCAPED_AT)


def strip_markup(template: str) -> str:
    """Return ``template`` with all recognized span markers removed."""
    return render_markup(template, color=False)


def markup(tag: MarkupTag, text: object) -> str:
    """Wrap ``text`` in a span of ``tag``, escaping any ``@`` it contains.

    Example:
        ```python
        markup(MarkupTag.VALUE, "/src")  # '@value@/src@c'
        markup(MarkupTag.VALUE, "a@c")  # '@value@a@@c@c'
        ```
    """
    return f"{tag.opener}{escape_markup(str(text))}{CLOSE_MARKER}"
