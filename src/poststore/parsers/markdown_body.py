"""Split a Markdown post body into structural blocks.

This is not a Markdown renderer. It recognises only the block shapes that
matter to a document store and leaves inline markup untouched:

- fenced code (``` or ~~~, with an optional info string), and Jekyll's
  ``{% highlight lang %}`` ... ``{% endhighlight %}`` tags;
- ATX headings (``#`` through ``######``);
- image lines (``![alt](src)`` alone on a line);
- list runs (``-``, ``*``, ``+`` or ``1.`` items, with indented
  continuation lines);
- block quotes (``>``);
- paragraphs, separated by blank lines.

Thematic breaks (``---``, ``***``) end the current block and produce
nothing. Code contents are kept verbatim and never interpreted.
"""

from __future__ import annotations

import logging
import re

from poststore.core.document.models import Block, BlockKind

logger = logging.getLogger(__name__)

_FENCE_OPEN = re.compile(r"^ {0,3}(`{3,}|~{3,})(.*)$")
_HIGHLIGHT_OPEN = re.compile(r"^\s*\{%-?\s*highlight\s+(\S+)[^%]*-?%\}\s*$")
_HIGHLIGHT_CLOSE = re.compile(r"^\s*\{%-?\s*endhighlight\s*-?%\}\s*$")
_HEADING = re.compile(r"^ {0,3}(#{1,6})[ \t]+(.*?)(?:[ \t]+#+)?[ \t]*$")
_RULE = re.compile(r"^ {0,3}([-*_])(?:[ \t]*\1){2,}[ \t]*$")
_IMAGE = re.compile(r'^\s*!\[([^\]]*)\]\(\s*([^)\s]+)(?:\s+"[^"]*")?\s*\)\s*$')
_LIST_ITEM = re.compile(r"^ {0,3}(?:[-*+]|\d{1,9}[.)])[ \t]+(.*)$")
_QUOTE = re.compile(r"^ {0,3}>[ ]?(.*)$")


class _BlockBuilder:
    """Accumulates lines of the open paragraph, list or quote."""

    def __init__(self) -> None:
        self.blocks: list[Block] = []
        self._paragraph: list[str] = []
        self._items: list[str] = []
        self._quote: list[str] = []

    @property
    def in_list(self) -> bool:
        return bool(self._items)

    @property
    def in_quote(self) -> bool:
        return bool(self._quote)

    def flush(self) -> None:
        if self._paragraph:
            self.blocks.append(Block(BlockKind.PARAGRAPH, " ".join(self._paragraph)))
            self._paragraph = []
        if self._items:
            items = tuple(self._items)
            self.blocks.append(Block(BlockKind.LIST, "\n".join(items), items=items))
            self._items = []
        if self._quote:
            self.blocks.append(Block(BlockKind.QUOTE, "\n".join(self._quote).strip()))
            self._quote = []

    def add(self, block: Block) -> None:
        self.flush()
        self.blocks.append(block)

    def add_paragraph_line(self, line: str) -> None:
        if self._items or self._quote:
            self.flush()
        self._paragraph.append(line.strip())

    def add_item(self, text: str) -> None:
        if self._paragraph or self._quote:
            self.flush()
        self._items.append(text.strip())

    def continue_item(self, line: str) -> None:
        self._items[-1] = f"{self._items[-1]} {line.strip()}".strip()

    def add_quote_line(self, text: str) -> None:
        if self._paragraph or self._items:
            self.flush()
        self._quote.append(text.rstrip())


def _collect_fence(lines: list[str], start: int, marker: str) -> tuple[list[str], int, bool]:
    """Gather code lines after an opening fence.

    Returns the code lines, the index of the closing fence (or ``len(lines)``)
    and whether a closing fence was found.
    """
    closing = re.compile(rf"^ {{0,3}}{re.escape(marker[0])}{{{len(marker)},}}[ \t]*$")
    i = start
    code: list[str] = []
    while i < len(lines):
        if closing.match(lines[i]):
            return code, i, True
        code.append(lines[i])
        i += 1
    return code, i, False


def _collect_highlight(lines: list[str], start: int) -> tuple[list[str], int, bool]:
    i = start
    code: list[str] = []
    while i < len(lines):
        if _HIGHLIGHT_CLOSE.match(lines[i]):
            return code, i, True
        code.append(lines[i])
        i += 1
    return code, i, False


def parse_body(text: str, source: str = "<string>") -> tuple[Block, ...]:
    """Segment a Markdown body into blocks.

    Args:
        text: Body text following the front matter.
        source: Name used in log messages (normally the file path).

    Returns:
        Blocks in document order.
    """
    lines = text.splitlines()
    builder = _BlockBuilder()
    i = 0

    while i < len(lines):
        line = lines[i]

        fence = _FENCE_OPEN.match(line)
        if fence and not (fence.group(1)[0] == "`" and "`" in fence.group(2)):
            info = fence.group(2).strip()
            language = info.split()[0] if info else ""
            code, i, closed = _collect_fence(lines, i + 1, fence.group(1))
            if not closed:
                logger.warning("%s: unterminated code fence, running to end of file", source)
            builder.add(Block(BlockKind.CODE, "\n".join(code), language=language))
            i += 1
            continue

        highlight = _HIGHLIGHT_OPEN.match(line)
        if highlight:
            code, i, closed = _collect_highlight(lines, i + 1)
            if not closed:
                logger.warning("%s: unterminated highlight tag, running to end of file", source)
            builder.add(Block(BlockKind.CODE, "\n".join(code), language=highlight.group(1)))
            i += 1
            continue

        i += 1

        if not line.strip():
            builder.flush()
            continue

        heading = _HEADING.match(line)
        if heading:
            builder.add(
                Block(BlockKind.HEADING, heading.group(2).strip(), level=len(heading.group(1)))
            )
            continue

        if _RULE.match(line):
            builder.flush()
            continue

        image = _IMAGE.match(line)
        if image:
            builder.add(Block(BlockKind.IMAGE, image.group(1), src=image.group(2)))
            continue

        item = _LIST_ITEM.match(line)
        if item:
            builder.add_item(item.group(1))
            continue

        quote = _QUOTE.match(line)
        if quote:
            builder.add_quote_line(quote.group(1))
            continue

        if builder.in_list and line[:1] in (" ", "\t"):
            builder.continue_item(line)
        elif builder.in_quote:
            # Lazy continuation of a quoted paragraph.
            builder.add_quote_line(line.strip())
        else:
            builder.add_paragraph_line(line)

    builder.flush()
    return tuple(builder.blocks)
