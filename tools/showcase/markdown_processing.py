from __future__ import annotations

import markdown

from .config import INLINE_PARAGRAPH_RE

# Soft line breaks are kept visible, like the site's GFM renderer.
MARKDOWN_EXTENSIONS = ["nl2br", "fenced_code", "tables", "sane_lists"]

# Everything but the paragraph processor; names, taglines get spans only.
BLOCK_PROCESSORS = (
    "indent",
    "code",
    "hashheader",
    "setextheader",
    "hr",
    "olist",
    "ulist",
    "quote",
    "reference",
)


def render_block(text: str) -> str:
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)


def _inline_markdown() -> markdown.Markdown:
    md = markdown.Markdown(extensions=["nl2br"])
    for name in BLOCK_PROCESSORS:
        md.parser.blockprocessors.deregister(name, strict=False)
    return md


def render_inline(text: str) -> str:
    """
    Render the inline markdown of `text` (emphasis, code, links) for names
    and taglines. Block syntax such as `# x`, `- x` or `> x` stays literal
    text; blank lines are dropped so the result is a single run of spans.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    html = _inline_markdown().convert("\n".join(lines))
    m = INLINE_PARAGRAPH_RE.match(html)
    return m.group("body") if m else html
