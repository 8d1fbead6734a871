from __future__ import annotations

import pathlib
from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple

import yaml

from .config import SLUG_RE, SLUG_SENTINEL


def slugify(s: str) -> str:
    return SLUG_RE.sub("-", s.strip().lower()).strip("-") or SLUG_SENTINEL


def _norm_text(s: str) -> str:
    return s.replace('\r\n', '\n').replace('\r', '\n').lstrip('\ufeff')


def read_text(path: pathlib.Path) -> str:
    with path.open("r", encoding="utf-8") as fh:
        return _norm_text(fh.read())


def date_text(v: Any) -> str:
    """
    Text form of a YAML `date` value.

    YAML turns `2024-05-01` into a date and `2024` into an int; both are
    turned back into the text the author wrote. Anything else that is not
    a string becomes "".
    """
    if isinstance(v, str):
        return v
    if isinstance(v, datetime):
        return v.date().isoformat()
    if isinstance(v, date):
        return v.isoformat()
    if isinstance(v, int) and not isinstance(v, bool):
        return str(v)
    return ""


def yaml_frontmatter_block(data: Dict[str, Any]) -> str:
    dumped = yaml.safe_dump(
        data, sort_keys=False, allow_unicode=True
    ).rstrip()
    return f"---\n{dumped}\n---\n\n"


def parse_frontmatter(text: str) -> Tuple[Optional[Dict[str, Any]], str]:
    s = text.lstrip()
    if not s.startswith("---\n") and not s.startswith("---\r\n"):
        return None, text

    lines = text.splitlines(keepends=True)
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            fm_text = "".join(lines[1:i])
            body = "".join(lines[i + 1 :])
            fm = yaml.safe_load(fm_text) or {}
            return fm, body
    return None, text
