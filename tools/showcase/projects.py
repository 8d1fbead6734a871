from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional

from .config import (
    FALLBACK_THUMBNAIL,
    LEADING_INT_RE,
    SCHEME_RE,
    UNCATEGORIZED,
    UNRANKED_IMPORTANCE_BASE,
)
from .dates import format_date
from .markdown_processing import render_block, render_inline
from .models import Project, ProjectLink
from .utils import date_text, slugify

logger = logging.getLogger(__name__)


def _text(v: Any) -> str:
    return v if isinstance(v, str) else ""


def normalize_url(url: Optional[str]) -> Optional[str]:
    if not url or not url.strip():
        return None
    url = url.strip()
    if url.startswith("/"):
        return url
    if SCHEME_RE.match(url):
        return url
    # Looks like a bare domain ("example.com/page")
    if "." in url:
        return f"https://{url}"
    return url


def build_links(data: Dict[str, Any]) -> List[ProjectLink]:
    website = normalize_url(_text(data.get("websiteURL")))
    github = normalize_url(_text(data.get("githubURL")))
    video = normalize_url(_text(data.get("videoURL")))
    demo = normalize_url(_text(data.get("demoURL")))
    legacy = normalize_url(_text(data.get("link")))

    links: List[ProjectLink] = []
    if website:
        links.append(ProjectLink("website", "Site", website))
    if github:
        links.append(ProjectLink("github", "Code", github))
    if video:
        links.append(ProjectLink("external", "Video", video))
    if demo:
        links.append(ProjectLink("demo", "Demo", demo))
    if legacy and legacy not in {li.url for li in links}:
        if website:
            links.append(ProjectLink("external", "More", legacy))
        else:
            links.append(ProjectLink("website", "View", legacy))
    return links


def coerce_importance(value: Any, index: int) -> float:
    """
    Explicit rank of an entry, or `9000 + index` when it has none.

    Numbers are used as they are; strings count by their leading integer
    ("12abc" -> 12, "3.7" -> 3).
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if math.isfinite(value):
            return value
    elif isinstance(value, str):
        m = LEADING_INT_RE.match(value)
        if m:
            return int(m.group(1))
    return UNRANKED_IMPORTANCE_BASE + index


def build_project(item: Any, index: int) -> Optional[Project]:
    """Build one Project from a raw entry, or None (with a warning) to skip it."""
    if not isinstance(item, dict):
        logger.warning("Skipping invalid project entry at index %d", index)
        return None

    name = _text(item.get("name")).strip()
    if not name:
        logger.warning("Missing name for project entry at index %d", index)
        return None

    description = _text(item.get("description"))
    if not description.strip():
        logger.warning('Missing description for project "%s"', name)
        return None

    tagline = (
        _text(item.get("tagline"))
        or description.split("\n")[0].strip()
        or name
    )

    raw_categories = item.get("categories")
    if not isinstance(raw_categories, list):
        raw_categories = []
    categories = [c.strip() for c in raw_categories if isinstance(c, str) and c.strip()]
    if not categories:
        categories = [UNCATEGORIZED]

    date = date_text(item.get("date"))
    thumbnail = _text(item.get("thumbnail")).strip() or FALLBACK_THUMBNAIL

    return Project(
        id=slugify(name),
        date=date,
        date_display=format_date(date),
        name=name,
        name_html=render_inline(name),
        tagline=tagline,
        tagline_html=render_inline(tagline),
        description=description,
        description_html=render_block(description),
        thumbnail=thumbnail,
        categories=tuple(categories),
        category_slugs=tuple(slugify(c) for c in categories),
        importance=coerce_importance(item.get("importance"), index),
        links=tuple(build_links(item)),
    )
