"""
Catalog normalization: projects document -> sorted projects + ordered categories.

The document is either a bare list of project entries (legacy) or a mapping
with a `projects` list and an optional `tagOrder` list of category names.

Projects are shown newest first, by the (year, month, day) read out of their
free-text `date`; entries that tie keep their document order. Categories
follow `tagOrder` where it names them, and otherwise the most important
(lowest `importance`) member of each category.
"""

from __future__ import annotations

import logging
import pathlib
from collections import Counter
from typing import Any, Dict, List, Optional, Sequence, Tuple

import yaml

from .config import PROJECTS_FILE
from .dates import date_sort_key
from .models import Catalog, Category, Project
from .projects import build_project
from .utils import read_text

logger = logging.getLogger(__name__)


def _split_document(parsed: Any) -> Optional[Tuple[List[Any], List[str]]]:
    if isinstance(parsed, list):
        return parsed, []
    if isinstance(parsed, dict):
        entries = parsed.get("projects")
        tag_order = parsed.get("tagOrder")
        return (
            entries if isinstance(entries, list) else [],
            [t for t in tag_order if isinstance(t, str)]
            if isinstance(tag_order, list) else [],
        )
    return None


def sort_projects(entries: Sequence[Tuple[Project, int]]) -> List[Project]:
    """Newest first; `entries` pairs each project with its document index."""

    def key(entry: Tuple[Project, int]):
        project, index = entry
        year, month, day = date_sort_key(project.date)
        return (-year, -month, -day, index)

    return [project for project, _ in sorted(entries, key=key)]


def group_categories(projects: Sequence[Project]) -> List[Tuple[Category, float]]:
    """
    Group `projects` by category slug, keeping their order inside each group.

    Returns each Category with its default rank (lowest member importance),
    in first-seen order.
    """
    groups: Dict[str, Dict[str, Any]] = {}
    for project in projects:
        for name, slug in zip(project.categories, project.category_slugs):
            group = groups.get(slug)
            if group is None:
                group = groups[slug] = {
                    "display_name": name,
                    "projects": [],
                    "rank": project.importance,
                }
            # A project listing two names with the same slug joins once.
            if group["projects"] and group["projects"][-1] is project:
                continue
            group["projects"].append(project)
            group["rank"] = min(group["rank"], project.importance)

    return [
        (Category(slug, g["display_name"], tuple(g["projects"])), g["rank"])
        for slug, g in groups.items()
    ]


def order_categories(
    ranked: Sequence[Tuple[Category, float]],
    tag_order: Sequence[str] = (),
) -> List[Category]:
    position: Dict[str, int] = {}
    for i, name in enumerate(tag_order):
        position.setdefault(name, i)

    def key(entry: Tuple[Category, float]):
        category, rank = entry
        if category.display_name in position:
            return (0, position[category.display_name])
        return (1, rank)

    return [category for category, _ in sorted(ranked, key=key)]


def find_duplicate_ids(projects: Sequence[Project]) -> List[str]:
    counts = Counter(p.id for p in projects)
    return sorted(pid for pid, n in counts.items() if n > 1)


def normalize_parsed(parsed: Any) -> Catalog:
    split = _split_document(parsed)
    if split is None:
        logger.warning(
            "Projects document must be a list or a mapping with `projects`"
        )
        return Catalog()
    items, tag_order = split

    entries: List[Tuple[Project, int]] = []
    for index, item in enumerate(items):
        project = build_project(item, index)
        if project is not None:
            entries.append((project, index))

    projects = sort_projects(entries)
    dupes = find_duplicate_ids(projects)
    if dupes:
        logger.warning("Duplicate project ids: %s", ", ".join(dupes))

    categories = order_categories(group_categories(projects), tag_order)
    return Catalog(tuple(projects), tuple(categories), tuple(tag_order))


def normalize_document(text: str) -> Catalog:
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.error("Error parsing projects document: %s", e)
        return Catalog()
    return normalize_parsed(parsed)


def load_catalog(path: Optional[pathlib.Path] = None) -> Catalog:
    path = pathlib.Path(path or PROJECTS_FILE)
    if not path.exists():
        logger.warning("Projects file not found at %s", path)
        return Catalog()
    try:
        text = read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error reading %s: %s", path, e)
        return Catalog()
    return normalize_document(text)


def load_all_projects(path: Optional[pathlib.Path] = None) -> List[Category]:
    return list(load_catalog(path).categories)


def get_all_projects_flat(path: Optional[pathlib.Path] = None) -> List[Project]:
    return list(load_catalog(path).projects)


def get_tag_order(path: Optional[pathlib.Path] = None) -> List[str]:
    return list(load_catalog(path).tag_order)
