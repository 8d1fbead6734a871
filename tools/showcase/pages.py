from __future__ import annotations

import pathlib
from typing import Any, Dict, List, Optional

from .catalog import load_catalog


def projects_page(path: Optional[pathlib.Path] = None) -> Dict[str, Any]:
    """Data for the /projects/[tag] page: all categories, projects and tag order."""
    return load_catalog(path).to_dict()


def entries(path: Optional[pathlib.Path] = None) -> List[Dict[str, str]]:
    """Prerender entries: the `all` view plus one page per category slug."""
    categories = load_catalog(path).categories
    return [{"tag": "all"}] + [{"tag": c.slug} for c in categories]
