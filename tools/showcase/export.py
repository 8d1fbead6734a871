from __future__ import annotations

import json
import pathlib
import shutil
from typing import Any, Dict, List, Set

import yaml

from .models import Catalog, Project
from .utils import parse_frontmatter, read_text, yaml_frontmatter_block


def ensure_dir(p: pathlib.Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def _remove_stale_project_dirs(out_dir: pathlib.Path, live_ids: Set[str]) -> None:
    """
    Remove project folders whose frontmatter carries a projectId that is
    no longer in the catalog. Folders we did not write are left alone.
    """
    for child in sorted(out_dir.iterdir()):
        if not child.is_dir():
            continue
        index_md = child / "index.md"
        if not index_md.exists():
            continue
        try:
            fm, _ = parse_frontmatter(read_text(index_md))
        except yaml.YAMLError:
            print(f"! unreadable frontmatter in {child.name}, leaving it alone")
            continue
        if not isinstance(fm, dict) or "projectId" not in fm:
            continue
        if fm["projectId"] not in live_ids:
            print(f"- removing stale project folder {child.name}")
            shutil.rmtree(child, ignore_errors=True)


def make_project_card(project: Project, order: int, out_dir: pathlib.Path) -> None:
    card_dir = out_dir / project.id
    ensure_dir(card_dir)

    fm: Dict[str, Any] = project.to_dict()
    fm["projectId"] = project.id
    fm["order"] = order

    (card_dir / "index.md").write_text(
        yaml_frontmatter_block(fm), encoding="utf-8"
    )
    print(f"✓ project card {project.id}")


def export_catalog(
    catalog: Catalog,
    out_dir: pathlib.Path,
    json_path: pathlib.Path,
) -> List[str]:
    ensure_dir(out_dir)

    written: List[str] = []
    for order, project in enumerate(catalog.projects):
        if project.id in written:
            print(f"! duplicate project id {project.id}, not overwriting its card")
            continue
        make_project_card(project, order, out_dir)
        written.append(project.id)

    _remove_stale_project_dirs(out_dir, set(written))

    ensure_dir(json_path.parent)
    json_path.write_text(
        json.dumps(catalog.to_dict(), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    print(
        f"✓ catalog {json_path.name}: {len(catalog.projects)} projects, "
        f"{len(catalog.categories)} categories"
    )
    return written
