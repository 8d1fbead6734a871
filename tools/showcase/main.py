#!/usr/bin/env python3
"""
Project catalog exporter for the portfolio site.

- Reads projects/projects.yaml (a list of projects, or `projects` + `tagOrder`)
- Projects -> src/content/projects/<id>/index.md
  frontmatter: id, name, dateDisplay, taglineHtml, descriptionHtml,
  thumbnail, categories, links, importance, projectId, order, ...
- Whole catalog (projects + ordered categories + tagOrder)
  -> src/content/catalog.json

Key features:
- Newest-first project order from free-text dates, document order on ties
- Friendly date strings ("Aug 8-11, 2025" -> "Aug 8-11th 2025")
- Markdown rendered for names, taglines and descriptions
- Category order from `tagOrder`, then by most important member
- Bare domains in links get https://
- Project folders whose projectId left the catalog are removed
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

from .catalog import load_catalog
from .config import CATALOG_JSON, LOG_LEVEL, PROJ_OUT, PROJECTS_FILE
from .export import export_catalog


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="showcase-export",
        description="Normalize projects.yaml and export it for the static site.",
    )
    p.add_argument("--projects-file", type=pathlib.Path, default=PROJECTS_FILE)
    p.add_argument("--out", type=pathlib.Path, default=PROJ_OUT,
                   help="directory for per-project index.md cards")
    p.add_argument("--catalog-json", type=pathlib.Path, default=CATALOG_JSON)
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.projects_file.exists():
        print(
            f"ERROR: {args.projects_file} missing",
            file=sys.stderr,
        )
        return 1

    catalog = load_catalog(args.projects_file)
    export_catalog(catalog, args.out, args.catalog_json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
