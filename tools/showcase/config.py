#!/usr/bin/env python3
from __future__ import annotations

import os
import pathlib
import re
from datetime import datetime

# ---------- Paths

# This assumes config.py sits in tools/showcase/ at the repo root.
ROOT = pathlib.Path(__file__).resolve().parents[2]
PROJECTS_FILE = pathlib.Path(
    os.getenv("SHOWCASE_PROJECTS_FILE", ROOT / "projects" / "projects.yaml")
)
PROJ_OUT = pathlib.Path(
    os.getenv("SHOWCASE_CONTENT_OUT", ROOT / "src" / "content" / "projects")
)
CATALOG_JSON = pathlib.Path(
    os.getenv("SHOWCASE_CATALOG_JSON", ROOT / "src" / "content" / "catalog.json")
)
LOG_LEVEL = os.getenv("SHOWCASE_LOG_LEVEL", "INFO")

# ---------- Config

FALLBACK_THUMBNAIL = "/thumbnails/placeholder.svg"
UNRANKED_IMPORTANCE_BASE = 9000
UNCATEGORIZED = "Uncategorized"
SLUG_SENTINEL = "uncategorized"
RANGE_SEP = "-"

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
MONTH_NAMES = ("january", "february", "march", "april", "may", "june",
               "july", "august", "september", "october", "november",
               "december")

# Missing components in the generic date fallback come from here, not today.
# Text parsed under both defaults must yield the same year to count as a date.
FALLBACK_DATE_DEFAULT = datetime(2001, 1, 1)
FALLBACK_DATE_ALT_DEFAULT = datetime(2002, 1, 1)

# ---------- Shared regexes

SLUG_RE = re.compile(r"[^a-z0-9]+")
SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")
LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
DASH_RE = re.compile(r"\s*-\s*")

# Date shapes, tried in this order against the dash-normalized string.
_MON = r"([A-Za-z]+)"
_DAY = r"(\d{1,2})(?:st|nd|rd|th)?"
_YEAR = r"(\d{4})"

MONTH_RANGE_COMMA_YEAR = re.compile(rf"^{_MON}\s*-\s*{_MON},\s*{_YEAR}$")
MONTH_RANGE_YEAR = re.compile(rf"^{_MON}\s*-\s*{_MON}\s+{_YEAR}$")
FULL_DATE_RANGE = re.compile(
    rf"^{_MON}\s+{_DAY}\s*,?\s+{_YEAR}\s*-\s*{_MON}\s+{_DAY}\s*,?\s+{_YEAR}$"
)
MONTH_YEAR_RANGE = re.compile(rf"^{_MON}\s+{_YEAR}\s*-\s*{_MON}\s+{_YEAR}$")
MONTH_YEAR_TO_FULL_DATE = re.compile(
    rf"^{_MON}\s+{_YEAR}\s*-\s*{_MON}\s+{_DAY}\s*,?\s+{_YEAR}$"
)
DAY_RANGE = re.compile(rf"^{_MON}\s+(\d{{1,2}})\s*-\s*(\d{{1,2}}),\s*{_YEAR}$")
SINGLE_DATE = re.compile(rf"^{_MON}\s+(\d{{1,2}}),?\s+{_YEAR}$")
MONTH_COMMA_YEAR = re.compile(rf"^{_MON},\s*{_YEAR}$")
MONTH_YEAR = re.compile(rf"^{_MON}\s+{_YEAR}$")
YEAR_ONLY = re.compile(r"^(\d{4})$")

# Sort-key extraction from free-text dates
SORT_YEAR_RE = re.compile(r"\b(20\d{2})\b")
SORT_DAY_RE = re.compile(r"\b(\d{1,2})(?:[-–]\d{1,2})?\b")

INLINE_PARAGRAPH_RE = re.compile(r"^<p>(?P<body>.*)</p>$", re.DOTALL)
