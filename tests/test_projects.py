import logging
from datetime import date

import pytest

from showcase.config import FALLBACK_THUMBNAIL
from showcase.models import ProjectLink
from showcase.projects import (
    build_links,
    build_project,
    coerce_importance,
    normalize_url,
)
from showcase.utils import slugify


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("example.com", "https://example.com"),
        ("/local/path", "/local/path"),
        ("https://x.com", "https://x.com"),
        ("ftp://files.example.org", "ftp://files.example.org"),
        ("justtext", "justtext"),
        ("  example.com/page  ", "https://example.com/page"),
        ("", None),
        ("   ", None),
        (None, None),
    ],
)
def test_normalize_url(raw, expected):
    assert normalize_url(raw) == expected


def test_slugify():
    assert slugify("Hello, World!") == "hello-world"
    assert slugify("  C++ Tools ") == "c-tools"
    assert slugify("!!!") == "uncategorized"


def test_links_in_fixed_order():
    links = build_links({
        "demoURL": "demo.example.com",
        "videoURL": "youtu.be/abc",
        "githubURL": "github.com/me/app",
        "websiteURL": "https://app.example.com",
    })
    assert [li.kind for li in links] == ["website", "github", "external", "demo"]
    assert [li.label for li in links] == ["Site", "Code", "Video", "Demo"]
    assert links[1].url == "https://github.com/me/app"


def test_legacy_link_suppressed_when_duplicate():
    links = build_links({"websiteURL": "example.com", "link": "https://example.com"})
    assert links == [ProjectLink("website", "Site", "https://example.com")]


def test_legacy_link_labels():
    assert build_links({"link": "foo.dev"}) == [
        ProjectLink("website", "View", "https://foo.dev")
    ]
    assert build_links({"websiteURL": "a.dev", "link": "b.dev"})[-1] == (
        ProjectLink("external", "More", "https://b.dev")
    )


def test_links_ignore_non_strings():
    assert build_links({"websiteURL": 42, "githubURL": ["x"]}) == []


@pytest.mark.parametrize(
    "value, expected",
    [
        (3, 3),
        (2.5, 2.5),
        ("12abc", 12),
        ("3.7", 3),
        (" -4", -4),
        ("abc", 9005),
        (None, 9005),
        (True, 9005),
        (float("nan"), 9005),
        (float("inf"), 9005),
    ],
)
def test_coerce_importance(value, expected):
    assert coerce_importance(value, 5) == expected


def test_build_project_defaults():
    p = build_project({"name": "My App", "description": "Hello"}, 0)
    assert p.id == "my-app"
    assert p.tagline == "Hello"
    assert p.thumbnail == FALLBACK_THUMBNAIL
    assert p.categories == ("Uncategorized",)
    assert p.category_slugs == ("uncategorized",)
    assert p.importance == 9000
    assert p.links == ()
    assert p.date == "" and p.date_display == ""


def test_build_project_tagline_falls_back_to_name():
    p = build_project({"name": "Thing", "description": "\nSecond line"}, 0)
    assert p.tagline == "Thing"


def test_build_project_fields():
    p = build_project(
        {
            "name": "**Bold** Game",
            "description": "First line\nsecond line",
            "tagline": "Jam *entry*",
            "date": "Nov 23, 2024",
            "thumbnail": "  /thumbnails/game.webp ",
            "categories": [" Games ", "", 7, "Jams"],
            "importance": "4",
        },
        2,
    )
    assert p.name_html == "<strong>Bold</strong> Game"
    assert p.tagline_html == "Jam <em>entry</em>"
    assert p.description_html.startswith("<p>First line<br")
    assert p.date_display == "Nov 23rd 2024"
    assert p.thumbnail == "/thumbnails/game.webp"
    assert p.categories == ("Games", "Jams")
    assert p.category_slugs == ("games", "jams")
    assert p.importance == 4


def test_build_project_coerces_yaml_dates():
    p = build_project({"name": "A", "description": "x", "date": date(2024, 5, 1)}, 0)
    assert p.date == "2024-05-01"
    assert p.date_display == "May 1, 2024"
    p = build_project({"name": "A", "description": "x", "date": 2024}, 0)
    assert p.date == "2024"


@pytest.mark.parametrize(
    "item",
    [
        "just a string",
        ["a", "list"],
        {"description": "no name"},
        {"name": "   ", "description": "blank name"},
        {"name": "No description"},
        {"name": "Blank description", "description": "   "},
    ],
)
def test_build_project_rejects(item, caplog):
    with caplog.at_level(logging.WARNING):
        assert build_project(item, 3) is None
    assert caplog.records
