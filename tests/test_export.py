import json
import textwrap

from showcase.catalog import normalize_document
from showcase.export import export_catalog
from showcase.main import main
from showcase.pages import entries, projects_page
from showcase.utils import parse_frontmatter, yaml_frontmatter_block

DOC = textwrap.dedent(
    """\
    tagOrder: [Games]
    projects:
      - name: Pixel Tanks
        date: Aug 8-11, 2025
        description: Tank battles.
        categories: [Games]
        githubURL: github.com/example/pixel-tanks
      - name: Site
        date: May 2024
        description: This website.
        categories: [Web]
        websiteURL: example.com
    """
)


def test_export_writes_cards_and_json(tmp_path, capsys):
    out = tmp_path / "projects"
    json_path = tmp_path / "catalog.json"
    written = export_catalog(normalize_document(DOC), out, json_path)

    assert written == ["pixel-tanks", "site"]
    fm, body = parse_frontmatter((out / "pixel-tanks" / "index.md").read_text(encoding="utf-8"))
    assert body.strip() == ""
    assert fm["projectId"] == "pixel-tanks"
    assert fm["order"] == 0
    assert fm["dateDisplay"] == "Aug 8-11th 2025"
    assert fm["links"] == [
        {"type": "github", "label": "Code", "url": "https://github.com/example/pixel-tanks"}
    ]

    data = json.loads(json_path.read_text(encoding="utf-8"))
    assert [p["id"] for p in data["projects"]] == ["pixel-tanks", "site"]
    assert [c["slug"] for c in data["categories"]] == ["games", "web"]
    assert data["tagOrder"] == ["Games"]
    assert "✓ project card site" in capsys.readouterr().out


def test_export_prunes_stale_cards_only(tmp_path):
    out = tmp_path / "projects"
    (out / "old-project").mkdir(parents=True)
    (out / "old-project" / "index.md").write_text(
        yaml_frontmatter_block({"projectId": "old-project"}), encoding="utf-8"
    )
    (out / "handwritten").mkdir()
    (out / "handwritten" / "index.md").write_text("# notes\n", encoding="utf-8")

    export_catalog(normalize_document(DOC), out, tmp_path / "catalog.json")

    assert not (out / "old-project").exists()
    assert (out / "handwritten" / "index.md").exists()
    assert (out / "site" / "index.md").exists()


def test_export_skips_folder_with_broken_frontmatter(tmp_path, capsys):
    out = tmp_path / "projects"
    (out / "notes").mkdir(parents=True)
    broken = "---\nprojectId: [unclosed\n---\n\nbody\n"
    (out / "notes" / "index.md").write_text(broken, encoding="utf-8")

    written = export_catalog(normalize_document(DOC), out, tmp_path / "catalog.json")

    assert written == ["pixel-tanks", "site"]
    assert (out / "notes" / "index.md").read_text(encoding="utf-8") == broken
    assert "! unreadable frontmatter in notes" in capsys.readouterr().out


def test_export_does_not_overwrite_duplicate_ids(tmp_path, capsys):
    doc = textwrap.dedent(
        """\
        - {name: My App, description: first}
        - {name: my-app, description: second}
        """
    )
    out = tmp_path / "projects"
    written = export_catalog(normalize_document(doc), out, tmp_path / "catalog.json")

    assert written == ["my-app"]
    fm, _ = parse_frontmatter((out / "my-app" / "index.md").read_text(encoding="utf-8"))
    assert fm["description"] == "first"
    assert "duplicate project id my-app" in capsys.readouterr().out


def test_pages(tmp_path):
    path = tmp_path / "projects.yaml"
    path.write_text(DOC, encoding="utf-8")

    page = projects_page(path)
    assert set(page) == {"projects", "categories", "tagOrder"}
    assert page["categories"][0]["displayName"] == "Games"
    assert page["categories"][0]["projects"][0]["name"] == "Pixel Tanks"
    assert entries(path) == [{"tag": "all"}, {"tag": "games"}, {"tag": "web"}]


def test_pages_without_document(tmp_path):
    assert entries(tmp_path / "missing.yaml") == [{"tag": "all"}]
    assert projects_page(tmp_path / "missing.yaml") == {
        "projects": [], "categories": [], "tagOrder": []
    }


def test_main_missing_file(tmp_path, capsys):
    assert main(["--projects-file", str(tmp_path / "nope.yaml")]) == 1
    assert "missing" in capsys.readouterr().err


def test_main_exports(tmp_path):
    path = tmp_path / "projects.yaml"
    path.write_text(DOC, encoding="utf-8")
    rc = main([
        "--projects-file", str(path),
        "--out", str(tmp_path / "out"),
        "--catalog-json", str(tmp_path / "catalog.json"),
    ])
    assert rc == 0
    assert (tmp_path / "out" / "pixel-tanks" / "index.md").exists()
    assert (tmp_path / "catalog.json").exists()
