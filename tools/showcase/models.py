from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Tuple

LinkKind = Literal["website", "github", "demo", "external"]


@dataclass(frozen=True)
class ProjectLink:
    kind: LinkKind
    label: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.kind, "label": self.label, "url": self.url}


@dataclass(frozen=True)
class Project:
    id: str
    date: str
    date_display: str
    name: str
    name_html: str
    tagline: str
    tagline_html: str
    description: str
    description_html: str
    thumbnail: str
    categories: Tuple[str, ...]
    category_slugs: Tuple[str, ...]
    importance: float
    links: Tuple[ProjectLink, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "dateDisplay": self.date_display,
            "name": self.name,
            "nameHtml": self.name_html,
            "tagline": self.tagline,
            "taglineHtml": self.tagline_html,
            "description": self.description,
            "descriptionHtml": self.description_html,
            "thumbnail": self.thumbnail,
            "categories": list(self.categories),
            "categorySlugs": list(self.category_slugs),
            "importance": self.importance,
            "links": [li.to_dict() for li in self.links],
        }


@dataclass(frozen=True)
class Category:
    slug: str
    display_name: str
    projects: Tuple[Project, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slug": self.slug,
            "displayName": self.display_name,
            "projects": [p.to_dict() for p in self.projects],
        }


@dataclass(frozen=True)
class Catalog:
    projects: Tuple[Project, ...] = ()
    categories: Tuple[Category, ...] = ()
    tag_order: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "projects": [p.to_dict() for p in self.projects],
            "categories": [c.to_dict() for c in self.categories],
            "tagOrder": list(self.tag_order),
        }
