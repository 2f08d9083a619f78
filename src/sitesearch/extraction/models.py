"""Record types passed between page extraction and index assembly."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class PageInput:
    """A rendered page as supplied by the site generator."""

    contents: str
    component: str
    version: str
    stem: str
    pub_url: str


@dataclass(slots=True)
class HeadingRef:
    """A sub-heading that can be targeted through its anchor id."""

    text: str
    id: str

    def to_dict(self) -> dict[str, str]:
        return {"text": self.text, "id": self.id}


@dataclass(slots=True)
class ExtractedDocument:
    """Indexable content of one page, also stored verbatim for result rendering."""

    text: str
    title: str
    component: str
    version: str
    name: str
    url: str
    titles: list[HeadingRef] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "text": self.text,
            "title": self.title,
            "component": self.component,
            "version": self.version,
            "name": self.name,
            "url": self.url,
            "titles": [heading.to_dict() for heading in self.titles],
        }
