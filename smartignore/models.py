"""
where we store the
pydantic Data Structure classes
shared by the fetch, merge and reconcile steps

"""

from enum import Enum
from typing import Iterator, List, Optional

from pydantic import BaseModel, ConfigDict


class TemplateBody(BaseModel):
    """One stack's (or the essential block's) ignore rules, in order."""
    model_config = ConfigDict(frozen=True)

    label: str
    lines: List[str]

    @classmethod
    def from_text(cls, text: str, label: str, header: Optional[str] = None) -> "TemplateBody":
        lines = [line.rstrip() for line in text.splitlines()]
        if header:
            lines.insert(0, header)
        return cls(label=label, lines=lines)


class Section(BaseModel):
    label: str
    lines: List[str]


class MergedDocument(BaseModel):
    sections: List[Section] = []

    def render(self) -> str:
        """Join sections with a single blank line; empty document -> ''."""
        return "\n\n".join("\n".join(section.lines) for section in self.sections)

    def lines(self) -> Iterator[str]:
        rendered = self.render()
        if rendered:
            yield from rendered.split("\n")

    def is_empty(self) -> bool:
        return not self.sections


class FetchTier(str, Enum):
    GITHUB = "github"
    GITIGNORE_IO = "gitignore.io"
    LOCAL_FALLBACK = "local-fallback"
    DEFAULT = "default"


class FetchOutcome(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    tier: FetchTier
    bodies: List[TemplateBody]
    missing: List[str] = []


class WriteMode(str, Enum):
    CREATED = "created"
    OVERWRITTEN = "overwritten"
    MERGED = "merged"
    UNCHANGED = "unchanged"


class GenerationReport(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    path: str
    stacks: List[str]
    tier: FetchTier
    mode: WriteMode
    content: str
    written: bool = False
