# merger.py
"""
Combines template bodies into one ignore document.

Bodies are merged strictly in the order given. A pattern or comment that
already appeared earlier in the merge (compared trimmed and lowercased) is
dropped, so the earliest occurrence wins.
"""
from typing import List, Sequence, Set

from smartignore.models import MergedDocument, Section, TemplateBody


def _normalize(line: str) -> str:
    return line.strip().lower()


def is_pattern(line: str) -> bool:
    stripped = line.strip()
    return bool(stripped) and not stripped.startswith("#")


class TemplateMerger:
    """Holds the comment and pattern sets of the merge in progress."""

    def __init__(self):
        self.seen_comments: Set[str] = set()
        self.seen_patterns: Set[str] = set()

    def merge(self, bodies: Sequence[TemplateBody]) -> MergedDocument:
        # each call starts from empty sets
        self.seen_comments = set()
        self.seen_patterns = set()
        sections = []
        for body in bodies:
            lines = self._filter(body.lines)
            if lines:
                sections.append(Section(label=body.label, lines=lines))
        return MergedDocument(sections=sections)

    def _filter(self, lines: Sequence[str]) -> List[str]:
        kept: List[str] = []
        for line in lines:
            normalized = _normalize(line)

            if not normalized:
                # collapse blank runs; never start a section with a blank
                if kept and kept[-1] != "":
                    kept.append("")
                continue

            seen = self.seen_comments if normalized.startswith("#") else self.seen_patterns
            if normalized in seen:
                continue
            seen.add(normalized)
            kept.append(line.rstrip())

        while kept and kept[-1] == "":
            kept.pop()
        return kept


def merge_templates(bodies: Sequence[TemplateBody]) -> MergedDocument:
    """Merge `bodies` into a fresh document; see TemplateMerger."""
    return TemplateMerger().merge(bodies)
