# detector.py
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

import pathspec

from smartignore.registry import DETECTION_MAP, PATTERN_RULES

logger = logging.getLogger(__name__)

# Compiled once: stack -> spec matching any of its name patterns.
_PATTERN_SPECS: Dict[str, pathspec.PathSpec] = {
    stack: pathspec.PathSpec.from_lines("gitwildmatch", patterns)
    for stack, patterns in PATTERN_RULES.items()
}


def detect(names: Iterable[str]) -> List[str]:
    """Map scanned names to stack identifiers (sorted, unique)."""
    names = list(names)
    stacks = set()

    for name in names:
        for stack in DETECTION_MAP.get(name, ()):
            stacks.add(stack)

    for stack, spec in _PATTERN_SPECS.items():
        if stack in stacks:
            continue
        matched = next((name for name in names if spec.match_file(name)), None)
        if matched is not None:
            logger.debug("%s matched a %s name pattern", matched, stack)
            stacks.add(stack)

    return sorted(stacks)


def detection_table() -> List[Tuple[str, Tuple[str, ...]]]:
    """Marker names and name patterns with the stacks they imply, for display."""
    rows = list(DETECTION_MAP.items())
    for stack, patterns in PATTERN_RULES.items():
        rows.extend((pattern, (stack,)) for pattern in patterns)
    return rows
