"""
Writes generated rules into a project's .gitignore.

Without an existing file the output is a header plus the generated document.
With one, the user's file is kept line for line and only patterns it does
not already contain are appended, in a marked section at the end.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from smartignore.errors import SmartIgnoreError, WriteError
from smartignore.merger import is_pattern
from smartignore.models import MergedDocument, WriteMode

logger = logging.getLogger(__name__)

TOOL_NAME = "smart-gitignore"


def _stack_list(stacks: Sequence[str]) -> str:
    return ", ".join(sorted(stacks)) if stacks else "none"


def render_header(stacks: Sequence[str]) -> str:
    return (
        f"# .gitignore generated by {TOOL_NAME}\n"
        f"# Detected stacks: {_stack_list(stacks)}\n"
        f"# Re-running {TOOL_NAME} keeps your own rules and only appends new ones.\n"
        "\n"
    )


def section_marker(stacks: Sequence[str]) -> str:
    return f"# --- {TOOL_NAME}: added for {_stack_list(stacks)} ---"


def missing_patterns(existing: str, generated: MergedDocument) -> List[str]:
    """Generated pattern lines the existing text lacks, in generated order."""
    present = {line.strip().lower() for line in existing.splitlines() if line.strip()}
    missing = []
    for line in generated.lines():
        if not is_pattern(line):
            continue
        normalized = line.strip().lower()
        if normalized in present:
            continue
        present.add(normalized)
        missing.append(line.strip())
    return missing


def reconcile(existing: Optional[str], generated: MergedDocument,
              stacks: Sequence[str]) -> Tuple[str, WriteMode]:
    """
    Combine an existing ignore file (None when there is none, or when it
    should be overwritten) with a freshly generated document.
    """
    if existing is None:
        body = generated.render()
        return render_header(stacks) + body + ("\n" if body else ""), WriteMode.CREATED

    additions = missing_patterns(existing, generated)
    if not additions:
        return existing, WriteMode.UNCHANGED

    # appended lines follow the file's own line ending
    eol = "\r\n" if "\r\n" in existing else "\n"
    parts = [existing]
    if existing and not existing.endswith("\n"):
        parts.append(eol)
    if existing.strip():
        parts.append(eol)
    parts.append(section_marker(stacks) + eol)
    parts.append(eol.join(additions) + eol)
    logger.debug("Appending %d new patterns", len(additions))
    return "".join(parts), WriteMode.MERGED


def read_existing(path: Path) -> Optional[str]:
    """Return the current ignore file's text, or None if there is no file."""
    path = Path(path)
    if not path.is_file():
        return None
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SmartIgnoreError(f"Could not read existing {path}: {e}") from e


def write(path: Path, text: str) -> None:
    path = Path(path)
    try:
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise WriteError(path, e) from e
    logger.debug("Wrote %d bytes to %s", len(text.encode("utf-8")), path)
