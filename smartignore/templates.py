"""
Local ignore templates.

A templates directory may hold ``<stack>.gitignore``, ``essential.gitignore``
and ``default.gitignore``; every file is optional and the literals below are
used when one is missing.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple

logger = logging.getLogger(__name__)

ESSENTIAL_TEMPLATE = """# OS
.DS_Store
Thumbs.db

# IDEs
.idea/
.vscode/

# Environment
.env
.env.local
.env.*.local

# Logs
*.log

# Temporary
*.tmp
.cache/"""

BASIC_TEMPLATE = """# OS
.DS_Store
Thumbs.db

# IDEs
.idea/
.vscode/
*.swp
*.swo
*~

# Logs
*.log
npm-debug.log*
yarn-debug.log*
yarn-error.log*

# Dependencies
node_modules/
vendor/

# Environment
.env
.env.local
.env.*.local

# Build
dist/
build/
*.class
*.jar
*.war
"""

ESSENTIAL_HEADER = "# Essential (OS, IDEs, env, logs)"


class LocalTemplates:
    """Reads templates from one directory, falling back to built-in text."""

    def __init__(self, templates_dir: Path):
        self.templates_dir = Path(templates_dir)

    def get(self, stack: str) -> Optional[str]:
        """Return the template for `stack`, or None when there is no file for it."""
        return self._read(f"{stack}.gitignore")

    def essential(self) -> str:
        content = self._read("essential.gitignore")
        return content.strip() if content and content.strip() else ESSENTIAL_TEMPLATE

    def default(self) -> str:
        content = self._read("default.gitignore")
        return content if content and content.strip() else BASIC_TEMPLATE

    def fallback(self, stacks: Iterable[str]) -> Tuple[str, str]:
        """
        Best single local template for a batch: the first stack with a file,
        else the default template. Returns (label, content).
        """
        for stack in stacks:
            content = self.get(stack)
            if content is not None:
                return f"{stack} (local)", content
        return "default", self.default()

    def _read(self, name: str) -> Optional[str]:
        path = self.templates_dir / name
        if not path.is_file():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read local template %s: %s", path, e)
            return None
