from abc import ABC, abstractmethod
from typing import Iterable, List
import logging
import os

from smartignore.errors import ScanError
from smartignore.registry import ALLOWED_HIDDEN

logger = logging.getLogger(__name__)


class Scanner(ABC):
    """
    Abstract base class for listing the names that stack detection looks at.
    Concrete strategies should implement the `scan` method.
    """
    @abstractmethod
    def scan(self) -> List[str]:
        """
        Return the names of the files and directories to run detection on.
        """


class DirectoryScanner(Scanner):
    """
    Lists the top level of a directory (files and directories only).
    Hidden entries are skipped unless they identify a stack.
    """
    def __init__(self, root_path: str, allowed_hidden: Iterable[str] = ALLOWED_HIDDEN):
        self.root_path = root_path
        self.allowed_hidden = frozenset(allowed_hidden)

    def scan(self) -> List[str]:
        try:
            entries = sorted(os.listdir(self.root_path))
        except OSError as e:
            raise ScanError(f"Could not scan directory {self.root_path}: {e}") from e

        found = []
        for entry in entries:
            if self._should_skip(entry):
                continue
            full_path = self.full_path(entry)
            if os.path.isdir(full_path) or os.path.isfile(full_path):
                found.append(entry)
        logger.debug("Scanned %s: %d entries", self.root_path, len(found))
        return found

    def _should_skip(self, name: str) -> bool:
        return name.startswith('.') and name not in self.allowed_hidden

    def full_path(self, name: str) -> str:
        return os.path.join(self.root_path, name)
