"""Domain-level errors for smart-gitignore."""


class SmartIgnoreError(Exception):
    """Base class for every error the command line reports to the user."""


class ScanError(SmartIgnoreError):
    """Raised when the target directory cannot be listed."""


class WriteError(SmartIgnoreError):
    """Raised when the ignore file cannot be written."""

    def __init__(self, path, cause: OSError):
        super().__init__(f"Could not write {path}: {cause}")
        self.path = path
        self.cause = cause


class TemplateNotFoundError(SmartIgnoreError):
    """Raised by a provider that answered but has no template for a name."""


class ProviderUnavailableError(SmartIgnoreError):
    """Raised by a provider that could not be reached or returned an error payload."""
