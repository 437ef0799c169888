"""Custom exceptions for logging configuration."""

from typing import List, Optional


class ConfigurationError(Exception):
    """
    Raised when logging configuration cannot be loaded or is invalid.

    Collects every problem found in one source (a YAML file or the process
    environment) and renders them with suggestions. Logging calls themselves
    never raise this; only loading and applying configuration does.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
        source: Optional[str] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: Primary error message
            errors: Specific validation errors
            suggestions: Hints for fixing the errors
            source: Where the configuration came from (file path or "environment")
        """
        self.message = message
        self.errors = list(errors or [])
        self.suggestions = list(suggestions or [])
        self.source = source
        super().__init__(self._render())

    def _render(self) -> str:
        header = self.message if self.source is None else f"{self.message} ({self.source})"
        lines = [header]

        if self.errors:
            lines.append("\nValidation Errors:")
            lines.extend(f"  {number}. {error}" for number, error in enumerate(self.errors, 1))

        if self.suggestions:
            lines.append("\nSuggestions:")
            lines.extend(f"  - {suggestion}" for suggestion in self.suggestions)

        return "\n".join(lines)

    def __str__(self) -> str:
        return self._render()
