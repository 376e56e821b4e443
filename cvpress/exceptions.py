"""Custom exceptions for the cvpress pipeline."""

from typing import Optional


class CVPressError(Exception):
    """Base class for all cvpress errors."""


class TemplateSyntaxError(CVPressError):
    """
    Raised when a template's conditional markers are unbalanced or mismatched.

    Attributes:
        message: Error description
        template_id: Identifier of the template being parsed, if known
        position: Character offset in the template source where the problem was found
    """

    def __init__(
        self,
        message: str,
        template_id: Optional[str] = None,
        position: Optional[int] = None,
    ):
        self.message = message
        self.template_id = template_id
        self.position = position

        parts = [message]
        if template_id:
            parts.append(f"template: {template_id}")
        if position is not None:
            parts.append(f"offset: {position}")
        super().__init__(" | ".join(parts))


class TemplateUnavailableError(CVPressError):
    """Raised when a template identifier resolves to no template source."""

    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(f"No template source found for: {template_id}")


class TypesettingError(CVPressError):
    """Raised when the typesetting engine is missing or fails to render a document."""


class CVImportError(CVPressError):
    """Raised when an import document cannot be parsed."""


class PrintError(CVPressError):
    """Raised when the styled print path fails (the print flow then degrades)."""
