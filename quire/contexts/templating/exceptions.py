"""Custom exceptions for templating context."""

from typing import List, Optional


class ResumeValidationError(ValueError):
    """
    Exception raised when resume input is rejected.

    All problems found in one input are reported together, so a caller never
    has to fix them one at a time.

    Attributes:
        errors: One message per problem (e.g., "name: must be a non-empty string")
    """

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        lines = [f"Invalid resume input ({len(self.errors)} problem(s)):"]
        lines.extend(f"  - {err}" for err in self.errors)
        super().__init__("\n".join(lines))


class TemplateRenderError(Exception):
    """
    Exception raised when template rendering fails.

    Attributes:
        message: Error description
        template_name: Name of the template being rendered
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.original_error = original_error

        parts = [message]

        if template_name:
            parts.append(f"\nTemplate: {template_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
