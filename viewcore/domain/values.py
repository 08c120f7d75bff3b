"""
Base class for stored values that validate themselves.

Normalizing setters fail fast on malformed literals. Validation runs
against whatever is already stored and reports problems as returned
errors instead.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from viewcore.domain.metadata import MetaData, RequiredError, ValidationError


class ValidatingValue(ABC):
    """A value that knows whether it is empty and well formed."""

    @abstractmethod
    def is_empty(self) -> bool: ...

    @abstractmethod
    def is_valid(self) -> bool: ...

    def required(self, meta: MetaData) -> bool:
        return meta.bool_attrib("required")

    def format_error(self, meta: MetaData) -> ValidationError:
        return ValidationError(
            field=meta.name,
            code="invalid_format",
            message=f"Invalid value for {meta.label}: {self}",
        )

    def validate(self, meta: MetaData) -> ValidationError | None:
        """
        Check required-ness and format.

        Returns:
            The first problem found, or None if the value is acceptable.
        """
        if self.required(meta) and self.is_empty():
            return RequiredError.for_field(meta)
        if not self.is_valid():
            return self.format_error(meta)
        return None
