"""
Field metadata used by value validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationError:
    """Validation error with actionable message."""

    field: str
    code: str
    message: str


@dataclass(frozen=True)
class RequiredError(ValidationError):
    """A required field holds no value."""

    code: str = "required"
    message: str = ""

    @classmethod
    def for_field(cls, meta: MetaData) -> RequiredError:
        return cls(field=meta.name, message=f"{meta.label} is required")


@dataclass(frozen=True)
class MetaData:
    """
    Name and attributes of the field a value is stored in.

    Attributes normally come from a tag string such as
    ``"required|label=Background colour"``.
    """

    name: str
    attribs: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_tag(cls, name: str, tag: str) -> MetaData:
        """
        Parse a ``|``-separated tag.

        A bare key is stored as ``"true"``; ``key=value`` keeps the value.
        """
        attribs: dict[str, str] = {}
        for part in tag.split("|"):
            part = part.strip()
            if not part:
                continue
            key, sep, value = part.partition("=")
            attribs[key.strip()] = value.strip() if sep else "true"
        return cls(name=name, attribs=attribs)

    def attrib(self, name: str, default: str = "") -> str:
        return self.attribs.get(name, default)

    def bool_attrib(self, name: str) -> bool:
        return self.attribs.get(name) == "true"

    @property
    def label(self) -> str:
        return self.attrib("label") or self.name
