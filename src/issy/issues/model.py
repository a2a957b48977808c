"""Issue records and the typed validation stage.

``IssueFrontmatter.from_raw`` accepts whatever the codec produced and never
fails; fields a file does not carry come back as None. ``validate_fields`` is
the strict boundary used by create/update.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any

from issy.errors import ValidationError

# ---------------------------------------------------------------------------
# Vocabulary constants
# ---------------------------------------------------------------------------

VALID_PRIORITIES = ("high", "medium", "low")
VALID_SCOPES = ("small", "medium", "large")
VALID_TYPES = ("bug", "improvement")
VALID_STATUSES = ("open", "closed")

DEFAULT_PRIORITY = "medium"
DEFAULT_TYPE = "improvement"


@dataclass
class IssueFrontmatter:
    title: str = ""
    description: str | None = None
    priority: str | None = None
    scope: str | None = None
    type: str | None = None
    labels: str | None = None
    status: str | None = None
    order: str | None = None
    created: str | None = None
    updated: str | None = None
    # Keys found in the file that issy does not know about, kept for rewrite
    extra: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: dict[str, str]) -> IssueFrontmatter:
        known = {f.name for f in fields(cls) if f.name != "extra"}
        values: dict[str, Any] = {k: v for k, v in raw.items() if k in known}
        values.setdefault("title", "")
        extra = {k: v for k, v in raw.items() if k not in known}
        return cls(**values, extra=extra)

    def to_raw(self) -> dict[str, str | None]:
        raw: dict[str, str | None] = {k: v for k, v in asdict(self).items() if k != "extra"}
        raw.update(self.extra)
        return raw

    @property
    def label_list(self) -> list[str]:
        return [part.strip() for part in (self.labels or "").split(",") if part.strip()]


@dataclass
class Issue:
    id: str
    filename: str
    frontmatter: IssueFrontmatter
    content: str

    @property
    def is_open(self) -> bool:
        return self.frontmatter.status == "open"

    def to_dict(self) -> dict[str, Any]:
        fm = {k: v for k, v in self.frontmatter.to_raw().items() if v is not None}
        return {
            "id": self.id,
            "filename": self.filename,
            "frontmatter": fm,
            "content": self.content,
        }


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _check_choice(name: str, value: str | None, valid: tuple[str, ...]) -> None:
    if value is not None and value not in valid:
        raise ValidationError(f"{name.capitalize()} must be: {', '.join(valid)} (got '{value}')")


def validate_fields(
    title: str | None = None,
    priority: str | None = None,
    scope: str | None = None,
    type: str | None = None,
    status: str | None = None,
    require_title: bool = False,
) -> None:
    """Raise ValidationError for an empty title or an out-of-vocabulary value.

    None means "not provided" and is always accepted, except for title when
    require_title is set. An empty scope is accepted because it clears it.
    """
    if require_title and title is None:
        raise ValidationError("Title is required")
    if title is not None and not title.strip():
        raise ValidationError("Title is required")
    _check_choice("priority", priority, VALID_PRIORITIES)
    _check_choice("scope", scope or None, VALID_SCOPES)
    _check_choice("type", type, VALID_TYPES)
    _check_choice("status", status, VALID_STATUSES)
