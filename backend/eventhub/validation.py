"""
Validation and normalization for event and booking fields.

Pure functions with no database access. The stores call these before every
write; each failure raises ValidationError naming the offending field.
"""

import re
from datetime import date, datetime
from typing import Any, Mapping

from bson import ObjectId

from eventhub.exceptions import ValidationError
from eventhub.models import EVENT_MODES

REQUIRED_TEXT_FIELDS: tuple[str, ...] = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)
LIST_FIELDS: tuple[str, ...] = ("agenda", "tags")
EVENT_FIELDS: tuple[str, ...] = REQUIRED_TEXT_FIELDS + LIST_FIELDS

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TIME_24H_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Human-entered formats accepted for the date field, tried in order
_DATE_FORMATS: tuple[str, ...] = (
    "%B %d, %Y",  # May 12, 2026
    "%b %d, %Y",  # May 12, 2026 / Sep 3, 2026
    "%B %d %Y",
    "%b %d %Y",
    "%A, %B %d, %Y",  # Tuesday, May 12, 2026
    "%a, %b %d, %Y",
    "%d %B %Y",  # 12 May 2026
    "%d %b %Y",
    "%d %B, %Y",  # 12 May, 2026
    "%d %b, %Y",
    "%Y-%m-%d",  # 2026-5-12
    "%m/%d/%Y",  # 05/12/2026
    "%Y/%m/%d",
)


# ============================================================================
# Field Normalizers
# ============================================================================


def slugify(title: str) -> str:
    """Derive a lowercase, hyphenated, URL-safe slug from a title.

    >>> slugify("React Summit: 2026!")
    'react-summit-2026'
    """
    slug = title.lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug, flags=re.ASCII)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-{2,}", "-", slug)
    return slug.strip("-")


def normalize_date(value: str) -> str:
    """Return the date as YYYY-MM-DD, parsing common formats if needed."""
    value = value.strip()

    if ISO_DATE_RE.match(value):
        try:
            date.fromisoformat(value)
        except ValueError:
            raise ValidationError("date", f"Not a calendar date: {value}")
        return value

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date().isoformat()
        except ValueError:
            continue

    # Full ISO timestamps such as 2026-05-12T09:00:00Z
    try:
        return datetime.fromisoformat(value).date().isoformat()
    except ValueError:
        raise ValidationError("date", "Invalid date format. Expected YYYY-MM-DD")


def normalize_time(value: str) -> str:
    """Check a 24-hour HH:MM time. There is no parsing fallback."""
    value = value.strip()
    if not TIME_24H_RE.match(value):
        raise ValidationError("time", "Invalid time format. Expected HH:MM (24-hour)")
    return value


def normalize_email(email: Any) -> str:
    if not isinstance(email, str):
        raise ValidationError("email", "Email is required")

    email = email.strip().lower()
    if not EMAIL_RE.match(email):
        raise ValidationError("email", "Please provide a valid email address")
    return email


def parse_object_id(value: Any, field: str) -> ObjectId:
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value.strip()):
        return ObjectId(value.strip())
    raise ValidationError(field, f"Invalid identifier for '{field}': {value!r}")


# ============================================================================
# Event Validation Pipeline
# ============================================================================


def _clean_text(field: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError(field, f"Event {field} must be text")
    value = value.strip()
    if not value:
        raise ValidationError(field, f"Event {field} is required")
    return value


def _clean_list(field: str, value: Any) -> list[str]:
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ValidationError(field, f"Event {field} must be a list of text")

    items = []
    for item in value:
        if not isinstance(item, str):
            raise ValidationError(field, f"Event {field} must be a list of text")
        if not item.strip():
            raise ValidationError(field, f"Event {field} items cannot be blank")
        items.append(item.strip())

    if not items:
        raise ValidationError(field, f"Event {field} must contain at least one item")
    return items


def validate_event(fields: Mapping[str, Any], partial: bool = False) -> dict[str, Any]:
    """
    Validate event fields and return a trimmed copy.

    Args:
        fields: Field values keyed by stored name
        partial: Only check the fields present (updates); otherwise every
            required field must be present (creates)

    Raises:
        ValidationError: Naming the first offending field
    """
    for key in fields:
        if key == "slug":
            raise ValidationError("slug", "Slug is derived from the title")
        if key not in EVENT_FIELDS:
            raise ValidationError(key, f"Unknown event field: {key}")

    if not partial:
        for field in EVENT_FIELDS:
            if fields.get(field) is None:
                raise ValidationError(field, f"Event {field} is required")

    cleaned: dict[str, Any] = {}
    for field in EVENT_FIELDS:
        if field not in fields:
            continue
        if field in LIST_FIELDS:
            cleaned[field] = _clean_list(field, fields[field])
        else:
            cleaned[field] = _clean_text(field, fields[field])

    if "mode" in cleaned and cleaned["mode"] not in EVENT_MODES:
        raise ValidationError("mode", "Mode must be either online, offline, or hybrid")

    return cleaned


def normalize_event(fields: Mapping[str, Any]) -> dict[str, Any]:
    """
    Apply slug, date and time normalization to the fields being written.

    Each step runs only when its field is part of this write, so updating
    unrelated fields never rewrites the slug.
    """
    normalized = dict(fields)

    if "title" in normalized:
        slug = slugify(normalized["title"])
        if not slug:
            raise ValidationError("title", "Title must contain letters or digits")
        normalized["slug"] = slug

    if "date" in normalized:
        normalized["date"] = normalize_date(normalized["date"])

    if "time" in normalized:
        normalized["time"] = normalize_time(normalized["time"])

    return normalized
