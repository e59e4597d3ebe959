"""Request Shape Checks: field-presence and hex-fragment validation.

Invariants:
    - Pure functions: no IO, no DB, no FastAPI imports
    - Each check raises a typed error carrying the fixed client-facing message
    - Palette fields are checked in REQUIRED_PALETTE_FIELDS order; first miss wins
"""

import re
from typing import Any

from palette_picker.core.errors import BodyValidationError, QueryValidationError

COLOR_FIELDS = (
    "color_one", "color_two", "color_three", "color_four", "color_five",
)
REQUIRED_PALETTE_FIELDS = ("name", *COLOR_FIELDS, "projects_id")

PROJECT_BODY_MESSAGE = (
    "Expected body format {name: <String>}. "
    "You're missing the required name property"
)
PALETTE_BODY_MESSAGE = (
    "Expected body format is: { name: <String>, color_one: <String>, "
    "color_two: <String>, color_three: <String>, color_four: <String>, "
    "color_five: <String> }. You're missing the required \"{field}\" property."
)
RENAME_BODY_MESSAGE = (
    "Expected body format is: { name: <String> }. "
    "You must send only the required \"name\" property."
)
COLOR_QUERY_MESSAGE = (
    "Expected query format is: \"?color=\" + <6 character hex code>.  "
    "Do not include \"#\" before the hex characters."
)

_HEX_FRAGMENT = re.compile(r"^[0-9a-fA-F]{6}$")


def check_project_body(body: dict[str, Any]) -> str:
    """Return the project name, or raise unless it is a non-empty string."""
    name = body.get("name")
    if not isinstance(name, str) or not name:
        raise BodyValidationError(PROJECT_BODY_MESSAGE, "name")
    return name


def find_missing_palette_field(palette: dict[str, Any]) -> str | None:
    for field in REQUIRED_PALETTE_FIELDS:
        if field not in palette:
            return field
    return None


def check_palette_body(palette: dict[str, Any]) -> dict[str, Any]:
    """Return only the palette columns, or raise naming the first missing field.

    Presence is what counts: a null value passes here and is left to the
    store's NOT NULL constraints.
    """
    missing = find_missing_palette_field(palette)
    if missing is not None:
        raise BodyValidationError(
            PALETTE_BODY_MESSAGE.replace("{field}", missing), missing,
        )
    return {field: palette[field] for field in REQUIRED_PALETTE_FIELDS}


def check_rename_body(body: dict[str, Any]) -> str:
    """Return the new name.

    The body must carry exactly one key, "name", holding a non-empty string.
    """
    if set(body) != {"name"}:
        extra = sorted(set(body) - {"name"})
        raise BodyValidationError(
            RENAME_BODY_MESSAGE, extra[0] if extra else "name",
        )
    name = body["name"]
    if not isinstance(name, str) or not name:
        raise BodyValidationError(RENAME_BODY_MESSAGE, "name")
    return name


def is_hex_fragment(value: str) -> bool:
    return bool(_HEX_FRAGMENT.match(value))


def check_color_query(color: str | None) -> str | None:
    """Return the color fragment to filter by, or None for no filtering."""
    if not color:
        return None
    if not is_hex_fragment(color):
        raise QueryValidationError(COLOR_QUERY_MESSAGE, "color")
    return color
