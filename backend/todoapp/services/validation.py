from typing import Optional

from todoapp.models.todo import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH


def clean_title(value: str) -> Optional[str]:
    """Trimmed title, or ``None`` when only whitespace is left."""
    return value.strip() or None


def clean_description(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


def length_error(title: Optional[str], description: Optional[str]) -> Optional[str]:
    if title is not None and len(title) > TITLE_MAX_LENGTH:
        return f"Title must be at most {TITLE_MAX_LENGTH} characters."
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        return f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters."
    return None
