"""Field validation shared by the content services."""

from unihub.config import PaginationSettings
from unihub.domain.error import ValidationError
from unihub.domain.value import MAX_SEMESTER, MIN_SEMESTER


def require_text(field: str, value: str | None, max_length: int) -> str:
    """Validate a required text field and return it trimmed.

    Raises:
        ValidationError: If the value is blank or too long
    """
    text = (value or "").strip()
    if not text:
        raise ValidationError(field, "must not be empty")
    if len(text) > max_length:
        raise ValidationError(field, f"must be at most {max_length} characters")
    return text


def require_semester(value: int | None) -> int:
    """Validate a semester number.

    Raises:
        ValidationError: If the semester is missing or outside 1-8
    """
    if value is None or isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("semester", "must be an integer")
    if not MIN_SEMESTER <= value <= MAX_SEMESTER:
        raise ValidationError(
            "semester", f"must be between {MIN_SEMESTER} and {MAX_SEMESTER}"
        )
    return value


def require_paging(page: int, page_size: int | None, settings: PaginationSettings) -> int:
    """Validate listing pagination and resolve the page size.

    Returns:
        The page size, defaulting to the configured size

    Raises:
        ValidationError: If page or page_size is out of range
    """
    if page_size is None:
        page_size = settings.default_page_size
    if page < 1:
        raise ValidationError("page", "must be at least 1")
    if not 1 <= page_size <= settings.max_page_size:
        raise ValidationError(
            "limit", f"must be between 1 and {settings.max_page_size}"
        )
    return page_size
