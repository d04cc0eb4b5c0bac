"""
Validation of form submissions.

Request bodies are parsed leniently by the pydantic schemas (every
field optional) and checked here, so that each rule can reject the
submission with the exact Vietnamese message shown to citizens.  All
checks raise ``ValidationError``; a reference to an unknown service
raises ``NotFoundError``.
"""

import re
from typing import Any, Iterable, Optional

from .errors import NotFoundError, ValidationError
from .store import DataStore, Record


EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

MSG_REQUIRED = "Vui lòng điền đầy đủ thông tin bắt buộc"
MSG_EMAIL = "Email không hợp lệ"
MSG_RATING = "Vui lòng đánh giá từ 1-5 sao"
MSG_SERVICE_NOT_FOUND = "Không tìm thấy dịch vụ"
MSG_EMAIL_OR_PHONE = "Vui lòng cung cấp email hoặc số điện thoại"
MSG_VOTER_REQUIRED = "Vui lòng cung cấp đầy đủ thông tin (CCCD, họ tên, năm sinh)"
MSG_FEEDBACK_REQUIRED = "Vui lòng cung cấp đầy đủ thông tin (loại, tiêu đề, mô tả)"


def is_blank(value: Any) -> bool:
    """``True`` for ``None``, empty and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require(values: Iterable[Any], message: str = MSG_REQUIRED) -> None:
    """Raise ``ValidationError`` if any of ``values`` is blank."""
    if any(is_blank(v) for v in values):
        raise ValidationError(message)


def is_valid_email(email: str) -> bool:
    return EMAIL_RE.fullmatch(email) is not None


def validate_contact(name: Optional[str], email: Optional[str], message: Optional[str]) -> None:
    require([name, email, message])
    if not is_valid_email(email):
        raise ValidationError(MSG_EMAIL)


def parse_rating(rating: Any) -> int:
    """Return ``rating`` as an int in [1, 5] or raise ``ValidationError``.

    Integers and integer strings (``"4"``) are accepted; booleans,
    fractions and anything else are rejected.
    """
    if isinstance(rating, bool):
        raise ValidationError(MSG_RATING)
    if isinstance(rating, float) and rating.is_integer():
        rating = int(rating)
    if isinstance(rating, str) and rating.strip().isdigit():
        rating = int(rating.strip())
    if not isinstance(rating, int) or not 1 <= rating <= 5:
        raise ValidationError(MSG_RATING)
    return rating


def parse_birth_year(value: Any) -> int:
    """Return the birth year as an int; the voter check needs a number."""
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(MSG_VOTER_REQUIRED)


def resolve_service(store: DataStore, service_id: Optional[str]) -> Record:
    """Return the service ``service_id`` refers to.

    Raises
    ------
    NotFoundError
        If no such service exists.
    """
    service = store.get_service(service_id) if service_id else None
    if service is None:
        raise NotFoundError(MSG_SERVICE_NOT_FOUND)
    return service
