from app.domain.exceptions import ErrMessages, ValidationError


def require_not_blank(value: str, field_name: str) -> None:
    # Whitespace-only values count as empty
    if not value or not value.strip():
        raise ValidationError(ErrMessages.field_cannot_be_empty(field_name))
