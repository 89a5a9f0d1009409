"""Reusable field validators for request schemas."""


def not_blank(value: str | None) -> str | None:
    """Reject strings made only of whitespace; ``None`` passes through."""
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value
