"""Validation helpers for revise configuration."""

from pydantic import ValidationError as PydanticValidationError


def flatten_pydantic_errors(exc: PydanticValidationError) -> list[str]:
    """Flatten a Pydantic ValidationError into one message per field.

    Args:
        exc: Pydantic ValidationError exception

    Returns:
        Human-readable messages such as
        ``"Field 'max_reports': Input should be greater than or equal to 1
        (received: 0)"``
    """
    messages: list[str] = []

    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "Unknown error")
        if error.get("type") == "extra_forbidden":
            messages.append(f"Unknown setting '{location}'")
            continue
        received = error.get("input")
        messages.append(
            f"Field '{location or 'unknown'}': {message} (received: {received!r})"
        )

    return messages or ["Validation failed with unknown error"]
