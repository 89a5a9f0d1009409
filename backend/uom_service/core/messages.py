"""Message catalog used to render user-facing error messages."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from uom_service.core.errors import ServiceError

MESSAGE_NOT_FOUND_KEY = "app.error.message.not.found"

DEFAULT_MESSAGES: dict[str, str] = {
    MESSAGE_NOT_FOUND_KEY: "Message not found",
    "error.database": "A database error occurred",
    "error.invalid_data": "Provided data is invalid",
    "error.resource.conflict": "{0} already exists with {1}: {2}",
    "error.resource.not_found": "{0} not found with {1}: {2}",
    "error.service_unavailable": "Service is currently unavailable",
    "error.unexpected": "An unexpected error occurred",
    "parameter.missing": "Missing parameter: {0}",
    "method.not.supported": "HTTP method not supported: {0}",
    "global.error.unexpected": "An unexpected error occurred: {0}",
    "validation.failed": "{0}: {1}",
}

DETAIL_SEPARATOR = ": "


class MessageCatalog:
    """
    Keyed message templates with positional ``{0}`` placeholders.

    Unknown keys resolve to the catalog's "message not found" entry instead
    of raising, so a missing translation never turns into a 500.
    """

    def __init__(self, messages: Mapping[str, str] | None = None) -> None:
        self._messages = dict(DEFAULT_MESSAGES)
        if messages:
            self._messages.update(messages)

    def get(self, key: str, *args: Any) -> str:
        template = self._messages.get(key)
        if template is None:
            return self._messages.get(MESSAGE_NOT_FOUND_KEY, key)
        if not args:
            return template
        try:
            return template.format(*args)
        except (IndexError, KeyError):
            return template

    def resolve(self, error: ServiceError) -> str:
        """Render the message for a service error, appending its detail."""
        if error.message_args:
            base = self.get(error.error_code.message_key, *error.message_args)
        else:
            template = self._messages.get(error.error_code.message_key)
            # Parameterised templates need arguments; fall back to the plain text.
            if template is None or "{" in template:
                template = error.error_code.default_message
            base = template
        if error.detail:
            return f"{base}{DETAIL_SEPARATOR}{error.detail}"
        return base
