"""
Sign-In with Ethereum error types.
"""

from typing import Any, Optional


class SiweError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class InvalidMessageFieldError(SiweError):
    """A message field failed validation while building the message text."""

    def __init__(self, field: str, value: Any, reason: Optional[list[str]] = None):
        reason = reason or []
        lines = [f'Invalid Sign-In with Ethereum message field "{field}".']
        if reason:
            lines.append("")
            lines.extend(reason)
        lines.extend(["", f"Provided value: {value}"])
        super().__init__(
            "invalid_message_field",
            "\n".join(lines),
            {"field": field, "value": value, "reason": reason},
        )
        self.field = field
        self.value = value
        self.reason = reason


class InvalidAddressError(SiweError):
    def __init__(self, address: Any):
        super().__init__(
            "invalid_address",
            f'Address "{address}" is invalid.',
            {"address": address},
        )
        self.address = address
