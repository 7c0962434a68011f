"""
EIP-4361 message models.

``Message`` is the input to ``create_message``; it only carries types; the
content rules are applied by the serializer in a fixed order so errors are
reported the same way for every caller.

``ParsedMessage`` is what ``parse_message`` returns. Any field may be missing
(``None``) when the text does not structurally contain it.
"""

from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    address: str
    domain: str
    uri: str
    version: str
    chain_id: Union[int, float]  # floats are accepted so 1.5 fails as a field error
    nonce: str
    issued_at: Optional[datetime] = None
    scheme: Optional[str] = None
    statement: Optional[str] = None
    expiration_time: Optional[datetime] = None
    not_before: Optional[datetime] = None
    request_id: Optional[str] = None
    resources: Optional[tuple[str, ...]] = None


class ParsedMessage(BaseModel):
    """Partial message recovered from text. ``None`` means not present."""

    model_config = ConfigDict(frozen=True)

    address: Optional[str] = None
    domain: Optional[str] = None
    uri: Optional[str] = None
    version: Optional[str] = None
    chain_id: Optional[int] = None
    nonce: Optional[str] = None
    issued_at: Optional[datetime] = None
    scheme: Optional[str] = None
    statement: Optional[str] = None
    expiration_time: Optional[datetime] = None
    not_before: Optional[datetime] = None
    request_id: Optional[str] = None
    resources: Optional[tuple[str, ...]] = None

    def fields(self) -> dict[str, Any]:
        """Only the fields that were present in the text."""
        return self.model_dump(exclude_none=True)
