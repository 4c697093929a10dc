"""
Pydantic schemas for risks.

A risk is the only record type managed by the service.  Clients send a
``RiskPayload``; once it has passed validation and received a server
generated identifier it becomes a ``RiskRead``, which is what the store
keeps and what every endpoint returns.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictStr


class RiskState(str, Enum):
    """Lifecycle states a risk may be recorded in."""

    OPEN = "open"
    CLOSED = "closed"
    ACCEPTED = "accepted"
    INVESTIGATING = "investigating"


class RiskPayload(BaseModel):
    """Decoded body of a create request.

    All fields are optional here so that decoding only checks the JSON
    shape; the validation unit decides whether the values are
    acceptable.  Any ``id`` sent by the client is ignored by the create
    operation.
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[StrictStr] = None
    state: Optional[StrictStr] = None
    title: Optional[StrictStr] = None
    description: Optional[StrictStr] = None


class RiskRead(BaseModel):
    """Schema for a stored risk."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    id: str
    state: RiskState
    title: str
    description: str
