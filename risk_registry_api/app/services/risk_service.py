"""
Service layer for risks.

``RiskService`` holds the business logic behind the risk endpoints:
decoding request bodies, running validation, assigning identifiers and
talking to the ``RiskStore``.  It knows nothing about HTTP; endpoint
functions translate its exceptions into responses.
"""

from __future__ import annotations

import json
import logging
import uuid
from typing import List, Optional

from pydantic import ValidationError

from risk_registry_api.app.core.store import RiskStore
from risk_registry_api.app.schemas.risk import RiskPayload, RiskRead
from risk_registry_api.app.services.validation import validate_risk

logger = logging.getLogger(__name__)


class InvalidPayloadError(ValueError):
    """The request body is not a JSON object of the expected shape."""


class RiskService:
    """Create and look up risks held by a ``RiskStore``."""

    def __init__(self, store: RiskStore) -> None:
        self.store = store

    @staticmethod
    def decode(body: bytes) -> RiskPayload:
        """Decode a request body into a ``RiskPayload``.

        The body must be a single JSON object whose known fields are
        strings (or null).  Decoder details are logged at debug level
        only and never reach the client.
        """
        try:
            data = json.loads(body)
        except (ValueError, UnicodeDecodeError, RecursionError) as e:
            logger.debug("Undecodable risk payload: %s", e)
            raise InvalidPayloadError("invalid JSON payload") from e
        if not isinstance(data, dict):
            logger.debug("Risk payload is a JSON %s, not an object", type(data).__name__)
            raise InvalidPayloadError("invalid JSON payload")
        try:
            return RiskPayload.model_validate(data)
        except ValidationError as e:
            logger.debug("Risk payload has the wrong shape: %s", e)
            raise InvalidPayloadError("invalid JSON payload") from e

    def create(self, payload: RiskPayload) -> RiskRead:
        """Validate ``payload``, give it a fresh id and store it.

        Raises ``RiskValidationError`` when the payload is rejected; in
        that case nothing is stored.
        """
        validate_risk(payload)
        risk = RiskRead(
            id=str(uuid.uuid4()),
            state=payload.state,
            title=payload.title,
            description=payload.description,
        )
        self.store.insert(risk)
        logger.info("Risk created successfully", extra={"id": risk.id, "state": risk.state})
        return risk

    def list_risks(self) -> List[RiskRead]:
        risks = self.store.list_all()
        logger.info("All risks retrieved successfully", extra={"count": len(risks)})
        return risks

    def get_risk(self, risk_id: str) -> Optional[RiskRead]:
        risk, found = self.store.get_by_id(risk_id)
        if not found:
            return None
        logger.info("Risk retrieved successfully", extra={"id": risk_id})
        return risk
