"""
Risk endpoints for API v1.

These routes create risks and read them back.  There is no update or
delete: a risk is immutable once created.  Listing and single lookups
are plain functions, so the server runs them on its threadpool; the
create route is a coroutine because it reads the raw request body
itself in order to check the content type before decoding anything.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from risk_registry_api.app.schemas.risk import RiskRead
from risk_registry_api.app.services.risk_service import InvalidPayloadError, RiskService
from risk_registry_api.app.services.validation import RiskValidationError

JSON_MEDIA_TYPE = "application/json"

router = APIRouter()


def get_risk_service(request: Request) -> RiskService:
    """Bind a ``RiskService`` to the store owned by the running app."""
    return RiskService(request.app.state.store)


@router.post("", response_model=RiskRead, status_code=status.HTTP_201_CREATED)
async def create_risk(
    request: Request,
    service: RiskService = Depends(get_risk_service),
) -> RiskRead:
    """Create a new risk.

    The ``Content-Type`` header must be exactly ``application/json``;
    anything else, a charset parameter included, yields 415.  The body
    must be a JSON object with ``state``, ``title`` and
    ``description``.  A malformed body or one that fails validation
    yields 400.  The response holds the stored risk including its
    server generated ``id``.
    """
    if request.headers.get("content-type") != JSON_MEDIA_TYPE:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="invalid content-type, expected application/json",
        )
    body = await request.body()
    try:
        payload = service.decode(body)
        return service.create(payload)
    except (InvalidPayloadError, RiskValidationError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("", response_model=List[RiskRead])
def list_risks(service: RiskService = Depends(get_risk_service)) -> List[RiskRead]:
    """Return every stored risk, in no particular order."""
    return service.list_risks()


@router.get("/{risk_id}", response_model=RiskRead)
def get_risk(risk_id: str, service: RiskService = Depends(get_risk_service)) -> RiskRead:
    """Retrieve a single risk by ID.

    Returns HTTP 404 if the risk is not found.
    """
    risk = service.get_risk(risk_id)
    if risk is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="risk not found")
    return risk
