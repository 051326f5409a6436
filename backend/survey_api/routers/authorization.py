# survey_api/routers/authorization.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from survey_api.context import get_authorization_service
from survey_api.responses import envelope_response
from survey_api.schemas import RoleIn
from survey_api.services.authorization import AuthorizationService

router = APIRouter(prefix="/survey/authorization", tags=["authorization"])


@router.post("")
def set_role(payload: RoleIn,
             authorization: AuthorizationService = Depends(get_authorization_service)) -> JSONResponse:
    return envelope_response(authorization.set_role(payload.user_id, payload.role))


@router.get("/{user_id}")
def get_role(user_id: str,
             authorization: AuthorizationService = Depends(get_authorization_service)) -> JSONResponse:
    """Role of `user_id`, or an empty string when none was assigned."""
    return envelope_response(authorization.get_role(user_id))
