# survey_api/responses.py
from fastapi.responses import JSONResponse

from survey_api.schemas import Envelope


def envelope_response(envelope: Envelope) -> JSONResponse:
    """HTTP 200 for code 0, otherwise the envelope code is the status."""
    status_code = 200 if envelope.code == 0 else envelope.code
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json", by_alias=True),
    )
