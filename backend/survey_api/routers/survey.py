# survey_api/routers/survey.py
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from typing import Optional

from survey_api.context import get_survey_service
from survey_api.responses import envelope_response
from survey_api.schemas import QuestionsIn, SurveyIn
from survey_api.services.survey import SurveyService

router = APIRouter(prefix="/survey", tags=["survey"])


# ---------- Responses ----------

@router.post("")
def submit_survey(payload: SurveyIn, survey: SurveyService = Depends(get_survey_service)) -> JSONResponse:
    """Store one survey response; 400 when any field is missing."""
    return envelope_response(
        survey.submit(payload.name, payload.age, payload.gender, payload.survey_result)
    )


@router.get("")
def list_surveys(survey: SurveyService = Depends(get_survey_service)) -> JSONResponse:
    """All responses, most recent first."""
    return envelope_response(survey.list())


@router.get("/question/{id}")
def get_survey(id: str, survey: SurveyService = Depends(get_survey_service)) -> JSONResponse:
    return envelope_response(survey.find_by_id(id))


# ---------- Questions ----------

@router.post("/questions")
def set_questions(payload: QuestionsIn, survey: SurveyService = Depends(get_survey_service)) -> JSONResponse:
    """
    Write the question set of (userName, surveyName).
    surveyName and userName are required alongside questions; without them the answer is 400.
    Example body:
      {"questions": ["Favourite fruit?", "Favourite colour?"], "surveyName": "fruit", "userName": "alice"}
    """
    return envelope_response(
        survey.set_questions(payload.questions, payload.survey_name, payload.user_name)
    )


@router.get("/questions")
def get_questions(survey: SurveyService = Depends(get_survey_service)) -> JSONResponse:
    return envelope_response(survey.get_questions())


@router.put("/questions")
def update_questions(payload: QuestionsIn, survey: SurveyService = Depends(get_survey_service)) -> JSONResponse:
    """Replace the question set wholesale; nothing is merged. Same body as POST, names required."""
    return envelope_response(
        survey.update_questions(payload.questions, payload.survey_name, payload.user_name)
    )


# ---------- Per-user survey data ----------

@router.get("/data/{survey_id}")
def query_survey_data(survey_id: str,
                      user_name: Optional[str] = Query(None, alias="userName"),
                      survey: SurveyService = Depends(get_survey_service)) -> JSONResponse:
    """Question set stored for ?userName= under survey `survey_id`; 404 if none."""
    return envelope_response(survey.query_user_survey_data(survey_id, user_name))
