# survey_api/services/survey.py
"""
Survey domain operations: response submission and lookup, per-user question sets.
Each method returns an Envelope; validation and not-found are reported through
its code, while storage failures propagate to the caller.
"""
import logging
import time
from typing import Any, List, Optional, Union
from uuid import uuid4

from survey_api.schemas import Envelope, QuestionSet, SurveyResponse
from survey_api.services.store import FileStore, is_safe_name

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


class SurveyService:

    def __init__(self, store: FileStore):
        self.store = store

    def submit(self,
               name: Optional[str],
               age: Optional[Union[int, float]],
               gender: Optional[str],
               survey_result: Optional[str]) -> Envelope[SurveyResponse]:
        if any(_missing(v) for v in (name, age, gender, survey_result)):
            logger.info("survey submission rejected: missing fields")
            return Envelope[SurveyResponse](code=400, message='missing parameters', data=None)

        record = SurveyResponse(
            id=str(uuid4()),
            name=name,
            age=age,
            gender=gender,
            survey_result=survey_result,
            created_at=_now_ms(),
        )
        self.store.append(record.model_dump(by_alias=True))
        return Envelope[SurveyResponse](code=0, message='submitted', data=record)

    def list(self) -> Envelope[List[SurveyResponse]]:
        records = [SurveyResponse.model_validate(r) for r in self.store.read_all()]
        # sorted() is stable with reverse=True, so equal timestamps keep file order
        records = sorted(records, key=lambda r: r.created_at, reverse=True)
        logger.info("listed %d survey responses", len(records))
        return Envelope[List[SurveyResponse]](code=0, message='ok', data=records)

    def find_by_id(self, id: str) -> Envelope[SurveyResponse]:
        for raw in self.store.read_all():
            if raw.get("id") == id:
                return Envelope[SurveyResponse](code=0, message='ok',
                                                data=SurveyResponse.model_validate(raw))
        logger.info("survey response %s not found", id)
        return Envelope[SurveyResponse](code=404, message='not found', data=None)

    def set_questions(self,
                      questions: Any,
                      survey_name: Optional[str],
                      user_name: Optional[str]) -> Envelope[Union[QuestionSet, str]]:
        if not isinstance(questions, list) or not all(isinstance(q, str) for q in questions):
            return Envelope(code=400, message='invalid parameters',
                            data='questions must be a list of strings')
        if not is_safe_name(survey_name) or not is_safe_name(user_name):
            return Envelope(code=400, message='invalid parameters',
                            data='surveyName and userName are required')

        written = self.store.write_question_set(questions, survey_name, user_name)
        return Envelope[QuestionSet](code=0, message='questions saved',
                                     data=QuestionSet.model_validate(written))

    def get_questions(self) -> Envelope[List[str]]:
        questions = self.store.read_questions()
        logger.info("found %d global questions", len(questions))
        return Envelope[List[str]](code=0, message='ok', data=questions)

    def update_questions(self,
                         questions: Any,
                         survey_name: Optional[str],
                         user_name: Optional[str]) -> Envelope[Union[QuestionSet, str]]:
        """Full replace; same contract as set_questions."""
        return self.set_questions(questions, survey_name, user_name)

    def query_user_survey_data(self, survey_name: Optional[str], user_name: Optional[str]) -> Envelope[QuestionSet]:
        found = None
        if is_safe_name(survey_name) and is_safe_name(user_name):
            found = self.store.query_question_set(survey_name, user_name)
        if found is None:
            logger.info("no question set for survey %s of user %s", survey_name, user_name)
            return Envelope[QuestionSet](code=404, message='not found', data=None)
        return Envelope[QuestionSet](code=0, message='ok', data=QuestionSet.model_validate(found))
