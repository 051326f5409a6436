# survey_api/schemas.py
from typing import Any, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar('T')


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire and on disk."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Envelope(BaseModel, Generic[T]):
    """
    Uniform result of every domain operation.

    code 0 means success; 400 is a validation failure and 404 a missing record.
    """
    code: int = 0
    message: str = 'ok'
    data: Optional[T] = None


# ---------- Records ----------

class SurveyResponse(CamelModel):
    id: str
    name: str
    age: Union[int, float]
    gender: str
    survey_result: str
    created_at: int  # epoch millis


class QuestionSet(CamelModel):
    id: str
    create_time: str  # ISO-8601 UTC
    survey_name: str
    questions: List[str] = Field(default_factory=list)


# ---------- Request bodies ----------
# Fields are optional so that missing values reach the services,
# which answer with a 400 envelope instead of raising.

class SurveyIn(CamelModel):
    name: Optional[str] = None
    age: Optional[Union[int, float]] = None
    gender: Optional[str] = None
    survey_result: Optional[str] = None


class QuestionsIn(CamelModel):
    questions: Optional[List[str]] = None
    survey_name: Optional[str] = None
    user_name: Optional[str] = None


class RoleIn(CamelModel):
    user_id: Optional[str] = None
    role: Optional[str] = None


class ErrorDetail(BaseModel):
    loc: List[Any]
    msg: str
