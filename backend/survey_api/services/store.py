# survey_api/services/store.py
import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from survey_api.services.storage import CorruptDataError, StorageBackend

logger = logging.getLogger(__name__)

SURVEY_FILE = "survey.json"
QUESTIONS_FILE = "question.json"


# ---------- Paths & helpers ----------

_SAFE_NAME_RE = re.compile(r"[\w\- ]+(\.[\w\- ]+)*")


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def is_safe_name(name: Optional[str]) -> bool:
    """True when `name` can be used as a single path segment under the data dir."""
    if not name or not isinstance(name, str):
        return False
    if name.startswith(".") or ".." in name:
        return False
    return _SAFE_NAME_RE.fullmatch(name) is not None


def question_set_path(survey_name: str, user_name: str) -> str:
    """Return storage path for a user's question set:
      <user_name>/<survey_name>_question.json
    """
    return f"{user_name}/{survey_name}_question.json"


# ---------- File-backed store ----------

class FileStore:
    """
    JSON file persistence for survey responses and question sets.

    Responses live in one array file; each (user, survey) question set is its own
    file under a per-user directory. Writes are a plain read-modify-write with no
    locking, so concurrent writers race and the last one wins.
    """

    def __init__(self, storage: StorageBackend, survey_file: str = SURVEY_FILE):
        self.storage = storage
        self.survey_file = survey_file

    def list_files(self) -> List[str]:
        """Names of the entries in the data directory."""
        return self.storage.list_dir()

    def append(self, record: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Append `record` to the response collection and return the whole collection."""
        records = self._read_collection()
        records.append(record)
        self.storage.write_json(self.survey_file, records)
        logger.info("saved record %s to %s (%d total)", record.get("id"), self.survey_file, len(records))
        return records

    def read_all(self) -> List[Dict[str, Any]]:
        records = self._read_collection()
        logger.debug("read %d records from %s", len(records), self.survey_file)
        return records

    def read_by_path(self, path: str) -> Optional[Any]:
        """Read one JSON document, or None when the file does not exist."""
        try:
            return self.storage.read_json(path)
        except FileNotFoundError:
            logger.info("file %s does not exist", path)
            return None

    def read_questions(self) -> List[str]:
        """Global question list kept in question.json."""
        questions = self.read_by_path(QUESTIONS_FILE)
        if questions is None:
            return []
        if not isinstance(questions, list) or not all(isinstance(q, str) for q in questions):
            raise CorruptDataError(f"{QUESTIONS_FILE} does not hold a list of strings")
        return questions

    def write_question_set(self, questions: List[str], survey_name: str, user_name: str) -> Dict[str, Any]:
        """
        Write a fresh question set for (user_name, survey_name), replacing any previous one.
        A new id and createTime are generated on every call.
        """
        self.storage.make_dir(user_name)
        question_set = {
            "id": str(uuid4()),
            "createTime": utc_now_iso(),
            "surveyName": survey_name,
            "questions": list(questions),
        }
        path = question_set_path(survey_name, user_name)
        self.storage.write_json(path, question_set)
        logger.info("saved %d questions for survey %s of user %s to %s",
                    len(question_set["questions"]), survey_name, user_name, path)
        return question_set

    def query_question_set(self, survey_name: str, user_name: str) -> Optional[Dict[str, Any]]:
        return self.read_by_path(question_set_path(survey_name, user_name))

    # ---------- Internal helpers ----------

    def _read_collection(self) -> List[Dict[str, Any]]:
        try:
            records = self.storage.read_json(self.survey_file)
        except FileNotFoundError:
            logger.info("file %s does not exist, starting empty", self.survey_file)
            return []
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            raise CorruptDataError(f"{self.survey_file} does not hold a list of records")
        return records
