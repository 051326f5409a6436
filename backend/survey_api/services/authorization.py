# survey_api/services/authorization.py
import logging
from typing import Dict, Optional

from survey_api.schemas import Envelope

logger = logging.getLogger(__name__)


class AuthorizationService:
    """
    Volatile user -> role map. Nothing is persisted; a new instance starts empty.
    """

    def __init__(self):
        self.roles: Dict[str, str] = {}

    def set_role(self, user_id: Optional[str], role: Optional[str]) -> Envelope[str]:
        if not user_id or not role:
            return Envelope[str](code=400, message='missing parameters',
                                 data='userId and role are required')
        self.roles[user_id] = role
        logger.info("role of user %s set to %s", user_id, role)
        return Envelope[str](code=0, message='role saved', data='user role updated')

    def get_role(self, user_id: Optional[str]) -> Envelope[str]:
        if not user_id:
            return Envelope[str](code=400, message='missing parameters',
                                 data='userId is required')
        # Unassigned users get an empty role, not a 404
        return Envelope[str](code=0, message='ok', data=self.roles.get(user_id, ''))
