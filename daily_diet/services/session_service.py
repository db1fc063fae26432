import logging
from typing import Optional
from uuid import uuid4

from fastapi import Response

from daily_diet.core.config import settings

logger = logging.getLogger(__name__)


class SessionService:
    def __init__(self):
        self.COOKIE_NAME = settings.SESSION_COOKIE_NAME
        self.COOKIE_MAX_AGE = settings.SESSION_COOKIE_MAX_AGE

    def new_session_id(self) -> str:
        return str(uuid4())

    def ensure_session(self, response: Response, session_id: Optional[str]) -> str:
        """Вернуть текущий токен сессии или выпустить новый и записать его в cookie"""
        if session_id:
            return session_id

        session_id = self.new_session_id()
        response.set_cookie(
            key=self.COOKIE_NAME,
            value=session_id,
            path="/",
            max_age=self.COOKIE_MAX_AGE,
            httponly=True,
        )
        logger.info("Выпущена новая сессия")
        return session_id


session_service = SessionService()
