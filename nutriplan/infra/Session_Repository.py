"""In-memory session store.

Everything a user builds up (profile, plan, shopping checklist, view state)
lives here and only here; restarting the process forgets it all.

Design:
  * Sessions are keyed by a random id carried in a cookie.
  * A Lock guards the store and each session guards its own generation flag,
    since FastAPI runs sync endpoints on a thread pool.
  * A MAX_SESSIONS cap evicts the least recently used session.
"""
from __future__ import annotations
from collections import OrderedDict
from threading import Lock
from typing import Optional, Tuple
from uuid import uuid4
import logging

from nutriplan.domain.ShoppingList import ShoppingList
from nutriplan.domain.UserProfile import UserProfile
from nutriplan.domain.WeekPlan import WeekPlan
from nutriplan.utilities.config import MAX_SESSIONS
from nutriplan.utilities.constants import THEMES, VIEWS

logger = logging.getLogger(__name__)


class Session:
    def __init__(self, session_id: str):
        self.id = session_id
        self.profile: Optional[UserProfile] = None
        self.advice: str = ""
        self.plan: Optional[WeekPlan] = None
        self.checklist = ShoppingList()
        self.view = VIEWS[0]
        self.theme = THEMES[0]
        self.selected_day = 0
        self.is_generating = False
        self._lock = Lock()

    def start_generation(self) -> bool:
        """Claim the generation flag; False if a generation is already running."""
        with self._lock:
            if self.is_generating:
                return False
            self.is_generating = True
            return True

    def finish_generation(self):
        with self._lock:
            self.is_generating = False

    def set_plan(self, plan: WeekPlan):
        """Replace the plan; ticks from the previous plan's shopping list no longer apply."""
        with self._lock:
            self.plan = plan
            self.checklist.clear()
            self.selected_day = 0

    def reset_checklist(self):
        with self._lock:
            self.checklist.clear()

    def toggle_item(self, category_key: str, item_key: str) -> bool:
        """Flip one shopping line under the session lock."""
        with self._lock:
            return self.checklist.toggle(category_key, item_key)

    def toggle_theme(self) -> str:
        self.theme = THEMES[(THEMES.index(self.theme) + 1) % len(THEMES)]
        return self.theme


class SessionRepository:
    def __init__(self, max_sessions: int = MAX_SESSIONS):
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, Session]" = OrderedDict()
        self._lock = Lock()

    def get_or_create(self, session_id: Optional[str]) -> Tuple[Session, bool]:
        """Return (session, created). Unknown or missing ids get a fresh session."""
        with self._lock:
            if session_id and session_id in self._sessions:
                self._sessions.move_to_end(session_id)
                return self._sessions[session_id], False
            session = Session(uuid4().hex)
            self._sessions[session.id] = session
            while len(self._sessions) > self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info("Evicted session %s (limit %d)", evicted, self.max_sessions)
            return session, True

    def get(self, session_id: str) -> Optional[Session]:
        with self._lock:
            return self._sessions.get(session_id)

    def clear(self):
        with self._lock:
            self._sessions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


# Process-wide store used by the web layer
SESSIONS = SessionRepository()

__all__ = ['Session', 'SessionRepository', 'SESSIONS']
