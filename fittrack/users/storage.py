# -*- coding: utf-8 -*-
"""Users — repository over the record store.

Every operation is a full load, an in-memory change and (for writes) a full
save. Operations are serialized with a process-wide lock so two requests in
the same process cannot interleave their load/save cycles.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from ..errors import AlreadyExists
from ..store import RecordStore

logger = logging.getLogger(__name__)

_LOOKUP_FIELDS = ("id", "email")


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def new_user_record(*, name: str, email: str, password_hash: str) -> Dict[str, Any]:
    now = utc_now()
    return {
        "id": str(uuid4()),
        "name": name,
        "email": normalize_email(email),
        "password": password_hash,
        "workouts": [],
        "createdAt": now,
        "updatedAt": now,
    }


def public_view(user: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(user)
    out.pop("password", None)
    return out


class UserRepository:
    def __init__(self, store: RecordStore) -> None:
        self.store = store
        self._lock = threading.Lock()

    def find_by_field(self, field: str, value: Any) -> Optional[Dict[str, Any]]:
        if field not in _LOOKUP_FIELDS:
            raise ValueError(f"unsupported lookup field: {field!r}")
        with self._lock:
            users = self.store.load()
        if field == "email":
            wanted = normalize_email(value)
            return next((u for u in users if normalize_email(u.get("email")) == wanted), None)
        return next((u for u in users if u.get("id") == value), None)

    def insert_user(self, user: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            users = self.store.load()
            users.append(user)
            self.store.save(users)
        logger.info("Inserted user %s", user.get("id"))
        return user

    def insert_user_unless_email(self, user: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Insert ``user`` unless its email is taken; check and write share one lock hold."""
        wanted = normalize_email(user.get("email"))
        with self._lock:
            users = self.store.load()
            if any(normalize_email(u.get("email")) == wanted for u in users):
                return None
            users.append(user)
            self.store.save(users)
        logger.info("Inserted user %s", user.get("id"))
        return user

    def update_user_unless_email_taken(self, user_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Like ``update_user``, but raises ``AlreadyExists`` when ``fields`` moves
        the user onto an email another user already owns."""
        changes = {k: v for k, v in fields.items() if k != "id"}
        wanted = normalize_email(changes["email"]) if "email" in changes else None
        with self._lock:
            users = self.store.load()
            if wanted is not None and any(
                normalize_email(u.get("email")) == wanted and u.get("id") != user_id for u in users
            ):
                raise AlreadyExists("Email already registered")
            return self._merge(users, user_id, changes)

    def update_user(self, user_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Shallow merge: each key in ``fields`` replaces the stored value."""
        changes = {k: v for k, v in fields.items() if k != "id"}
        with self._lock:
            return self._merge(self.store.load(), user_id, changes)

    def _merge(self, users: List[Dict[str, Any]], user_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        # Caller holds self._lock.
        for index, user in enumerate(users):
            if user.get("id") == user_id:
                merged = {**user, **changes}
                users[index] = merged
                self.store.save(users)
                return merged
        return None

    def add_workout(self, user_id: str, workout: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        # updatedAt is left alone here; only explicit profile updates bump it.
        with self._lock:
            users = self.store.load()
            for user in users:
                if user.get("id") == user_id:
                    if not isinstance(user.get("workouts"), list):
                        user["workouts"] = []
                    user["workouts"].append(workout)
                    self.store.save(users)
                    logger.info("Added workout %s for user %s", workout.get("id"), user_id)
                    return user
        return None
