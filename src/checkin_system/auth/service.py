from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.constants import PROFESSOR_ACTOR
from ..core.exceptions import InvalidCredentials


@dataclass(frozen=True)
class SessionProfessor:
    """What we store into Flask session after login."""

    username: str
    role: str = PROFESSOR_ACTOR


class ProfessorAuthService:
    """Use case: unlock the professor panel with the configured credential pair.

    Only a hash of the password is kept in memory.
    """

    def __init__(self, username: str, *, password: Optional[str] = None, password_hash: Optional[str] = None):
        if not password_hash:
            if password is None:
                raise ValueError("password or password_hash is required")
            password_hash = generate_password_hash(password)
        self._username = username
        self._password_hash = password_hash

    def authenticate(self, username: str, password: str) -> SessionProfessor:
        if username != self._username:
            raise InvalidCredentials("Credenciais inválidas. Tente novamente.")

        try:
            ok = check_password_hash(self._password_hash, password)
        except ValueError:
            # malformed hash from settings
            ok = False

        if not ok:
            raise InvalidCredentials("Credenciais inválidas. Tente novamente.")
        return SessionProfessor(username=username)
