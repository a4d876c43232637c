from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from checkin_system.core.exceptions import InvalidCredentials
from checkin_system.auth.service import ProfessorAuthService


def test_valid_credentials_unlock_panel():
    svc = ProfessorAuthService("professor", password="2020")

    professor = svc.authenticate("professor", "2020")

    assert professor.username == "professor"
    assert professor.role == "professor"


@pytest.mark.parametrize("username,password", [("professor", "2021"), ("Professor", "2020"), ("", "")])
def test_invalid_credentials_rejected(username, password):
    svc = ProfessorAuthService("professor", password="2020")

    with pytest.raises(InvalidCredentials) as exc:
        svc.authenticate(username, password)
    assert str(exc.value) == "Credenciais inválidas. Tente novamente."


def test_precomputed_hash_is_accepted():
    svc = ProfessorAuthService("prof", password_hash=generate_password_hash("s3cret"))

    assert svc.authenticate("prof", "s3cret").username == "prof"


def test_malformed_hash_never_authenticates():
    svc = ProfessorAuthService("prof", password_hash="CHANGE_ME")

    with pytest.raises(InvalidCredentials):
        svc.authenticate("prof", "CHANGE_ME")


def test_password_or_hash_required():
    with pytest.raises(ValueError):
        ProfessorAuthService("prof")
