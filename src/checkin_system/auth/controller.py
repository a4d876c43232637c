from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def professor_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "professor" not in session:
            flash("Faça login como professor para continuar.", "warning")
            return redirect(url_for("professor_login"))
        return view(*args, **kwargs)

    return wrapper


def register(app: Flask, container: Container) -> None:
    @app.route("/professor/login", methods=["GET", "POST"], endpoint="professor_login")
    def professor_login():
        if "professor" in session:
            return redirect(url_for("professor_panel"))

        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")
            try:
                professor = container.auth_service.authenticate(username, password)
                session["professor"] = professor.username
                session["role"] = professor.role
                return redirect(url_for("professor_panel"))
            except AuthenticationError as e:
                logger.info("Failed professor login for %r", username)
                return render_template("professor_login.html", username=username, error=str(e)), 401

        return render_template("professor_login.html", username="", error=None)

    @app.route("/professor/logout", endpoint="professor_logout")
    def professor_logout():
        session.clear()
        flash("Sessão encerrada.", "info")
        return redirect(url_for("professor_login"))
