from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, flash, jsonify, render_template, request

from ..container import Container
from ..core.constants import CLIENT_ORIGIN_PLACEHOLDER
from ..core.exceptions import CheckinDisabled, DomainError, DuplicateToday, PersistenceError
from .model import ClientMetadata

logger = logging.getLogger(__name__)


def client_metadata_from_request() -> ClientMetadata:
    platform = request.headers.get("Sec-CH-UA-Platform", "").strip('"') or "N/A"
    vendor = request.headers.get("Sec-CH-UA", "").split(";")[0].strip('"') or "N/A"
    return ClientMetadata(
        client_origin=request.remote_addr or CLIENT_ORIGIN_PLACEHOLDER,
        user_agent=request.headers.get("User-Agent", ""),
        device_hint=f"{platform} / {vendor}",
    )


def _optional_text(value) -> Optional[str]:
    """JSON null stays None so the validators reject it; numbers become strings."""
    return None if value is None else str(value)


def _status_for(err: DomainError) -> int:
    if isinstance(err, CheckinDisabled):
        return 403
    if isinstance(err, DuplicateToday):
        return 409
    if isinstance(err, PersistenceError):
        return 500
    return 400


def register(app: Flask, container: Container) -> None:
    service = container.checkin_service

    @app.route("/", methods=["GET", "POST"], endpoint="checkin")
    def checkin():
        enabled = service.is_enabled()
        if not enabled and request.method == "GET":
            return render_template("checkin_disabled.html")

        form = {"full_name": "", "enrollment_id": ""}
        if request.method == "POST":
            form = {
                "full_name": request.form.get("full_name", ""),
                "enrollment_id": request.form.get("enrollment_id", ""),
            }
            try:
                record = service.submit(
                    form["full_name"],
                    form["enrollment_id"],
                    enabled=enabled,
                    client=client_metadata_from_request(),
                )
                flash(service.success_message(record), "success")
                form = {"full_name": "", "enrollment_id": ""}
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Unexpected error during check-in")
                flash("Não foi possível registrar agora. Tente novamente ou contate o professor.", "danger")

        return render_template("checkin.html", form=form)

    @app.route("/api/checkins", methods=["POST"], endpoint="api_checkin")
    def api_checkin():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        try:
            record = service.submit(
                _optional_text(data.get("full_name")),
                _optional_text(data.get("enrollment_id")),
                enabled=service.is_enabled(),
                client=client_metadata_from_request(),
            )
        except DomainError as e:
            body = {"success": False, "message": str(e)}
            if isinstance(e, DuplicateToday):
                body["existing_time"] = e.existing_time
            return jsonify(body), _status_for(e)
        except Exception:
            logger.exception("Unexpected error during API check-in")
            return jsonify({"success": False, "message": "Erro interno ao registrar presença."}), 500

        return jsonify({"success": True, "message": service.success_message(record), "record": record.to_dict()}), 201
