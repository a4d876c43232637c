from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..auth.controller import professor_required
from ..common.datetime_utils import display_date, now_local
from ..container import Container
from ..core.enums import SortMode, ViewMode
from ..core.exceptions import DomainError
from .query import ReviewQuery, year_options

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.review_service

    def _current_query() -> ReviewQuery:
        return ReviewQuery.from_params(request.args, today=now_local().date())

    def _system_error(action: str, err: Exception) -> None:
        logger.exception("Unexpected error while %s", action)
        if bool(app.config.get("DEBUG", False)):
            flash(f"Erro interno ao {action}: {err}", "danger")
        else:
            flash(f"Erro interno ao {action}.", "danger")

    app.jinja_env.filters["display_date"] = display_date

    @app.route("/professor", methods=["GET"], endpoint="professor_panel")
    @professor_required
    def professor_panel():
        query = _current_query()
        records = service.list_view(query)
        return render_template(
            "professor_panel.html",
            gate_config=service.current_config(),
            records=records,
            query=query,
            view_modes=list(ViewMode),
            sort_modes=list(SortMode),
            years=year_options(now_local().date()),
        )

    @app.route("/professor/gate", methods=["POST"], endpoint="professor_gate")
    @professor_required
    def professor_gate():
        enabled = request.form.get("enabled") == "1"
        try:
            service.toggle_gate(enabled)
            flash("Check-in habilitado." if enabled else "Check-in desabilitado.", "success")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception as e:
            _system_error("alterar o check-in", e)
        return redirect(url_for("professor_panel", **request.args.to_dict()))

    @app.route("/professor/records/<record_id>/delete", methods=["GET", "POST"], endpoint="professor_delete")
    @professor_required
    def professor_delete(record_id: str):
        record = service.find_record(record_id)
        if not record:
            flash("Registro não encontrado.", "warning")
            return redirect(url_for("professor_panel", **request.args.to_dict()))

        if request.method == "GET":
            return render_template(
                "confirm_delete.html",
                record=record,
                prompt=service.delete_prompt(record.full_name),
                back_args=request.args.to_dict(),
            )

        try:
            deleted = service.delete_record(
                record_id,
                record.full_name,
                confirm=lambda _prompt: request.form.get("confirm") == "yes",
            )
            if deleted:
                flash(f"Registro de {record.full_name} apagado.", "success")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception as e:
            _system_error("apagar o registro", e)
        return redirect(url_for("professor_panel", **request.args.to_dict()))

    @app.route("/professor/export", methods=["GET"], endpoint="professor_export")
    @professor_required
    def professor_export():
        query = _current_query()
        export = service.export_current_view(query)
        if export is None:
            flash("Nenhum registro na visualização atual para exportar.", "info")
            return redirect(url_for("professor_panel", **query.as_params()))

        return app.response_class(
            export.as_bytes(),
            mimetype="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
        )
