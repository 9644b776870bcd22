"""
Finance endpoints: period reports and CSV export.

Both accept ``period`` (daily|weekly|monthly, default daily) and ``date``
(``YYYY-MM-DD`` pivot, default today in the application timezone).
"""

from flask import Blueprint, Response, request

from salon.core.api_utils import api_response, get_store
from salon.services.finance_service import (
    PeriodKind,
    build_period_report,
    daily_revenue_series,
    export_filename,
    export_period_csv,
    parse_period,
)

finance_bp = Blueprint("finance", __name__, url_prefix="/api/finances")


def _requested_period(store):
    return parse_period(
        request.args.get("period"), request.args.get("date"), store.today()
    )


@finance_bp.route("/report", methods=["GET"])
def period_report():
    store = get_store()
    try:
        period = _requested_period(store)
    except ValueError as e:
        return api_response(False, str(e), None, 400)

    data = build_period_report(store, period).to_dict()
    data["previous"] = period.previous().pivot.isoformat()
    data["next"] = period.next().pivot.isoformat()
    if period.kind == PeriodKind.MONTHLY:
        data["dailyRevenue"] = [
            d.to_dict()
            for d in daily_revenue_series(store.appointments.list(), period.pivot)
        ]
    return api_response(True, "Report generated", data)


@finance_bp.route("/export", methods=["GET"])
def export_report():
    store = get_store()
    try:
        period = _requested_period(store)
    except ValueError as e:
        return api_response(False, str(e), None, 400)

    content = export_period_csv(store, period)
    return Response(
        content,
        mimetype="text/csv",
        headers={
            "Content-Disposition": f"attachment; filename={export_filename(period)}"
        },
    )
