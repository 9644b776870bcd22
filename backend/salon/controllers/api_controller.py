"""
Collection CRUD endpoints.

Every collection is exposed under ``/api/<collection>``; records travel in
their durable camelCase form. Append-only collections (transactions) answer
PATCH and DELETE with 405.
"""

from flask import Blueprint, request

from salon.core.api_utils import api_response, get_store
from salon.core.exceptions import (
    AppendOnlyCollectionError,
    ScheduleOverflowError,
    UnknownCollectionError,
)
from salon.services.scheduling_service import calculate_schedule
from salon.services.search_service import (
    filter_appointments,
    filter_services,
    search_clients,
    search_employees,
)

api_bp = Blueprint("api", __name__, url_prefix="/api")


@api_bp.errorhandler(UnknownCollectionError)
def handle_unknown_collection(error: UnknownCollectionError):
    return api_response(False, str(error), None, 404)


@api_bp.errorhandler(AppendOnlyCollectionError)
def handle_append_only(error: AppendOnlyCollectionError):
    return api_response(False, str(error), None, 405)


@api_bp.errorhandler(ScheduleOverflowError)
def handle_schedule_overflow(error: ScheduleOverflowError):
    return api_response(False, str(error), None, 422)


def _json_payload():
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else None


def _filtered(collection: str, records):
    query = request.args.get("q")
    if collection == "clients":
        return search_clients(records, query)
    if collection == "services":
        return filter_services(records, query, request.args.get("category"))
    if collection == "employees":
        return search_employees(records, query)
    if collection == "appointments":
        return filter_appointments(records, request.args.get("status"))
    return records


@api_bp.route("/<collection>", methods=["GET"])
def list_records(collection: str):
    """List a collection, optionally filtered by ``q``/``status``/``category``."""
    repository = get_store().repository(collection)
    records = _filtered(collection, repository.list())
    return api_response(
        True,
        f"{len(records)} {collection} found",
        [record.to_dict() for record in records],
    )


@api_bp.route("/<collection>", methods=["POST"])
def create_record(collection: str):
    """Create a record; the store assigns its id."""
    store = get_store()
    repository = store.repository(collection)
    payload = _json_payload()
    if payload is None:
        return api_response(False, "Request body must be a JSON object", None, 400)

    if collection == "appointments":
        _fill_schedule(store, payload)
        record = store.add_appointment(**payload)
    else:
        record = repository.add(**payload)

    return api_response(True, "Record created", record.to_dict(), 201)


def _fill_schedule(store, payload: dict) -> None:
    """Derive endTime/totalAmount for a new appointment when not supplied."""
    if "endTime" in payload and "totalAmount" in payload:
        return
    service_ids = payload.get("serviceIds") or []
    start_time = payload.get("startTime") or ""
    try:
        quote = calculate_schedule(store.services.list(), service_ids, start_time)
    except ValueError:
        # Unparseable start time: persisted as given
        return
    payload.setdefault("endTime", quote.end_time)
    payload.setdefault("totalAmount", quote.total_amount)


@api_bp.route("/<collection>/<record_id>", methods=["PATCH"])
def update_record(collection: str, record_id: str):
    """Shallow-merge the given fields into an existing record."""
    repository = get_store().repository(collection)
    if repository.append_only:
        raise AppendOnlyCollectionError(collection, "update")

    payload = _json_payload()
    if payload is None:
        return api_response(False, "Request body must be a JSON object", None, 400)

    repository.update(record_id, **payload)
    record = repository.get_by_id(record_id)
    if record is None:
        return api_response(False, "Record not found", None, 404)
    return api_response(True, "Record updated", record.to_dict())


@api_bp.route("/<collection>/<record_id>", methods=["DELETE"])
def delete_record(collection: str, record_id: str):
    repository = get_store().repository(collection)
    if repository.append_only:
        raise AppendOnlyCollectionError(collection, "delete")

    if repository.get_by_id(record_id) is None:
        return api_response(False, "Record not found", None, 404)
    repository.delete(record_id)
    return api_response(True, "Record deleted")


@api_bp.route("/appointments/quote", methods=["POST"])
def quote_appointment():
    """Run the scheduling calculator for a prospective appointment.

    Body: ``{"serviceIds": [...], "startTime": "HH:MM", "previousEndTime": "HH:MM"}``
    """
    payload = _json_payload()
    if payload is None:
        return api_response(False, "Request body must be a JSON object", None, 400)

    try:
        quote = calculate_schedule(
            get_store().services.list(),
            payload.get("serviceIds") or [],
            payload.get("startTime") or "",
            payload.get("previousEndTime") or "",
        )
    except ValueError as e:
        return api_response(False, str(e), None, 422)

    return api_response(True, "Schedule calculated", quote.to_dict())
