"""
Health controller - health check endpoint for monitoring.
"""

import logging

from flask import Blueprint, jsonify

from salon.core.api_utils import get_store
from salon.services.data_store import COLLECTION_NAMES, CollectionSource

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__, url_prefix="/health")


@health_bp.route("", methods=["GET"])
def health_check():
    """
    Report where each collection came from when the store was opened.

    Example response:
        {"status": "healthy", "collections": {"clients": "stored", ...},
         "recovered": []}

    A collection listed under ``recovered`` had a corrupted stored copy and
    was reset to its seed data. The endpoint still answers 200.
    """
    store = get_store()
    recovered = [
        name
        for name in COLLECTION_NAMES
        if store.sources.get(name) == CollectionSource.RECOVERED
    ]
    if recovered:
        logger.warning(
            "Health check: collections recovered from seed",
            extra={"context": {"collections": recovered}},
        )

    return (
        jsonify(
            {
                "status": "healthy",
                "collections": {
                    name: store.sources.get(name, CollectionSource.STORED)
                    for name in COLLECTION_NAMES
                },
                "recovered": recovered,
                "records": {name: len(store.repository(name)) for name in COLLECTION_NAMES},
            }
        ),
        200,
    )
