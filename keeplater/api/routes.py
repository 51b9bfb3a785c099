from __future__ import annotations

from flask import current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from keeplater.api import api_bp
from keeplater.extensions import db
from keeplater.services.security import jwt_required
from keeplater.services.share import list_entries
from keeplater.services.store import SqlEntryStore


@api_bp.route("/health")
def health():
    return jsonify({"status": "ok", "service": "KeepLater"})


@api_bp.route("/entries", methods=["GET"])
@jwt_required()
def entries_list_api():
    try:
        entries = list_entries(SqlEntryStore(db.session))
    except SQLAlchemyError:
        current_app.logger.exception("Failed to list entries")
        return jsonify({"message": "Failed to fetch entries from database"}), 500
    return jsonify([entry.as_dict() for entry in entries])
