"""
api.errors - JSON error handlers for the API blueprint.
"""

import logging

from flask import jsonify

from api import api_bp
from import_engine.errors import PoolImportError

logger = logging.getLogger(__name__)


@api_bp.errorhandler(PoolImportError)
def api_import_error(e: PoolImportError):
    logger.warning("Conversion rejected: %s", e)
    return jsonify(e.to_dict()), 422


@api_bp.errorhandler(404)
def api_not_found(_e):
    return jsonify({"error": "not found"}), 404


@api_bp.errorhandler(400)
def api_bad_request(_e):
    return jsonify({"error": "bad request"}), 400


@api_bp.errorhandler(500)
def api_server_error(_e):
    return jsonify({"error": "internal server error"}), 500
