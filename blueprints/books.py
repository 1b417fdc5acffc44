from __future__ import annotations
import logging
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from catalog import Catalog, CatalogError, InvalidInput, NotFound
from stores.book_store import BookStoreError

logger = logging.getLogger(__name__)

bp = Blueprint("books", __name__, url_prefix="/books")

BODY_NOT_OBJECT_MSG = "Request body must be a JSON object."


def get_catalog() -> Catalog:
    return current_app.extensions["catalog"]


def json_body() -> dict[str, Any]:
    # No body at all is treated as an empty object
    if not request.get_data():
        return {}
    # Content-Type is not checked, the body itself must be JSON
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        raise InvalidInput(BODY_NOT_OBJECT_MSG)
    return payload


# ========== Routes ==========

@bp.post("")
def books_create():
    book = get_catalog().create(json_body())
    return jsonify(book), 201


@bp.get("")
def books_list():
    return jsonify(get_catalog().list_all()), 200


@bp.get("/<book_id>")
def books_get(book_id: str):
    return jsonify(get_catalog().get(book_id)), 200


@bp.put("/<book_id>")
def books_update(book_id: str):
    book = get_catalog().update(book_id, json_body())
    return jsonify(book), 200


@bp.delete("/<book_id>")
def books_delete(book_id: str):
    return jsonify(get_catalog().delete(book_id)), 200


# ========== Errors ==========

@bp.app_errorhandler(CatalogError)
def handle_catalog_error(e: CatalogError):
    status = 404 if isinstance(e, NotFound) else 400
    return jsonify({"error": e.message}), status


@bp.app_errorhandler(BookStoreError)
def handle_store_error(e: BookStoreError):
    return jsonify({"error": str(e)}), 500


@bp.app_errorhandler(HTTPException)
def handle_http_error(e: HTTPException):
    # Keep the status and headers (e.g. Allow on 405), swap the body
    response = e.get_response()
    response.data = current_app.json.dumps({"error": e.description})
    response.content_type = "application/json"
    return response


@bp.app_errorhandler(Exception)
def handle_unexpected(e: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.path)
    return jsonify({"error": "Internal server error."}), 500
