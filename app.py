# app.py
from __future__ import annotations
import logging
from flask import Flask

from blueprints import books_bp
from catalog import Catalog
from config import DEBUG, HOST, LOG_LEVEL, PORT
from stores.book_store import BookStore

logger = logging.getLogger(__name__)


def create_app(store: BookStore | None = None) -> Flask:
    app = Flask(__name__)
    app.json.sort_keys = False  # keep books as the client sent them

    app.extensions["catalog"] = Catalog(store or BookStore.from_config())
    app.register_blueprint(books_bp)
    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Library Management System API is running on http://localhost:%s", PORT)
    app.run(
        debug=DEBUG,
        host=HOST,
        port=PORT
    )
