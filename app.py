import logging
from typing import Optional

from flask import Blueprint, Flask, Response, current_app, jsonify, request
from werkzeug.exceptions import BadRequest

from models import Receipt
from scoring import calculate_points
from store import ReceiptStore
from validation import ReceiptValidationError, validate_receipt

logging.basicConfig(
    format="%(asctime)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
log = logging.getLogger(__name__)

HOST = "0.0.0.0"
PORT = 5000
STORE_EXTENSION = "receipt_store"
RECEIPT_NOT_FOUND_MESSAGE = "No receipt found for that ID."

receipts_bp = Blueprint("receipts", __name__)


def text_error(message: str, status: int) -> Response:
    """ Plain-text error body; unencodable characters echoed from the request are escaped """
    return Response(message.encode("utf-8", "backslashreplace"), status=status, mimetype="text/plain")


def get_store() -> ReceiptStore:
    return current_app.extensions[STORE_EXTENSION]


@receipts_bp.route('/receipts/process', methods=['POST'])
def process_receipt():
    """
    Router for receipt processing requests. The input JSON is validated and,
    if it passes, stored under a newly generated id which is returned to the
    user. Points are not computed here; they are derived from the stored
    receipt on every lookup.

    Returns:
        400 Error and a plain-text reason if the body is not JSON or the receipt is invalid
        200 OK and generated receipt id if input JSON is valid
    """
    try:
        body = request.get_json(force=True)
    except BadRequest:
        log.info("Rejected receipt: body is not valid JSON")
        return text_error("Error: request body is not valid JSON", 400)
    try:
        validate_receipt(body)
    except ReceiptValidationError as e:
        log.info("Rejected receipt: %r", str(e))
        return text_error(str(e), 400)

    receipt_id = get_store().add(Receipt.from_dict(body))
    log.info("Stored receipt %s", receipt_id)
    return jsonify({"id": receipt_id})


@receipts_bp.route('/receipts/<receipt_id>/points', methods=['GET'])
def get_points(receipt_id: str):
    """
    Router for point lookups. The receipt id is resolved against the store
    and the points are calculated from the stored receipt.

    Returns:
        404 Error if the receipt id is not found
        200 OK and the calculated points for the receipt
    """
    receipt = get_store().get(receipt_id)
    if receipt is None:
        log.warning("Receipt id not found: %s", receipt_id)
        return text_error(RECEIPT_NOT_FOUND_MESSAGE, 404)
    return jsonify({"points": calculate_points(receipt)})


def create_app(store: Optional[ReceiptStore] = None) -> Flask:
    """ Builds the Flask application around the given store (a fresh one by default) """
    app = Flask(__name__)
    app.extensions[STORE_EXTENSION] = store if store is not None else ReceiptStore()
    app.register_blueprint(receipts_bp)
    return app


flask_app = create_app()


if __name__ == '__main__':
    flask_app.run(host=HOST, port=PORT, threaded=True)
    # setting threaded=True allows Flask to concurrently handle requests
