import logging
from flask import Flask, request, jsonify
from flask_cors import CORS
from config import DEBUG, PORT
from database import SessionLocal, engine, Base
from errors import SocialMediaError
from logging_config import setup_logging
from services.accounts import AccountService
from services.messages import MessageService

# ── Initialize logging & DB ───────────────────────────────────
setup_logging()
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)

app = Flask(__name__)
CORS(app)


def _json_body():
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def _message_service(db):
    return MessageService(db, AccountService(db))


@app.errorhandler(SocialMediaError)
def handle_service_error(err):
    return jsonify(err.to_response()), err.http_status

# ── Accounts ──────────────────────────────────────────────────

@app.route("/register", methods=["POST"])
def register():
    data = _json_body()
    with SessionLocal() as db:
        account = AccountService(db).register(data.get("username"), data.get("password"))
        return jsonify(account.to_dict())

@app.route("/login", methods=["POST"])
def login():
    data = _json_body()
    with SessionLocal() as db:
        account = AccountService(db).login(data.get("username"), data.get("password"))
        return jsonify(account.to_dict())

@app.route("/accounts/<int:account_id>", methods=["GET"])
def get_account(account_id):
    with SessionLocal() as db:
        account = AccountService(db).get_by_id(account_id)
        if not account:
            return jsonify({"error": "Account not found"}), 404
        return jsonify(account.to_dict())

@app.route("/accounts/<int:account_id>/messages", methods=["GET"])
def list_account_messages(account_id):
    with SessionLocal() as db:
        messages = _message_service(db).get_by_account(account_id)
        return jsonify([m.to_dict() for m in messages])

# ── Messages ──────────────────────────────────────────────────

@app.route("/messages", methods=["POST"])
def create_message():
    data = _json_body()
    with SessionLocal() as db:
        message = _message_service(db).create(data.get("messageText"), data.get("postedBy"), data.get("timePostedEpoch"))
        return jsonify(message.to_dict())

@app.route("/messages", methods=["GET"])
def list_messages():
    with SessionLocal() as db:
        return jsonify([m.to_dict() for m in _message_service(db).get_all()])

@app.route("/messages/<int:message_id>", methods=["GET"])
def get_message(message_id):
    with SessionLocal() as db:
        message = _message_service(db).get_by_id(message_id)
        return (jsonify(message.to_dict()), 200) if message else ("", 200)

@app.route("/messages/<int:message_id>", methods=["DELETE"])
def delete_message(message_id):
    with SessionLocal() as db:
        count = _message_service(db).delete(message_id)
        return (jsonify(count), 200) if count else ("", 200)

@app.route("/messages/<int:message_id>", methods=["PATCH"])
def update_message(message_id):
    data = _json_body()
    with SessionLocal() as db:
        count = _message_service(db).update_text(message_id, data.get("messageText"))
        return jsonify(count)

# ── Entry Point ───────────────────────────────────────────────

if __name__ == "__main__":
    logger.info("Starting API on port %s", PORT)
    app.run(debug=DEBUG, port=PORT)
