# portfolio/api/v1/submissions.py
from flask import request, jsonify
from flask_jwt_extended import jwt_required
from portfolio.application import submissions
from portfolio.normalizers.submissions import normalize_contact_message, normalize_quote_request
from portfolio.utils.decorators import roles_required, feature_enabled
from portfolio.utils.request_data import json_body
from . import v1_bp


# ------------------------
# Public forms
# ------------------------

@v1_bp.route("/contact", methods=["POST"])
@feature_enabled("contact")
def submit_contact():
    result = submissions.submit_contact(json_body())
    return jsonify(result), 201 if result["success"] else 400


@v1_bp.route("/quotes", methods=["POST"])
def submit_quote():
    result = submissions.submit_quote(json_body())
    return jsonify(result), 201 if result["success"] else 400


# ------------------------
# Admin: messages
# ------------------------

@v1_bp.route("/admin/messages", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_messages():
    return jsonify(submissions.list_messages(
        search=request.args.get("search"),
        status=request.args.get("status"),
    ))


@v1_bp.route("/admin/messages/<message_id>", methods=["PATCH"])
@jwt_required()
@roles_required("admin")
def update_message_status(message_id):
    status = json_body().get("status")
    message = submissions.set_message_status(message_id, status)
    return jsonify(normalize_contact_message(message))


@v1_bp.route("/admin/messages/<message_id>/reply", methods=["POST"])
@jwt_required()
@roles_required("admin")
def reply_to_message(message_id):
    message = submissions.reply_to_message(message_id)
    return jsonify(normalize_contact_message(message))


@v1_bp.route("/admin/messages/<message_id>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def delete_message(message_id):
    submissions.delete_message(message_id)
    return jsonify({"message": "Message deleted successfully"})


# ------------------------
# Admin: quotes
# ------------------------

@v1_bp.route("/admin/quotes", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_quotes():
    return jsonify(submissions.list_quotes(
        search=request.args.get("search"),
        status=request.args.get("status"),
    ))


@v1_bp.route("/admin/quotes/<quote_id>", methods=["PATCH"])
@jwt_required()
@roles_required("admin")
def update_quote_status(quote_id):
    status = json_body().get("status")
    quote = submissions.set_quote_status(quote_id, status)
    return jsonify(normalize_quote_request(quote))


@v1_bp.route("/admin/quotes/<quote_id>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def delete_quote(quote_id):
    submissions.delete_quote(quote_id)
    return jsonify({"message": "Quote request deleted successfully"})
