# portfolio/api/v1/settings.py
from flask import jsonify
from flask_jwt_extended import jwt_required
from portfolio.application import settings
from portfolio.utils.decorators import roles_required
from portfolio.utils.request_data import json_body
from werkzeug.exceptions import BadRequest
from . import v1_bp


@v1_bp.route("/settings", methods=["GET"])
def get_public_settings():
    return jsonify(settings.load_site_settings())


@v1_bp.route("/admin/settings", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_settings():
    return jsonify({"items": settings.list_settings()})


@v1_bp.route("/admin/settings", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def save_settings():
    return jsonify(settings.save_settings(json_body()))


@v1_bp.route("/admin/settings/<key>", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def update_setting(key):
    data = json_body()
    if "value" not in data:
        raise BadRequest("'value' is required")

    setting = settings.update_setting(key, data["value"], data.get("description"))
    return jsonify({
        "key": setting.key,
        "value": settings.parse_setting(setting),
        "type": setting.type,
        "description": setting.description,
    })
