# portfolio/api/v1/services.py
from flask import jsonify
from flask_jwt_extended import jwt_required
from portfolio.application.content import services as service
from portfolio.application.content.entries import get_entry
from portfolio.models.service import Service
from portfolio.normalizers.service import normalize_service
from portfolio.utils.decorators import roles_required
from portfolio.utils.request_data import json_body
from . import v1_bp


@v1_bp.route("/services", methods=["GET"])
def list_public_services():
    return jsonify(service.list_published_services())


@v1_bp.route("/admin/services", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_admin_services():
    return jsonify(service.list_services())


@v1_bp.route("/admin/services", methods=["POST"])
@jwt_required()
@roles_required("admin")
def create_service():
    created = service.create_service(json_body())
    return jsonify(normalize_service(created, admin=True)), 201


@v1_bp.route("/admin/services/<service_id>", methods=["GET"])
@jwt_required()
@roles_required("admin")
def get_admin_service(service_id):
    return jsonify(normalize_service(get_entry(Service, service_id), admin=True))


@v1_bp.route("/admin/services/<service_id>", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def update_service(service_id):
    updated = service.update_service(service_id, json_body())
    return jsonify(normalize_service(updated, admin=True))


@v1_bp.route("/admin/services/<service_id>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def delete_service(service_id):
    service.delete_service(service_id)
    return jsonify({"message": "Service deleted successfully"})


@v1_bp.route("/admin/services/<service_id>/toggle", methods=["POST"])
@jwt_required()
@roles_required("admin")
def toggle_service(service_id):
    toggled = service.toggle_service(service_id)
    return jsonify(normalize_service(toggled, admin=True))
