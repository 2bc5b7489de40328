# portfolio/api/v1/service_areas.py
from flask import jsonify
from flask_jwt_extended import jwt_required
from portfolio.application.content import service_areas as service
from portfolio.application.content.entries import get_entry
from portfolio.models.service_area import ServiceArea
from portfolio.normalizers.service_area import normalize_service_area
from portfolio.seo.metadata import service_area_metadata
from portfolio.seo.structured_data import local_business
from portfolio.utils.decorators import roles_required
from portfolio.utils.request_data import json_body
from .responses import detail_response, not_found_response
from . import v1_bp


@v1_bp.route("/service-areas", methods=["GET"])
def list_public_service_areas():
    return jsonify(service.list_active_service_areas())


@v1_bp.route("/service-areas/<slug>", methods=["GET"])
def get_public_service_area(slug):
    area = service.find_active_service_area(slug)
    if area is None:
        return not_found_response("Service Area")

    return detail_response(normalize_service_area(area), service_area_metadata, local_business)


@v1_bp.route("/admin/service-areas", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_admin_service_areas():
    return jsonify(service.list_service_areas())


@v1_bp.route("/admin/service-areas", methods=["POST"])
@jwt_required()
@roles_required("admin")
def create_service_area():
    area = service.create_service_area(json_body())
    return jsonify(normalize_service_area(area, admin=True)), 201


@v1_bp.route("/admin/service-areas/<area_id>", methods=["GET"])
@jwt_required()
@roles_required("admin")
def get_admin_service_area(area_id):
    return jsonify(normalize_service_area(get_entry(ServiceArea, area_id), admin=True))


@v1_bp.route("/admin/service-areas/<area_id>", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def update_service_area(area_id):
    area = service.update_service_area(area_id, json_body())
    return jsonify(normalize_service_area(area, admin=True))


@v1_bp.route("/admin/service-areas/<area_id>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def delete_service_area(area_id):
    service.delete_service_area(area_id)
    return jsonify({"message": "Service area deleted successfully"})


@v1_bp.route("/admin/service-areas/<area_id>/toggle", methods=["POST"])
@jwt_required()
@roles_required("admin")
def toggle_service_area(area_id):
    area = service.toggle_service_area(area_id)
    return jsonify(normalize_service_area(area, admin=True))
