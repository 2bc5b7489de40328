# portfolio/api/v1/projects.py
from flask import request, jsonify
from flask_jwt_extended import jwt_required
from portfolio.application.content import projects as service
from portfolio.models.project import Project
from portfolio.normalizers.project import normalize_project
from portfolio.seo.metadata import project_metadata
from portfolio.seo.structured_data import creative_work
from portfolio.utils.decorators import roles_required, feature_enabled
from portfolio.utils.request_data import json_body
from portfolio.application.content.entries import get_entry
from .responses import detail_response, not_found_response
from . import v1_bp


# ------------------------
# Public
# ------------------------

@v1_bp.route("/projects", methods=["GET"])
@feature_enabled("projects")
def list_public_projects():
    return jsonify(service.list_published_projects(
        search=request.args.get("search"),
        category=request.args.get("category"),
        sort=request.args.get("sort"),
    ))


@v1_bp.route("/projects/featured", methods=["GET"])
@feature_enabled("projects")
def list_featured_projects():
    return jsonify(service.featured_projects())


@v1_bp.route("/projects/<slug>", methods=["GET"])
@feature_enabled("projects")
def get_public_project(slug):
    project = service.find_published_project(slug)
    if project is None:
        return not_found_response("Project")

    return detail_response(normalize_project(project), project_metadata, creative_work)


# ------------------------
# Admin
# ------------------------

@v1_bp.route("/admin/projects", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_admin_projects():
    return jsonify(service.list_projects(
        search=request.args.get("search"),
        category=request.args.get("category"),
    ))


@v1_bp.route("/admin/projects", methods=["POST"])
@jwt_required()
@roles_required("admin")
def create_project():
    project = service.create_project(json_body())
    return jsonify(normalize_project(project, admin=True)), 201


@v1_bp.route("/admin/projects/<project_id>", methods=["GET"])
@jwt_required()
@roles_required("admin")
def get_admin_project(project_id):
    return jsonify(normalize_project(get_entry(Project, project_id), admin=True))


@v1_bp.route("/admin/projects/<project_id>", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def update_project(project_id):
    project = service.update_project(project_id, json_body())
    return jsonify(normalize_project(project, admin=True))


@v1_bp.route("/admin/projects/<project_id>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def delete_project(project_id):
    service.delete_project(project_id)
    return jsonify({"message": "Project deleted successfully"})


@v1_bp.route("/admin/projects/<project_id>/toggle", methods=["POST"])
@jwt_required()
@roles_required("admin")
def toggle_project(project_id):
    project = service.toggle_project(project_id)
    return jsonify(normalize_project(project, admin=True))
