# portfolio/api/v1/snippets.py
from flask import request, jsonify
from flask_jwt_extended import jwt_required
from portfolio.application.content import snippets as service
from portfolio.application.content.entries import get_entry
from portfolio.models.code_snippet import CodeSnippet
from portfolio.normalizers.snippet import normalize_snippet
from portfolio.seo.metadata import snippet_metadata
from portfolio.seo.structured_data import source_code
from portfolio.utils.decorators import roles_required, feature_enabled
from portfolio.utils.request_data import json_body
from .responses import detail_response, not_found_response
from . import v1_bp


@v1_bp.route("/snippets", methods=["GET"])
@feature_enabled("snippets")
def list_public_snippets():
    return jsonify(service.list_published_snippets(
        search=request.args.get("search"),
        language=request.args.get("language"),
        category=request.args.get("category"),
    ))


@v1_bp.route("/snippets/featured", methods=["GET"])
@feature_enabled("snippets")
def list_featured_snippets():
    return jsonify(service.featured_snippets())


@v1_bp.route("/snippets/latest", methods=["GET"])
@feature_enabled("snippets")
def list_latest_snippets():
    return jsonify(service.latest_snippets())


@v1_bp.route("/snippets/<slug>", methods=["GET"])
@feature_enabled("snippets")
def get_public_snippet(slug):
    snippet = service.find_published_snippet(slug)
    if snippet is None:
        return not_found_response("Snippet")

    return detail_response(normalize_snippet(snippet), snippet_metadata, source_code)


@v1_bp.route("/admin/snippets", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_admin_snippets():
    return jsonify(service.list_snippets(
        search=request.args.get("search"),
        language=request.args.get("language"),
    ))


@v1_bp.route("/admin/snippets", methods=["POST"])
@jwt_required()
@roles_required("admin")
def create_snippet():
    snippet = service.create_snippet(json_body())
    return jsonify(normalize_snippet(snippet, admin=True)), 201


@v1_bp.route("/admin/snippets/<snippet_id>", methods=["GET"])
@jwt_required()
@roles_required("admin")
def get_admin_snippet(snippet_id):
    return jsonify(normalize_snippet(get_entry(CodeSnippet, snippet_id), admin=True))


@v1_bp.route("/admin/snippets/<snippet_id>", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def update_snippet(snippet_id):
    snippet = service.update_snippet(snippet_id, json_body())
    return jsonify(normalize_snippet(snippet, admin=True))


@v1_bp.route("/admin/snippets/<snippet_id>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def delete_snippet(snippet_id):
    service.delete_snippet(snippet_id)
    return jsonify({"message": "Snippet deleted successfully"})


@v1_bp.route("/admin/snippets/<snippet_id>/toggle", methods=["POST"])
@jwt_required()
@roles_required("admin")
def toggle_snippet(snippet_id):
    snippet = service.toggle_snippet(snippet_id)
    return jsonify(normalize_snippet(snippet, admin=True))
