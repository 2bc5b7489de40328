# portfolio/api/v1/blog.py
from flask import request, jsonify
from flask_jwt_extended import jwt_required
from portfolio.application.content import blog as service
from portfolio.application.content.entries import get_entry
from portfolio.models.blog_post import BlogPost
from portfolio.normalizers.blog_post import normalize_blog_post
from portfolio.seo.metadata import blog_post_metadata
from portfolio.seo.structured_data import blog_posting
from portfolio.utils.decorators import roles_required, feature_enabled
from portfolio.utils.request_data import json_body, query_int
from .responses import detail_response, not_found_response
from . import v1_bp


# ------------------------
# Public
# ------------------------

@v1_bp.route("/blog", methods=["GET"])
@feature_enabled("blog")
def blog_archive():
    return jsonify(service.blog_archive(
        search=request.args.get("search"),
        category=request.args.get("category"),
        page=query_int("page", 1),
        per_page=query_int("per_page", service.POSTS_PER_PAGE),
    ))


@v1_bp.route("/blog/latest", methods=["GET"])
@feature_enabled("blog")
def homepage_posts():
    return jsonify(service.homepage_posts(
        search=request.args.get("search"),
        category=request.args.get("category"),
    ))


@v1_bp.route("/blog/<slug>", methods=["GET"])
@feature_enabled("blog")
def get_public_post(slug):
    post = service.find_published_post(slug)
    if post is None:
        return not_found_response("Blog Post")

    return detail_response(normalize_blog_post(post), blog_post_metadata, blog_posting)


# ------------------------
# Admin
# ------------------------

@v1_bp.route("/admin/blog", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_admin_posts():
    return jsonify(service.list_blog_posts(
        search=request.args.get("search"),
        category=request.args.get("category"),
    ))


@v1_bp.route("/admin/blog", methods=["POST"])
@jwt_required()
@roles_required("admin")
def create_post():
    post = service.create_blog_post(json_body())
    return jsonify(normalize_blog_post(post, admin=True)), 201


@v1_bp.route("/admin/blog/<post_id>", methods=["GET"])
@jwt_required()
@roles_required("admin")
def get_admin_post(post_id):
    return jsonify(normalize_blog_post(get_entry(BlogPost, post_id), admin=True))


@v1_bp.route("/admin/blog/<post_id>", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def update_post(post_id):
    post = service.update_blog_post(post_id, json_body())
    return jsonify(normalize_blog_post(post, admin=True))


@v1_bp.route("/admin/blog/<post_id>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def delete_post(post_id):
    service.delete_blog_post(post_id)
    return jsonify({"message": "Blog post deleted successfully"})


@v1_bp.route("/admin/blog/<post_id>/toggle", methods=["POST"])
@jwt_required()
@roles_required("admin")
def toggle_post(post_id):
    post = service.toggle_blog_post(post_id)
    return jsonify(normalize_blog_post(post, admin=True))
