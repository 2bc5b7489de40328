# portfolio/api/v1/uploads.py
from flask import request, jsonify
from flask_jwt_extended import jwt_required
from portfolio.utils.decorators import roles_required
from portfolio.utils.media import upload_image
from . import v1_bp


@v1_bp.route("/admin/uploads", methods=["POST"])
@jwt_required()
@roles_required("admin")
def upload():
    result = upload_image(request.files.get("file"))
    return jsonify(result), 201
