from flask import jsonify, current_app
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    get_jwt,
    get_jwt_identity,
    jwt_required,
)
from portfolio.models.user import AdminUser
from portfolio.utils.request_data import json_body
from . import v1_bp


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    data = json_body()

    email = data.get("email")
    password = data.get("password")

    if not email or not password:
        return jsonify({"error": "Email and password required"}), 400

    user = AdminUser.query.filter_by(email=email.strip().lower()).first()

    if not user or not user.check_password(password):
        current_app.logger.warning(f"Failed login for {email}")
        return jsonify({"error": "Invalid credentials"}), 401

    if not user.is_active:
        return jsonify({"error": "User account disabled"}), 403

    claims = {"role": user.role}

    access_token = create_access_token(identity=user.id, additional_claims=claims)
    refresh_token = create_refresh_token(identity=user.id, additional_claims=claims)

    return jsonify({
        "access_token": access_token,
        "refresh_token": refresh_token
    }), 200


@v1_bp.route("/auth/refresh", methods=["POST"])
@jwt_required(refresh=True)
def refresh():
    access_token = create_access_token(
        identity=get_jwt_identity(),
        additional_claims={"role": get_jwt().get("role")},
    )
    return jsonify({"access_token": access_token}), 200
