from functools import wraps
from flask import jsonify
from flask_jwt_extended import get_jwt

def roles_required(*allowed_roles):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            claims = get_jwt()

            if claims.get("role") not in allowed_roles:
                return jsonify({"error": "Insufficient permissions"}), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator

def feature_enabled(feature_name):
    """
    Gate a public route on an `enable_*` site setting.
    An unset flag counts as enabled.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            from portfolio.application.settings import is_feature_enabled

            if not is_feature_enabled(feature_name):
                return jsonify({
                    "error": f"Feature '{feature_name}' is disabled"
                }), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator
