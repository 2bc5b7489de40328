from flask import Flask, send_file, send_from_directory, current_app
from .config import config_by_name
from .extensions import db, migrate, jwt
from .api.v1 import v1_bp
from .commands import register_commands
from .errors import register_error_handlers
from .utils.media import upload_root
from flask_swagger_ui import get_swaggerui_blueprint
import os

# Register models with the metadata before migrations or create_all run
from .models import (  # noqa: F401
    blog_post,
    code_snippet,
    contact_message,
    project,
    quote_request,
    service,
    service_area,
    site_setting,
    user,
)


def create_app(config_name: str = "development", overrides=None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)
    register_commands(app)

    # -------------------------------------------------
    # Uploaded files
    # -------------------------------------------------
    @app.route("/uploads/<bucket>/<path:name>", methods=["GET"], endpoint="uploaded_file")
    def serve_upload(bucket, name):
        return send_from_directory(os.path.join(upload_root(), bucket), name)

    # -------------------------------------------------
    # Serve OpenAPI YAML
    # -------------------------------------------------
    @app.route("/openapi/portfolio.yaml", methods=["GET"], endpoint="openapi_portfolio")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/portfolio.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Portfolio API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    app.logger.info(f"Portfolio API ready ({config_name})")
    return app
