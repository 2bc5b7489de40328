from flask import jsonify, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from portfolio.extensions import db
from . import v1_bp

@v1_bp.route('/health', methods=['GET'])
def health_check():
    try:
        db.session.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Health check could not reach the database: {e}")
        database = "unavailable"

    status_code = 200 if database == "ok" else 503
    return jsonify({
        "status": "ok" if database == "ok" else "degraded",
        "service": "portfolio-api",
        "database": database,
    }), status_code
