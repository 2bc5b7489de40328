from flask import jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from portfolio.domain.invariants.exceptions import InvariantViolation
from portfolio.extensions import db

def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": "InvariantViolation",
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        response = jsonify({
            "error": error.name,
            "message": error.description
        })
        response.status_code = error.code or 500
        return response

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        db.session.rollback()
        current_app.logger.error(f"Database error: {error}")
        response = jsonify({
            "error": "DatabaseError",
            "message": "The data service could not complete the request"
        })
        response.status_code = 500
        return response
