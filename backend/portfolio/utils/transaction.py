from contextlib import contextmanager
from flask import current_app
from portfolio.extensions import db

@contextmanager
def transactional():
    """Context manager for database transactions."""
    try:
        yield
        db.session.commit()
    except Exception as exc:
        db.session.rollback()
        current_app.logger.error(f"Transaction rolled back: {exc}")
        raise
