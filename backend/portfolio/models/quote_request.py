from portfolio.extensions import db
from .base import BaseModel

QUOTE_STATUSES = ("pending", "reviewed", "quoted", "accepted", "rejected")

class QuoteRequest(BaseModel):
    __tablename__ = 'quote_requests'

    name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(200), nullable=False)
    company = db.Column(db.String(200), nullable=True)
    phone = db.Column(db.String(50), nullable=True)
    project_type = db.Column(db.String(100), nullable=False)
    budget = db.Column(db.String(50), nullable=True)
    timeline = db.Column(db.String(50), nullable=True)
    description = db.Column(db.Text, nullable=False)
    requirements = db.Column(db.Text, nullable=True)
    status = db.Column(db.String(20), default='pending', index=True)
