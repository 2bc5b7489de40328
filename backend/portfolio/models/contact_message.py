from portfolio.extensions import db
from .base import BaseModel

MESSAGE_STATUSES = ("unread", "read", "replied")

class ContactMessage(BaseModel):
    __tablename__ = 'contact_messages'

    name = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(200), nullable=False)
    phone = db.Column(db.String(50), nullable=True)
    company = db.Column(db.String(200), nullable=True)
    subject = db.Column(db.String(300), nullable=True)
    message = db.Column(db.Text, nullable=False)
    replied = db.Column(db.Boolean, default=False)
    status = db.Column(db.String(20), default='unread', index=True)
