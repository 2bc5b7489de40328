from portfolio.extensions import db
from .base import BaseModel, PublishableMixin

PROJECT_STATUSES = ("completed", "in-progress", "on-hold", "cancelled")

class Project(BaseModel, PublishableMixin):
    __tablename__ = 'projects'

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, index=True)
    description = db.Column(db.Text, nullable=False, default="")
    content = db.Column(db.Text, nullable=True)
    image_url = db.Column(db.Text, nullable=True)  # public URL or inline data URL

    technologies = db.Column(db.JSON, default=list)
    category = db.Column(db.String(100), nullable=True, index=True)
    subcategory = db.Column(db.String(100), nullable=True)
    status = db.Column(db.String(50), default='completed')

    client = db.Column(db.String(200), nullable=True)
    duration = db.Column(db.String(100), nullable=True)
    live_url = db.Column(db.String(512), nullable=True)
    github_url = db.Column(db.String(512), nullable=True)
    highlights = db.Column(db.JSON, default=list)
    date_completed = db.Column(db.Date, nullable=True)
    featured = db.Column(db.Boolean, default=False)

    meta_title = db.Column(db.String(200), nullable=True)
    meta_description = db.Column(db.String(500), nullable=True)
