from portfolio.extensions import db
from .base import BaseModel

class ServiceArea(BaseModel):
    __tablename__ = 'service_areas'

    slug = db.Column(db.String(200), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    meta_title = db.Column(db.String(200), nullable=True)
    meta_description = db.Column(db.String(500), nullable=True)
    intro_text = db.Column(db.Text, nullable=True)
    hero_image = db.Column(db.Text, nullable=True)
    faq = db.Column(db.JSON, default=list)  # [{"question": ..., "answer": ...}]
    local_expertise = db.Column(db.JSON, default=list)
    active = db.Column(db.Boolean, default=True, index=True)
