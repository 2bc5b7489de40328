from portfolio.extensions import db
from .base import BaseModel

SETTING_TYPES = ("string", "boolean", "json")

class SiteSetting(BaseModel):
    __tablename__ = 'site_settings'

    key = db.Column(db.String(100), unique=True, nullable=False, index=True)
    value = db.Column(db.Text, nullable=True)
    type = db.Column(db.String(20), nullable=False, default='string')
    description = db.Column(db.String(300), nullable=True)
