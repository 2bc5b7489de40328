from portfolio.extensions import db
from .base import BaseModel, PublishableMixin

class Service(BaseModel, PublishableMixin):
    __tablename__ = 'services'

    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    icon = db.Column(db.String(20), nullable=True)  # emoji
    features = db.Column(db.JSON, default=list)
    price = db.Column(db.String(100), nullable=True)
    order_index = db.Column(db.Integer, default=0, index=True)
