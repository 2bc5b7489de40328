from portfolio.extensions import db
from .base import BaseModel, PublishableMixin

class BlogPost(BaseModel, PublishableMixin):
    __tablename__ = 'blog_posts'

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, index=True)
    excerpt = db.Column(db.Text, nullable=False, default="")
    content = db.Column(db.Text, nullable=True)
    image_url = db.Column(db.Text, nullable=True)

    category = db.Column(db.String(100), nullable=True, index=True)
    tags = db.Column(db.JSON, default=list)
    read_time = db.Column(db.Integer, default=5)
    featured = db.Column(db.Boolean, default=False)

    meta_title = db.Column(db.String(200), nullable=True)
    meta_description = db.Column(db.String(500), nullable=True)

    # Set on the unpublished -> published transition only
    published_at = db.Column(db.DateTime(timezone=True), nullable=True, index=True)
