from portfolio.extensions import db
from .base import BaseModel, PublishableMixin

SNIPPET_DIFFICULTIES = ("beginner", "intermediate", "advanced")
SNIPPET_USAGE_FREQUENCIES = ("low", "medium", "high")

class CodeSnippet(BaseModel, PublishableMixin):
    __tablename__ = 'code_snippets'

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, index=True)
    description = db.Column(db.Text, nullable=False, default="")
    code = db.Column(db.Text, nullable=False, default="")
    language = db.Column(db.String(50), nullable=True, index=True)
    category = db.Column(db.String(100), nullable=True)
    tags = db.Column(db.JSON, default=list)
    difficulty = db.Column(db.String(20), default='beginner')
    usage_frequency = db.Column(db.String(20), default='medium')
    featured = db.Column(db.Boolean, default=False)
