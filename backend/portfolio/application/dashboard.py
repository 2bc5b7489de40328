# portfolio/application/dashboard.py
from portfolio.models.blog_post import BlogPost
from portfolio.models.code_snippet import CodeSnippet
from portfolio.models.contact_message import ContactMessage
from portfolio.models.project import Project
from portfolio.utils.dates import isoformat, normalize_ts

RECENT_PER_TYPE = 3
RECENT_LIMIT = 10


def dashboard_stats():
    return {
        "total_projects": Project.query.count(),
        "published_projects": Project.query.filter_by(published=True).count(),
        "total_posts": BlogPost.query.count(),
        "published_posts": BlogPost.query.filter_by(published=True).count(),
        "total_snippets": CodeSnippet.query.count(),
        "total_messages": ContactMessage.query.count(),
        "unread_messages": ContactMessage.query.filter_by(status="unread").count(),
    }


def _latest(model):
    return model.query.order_by(model.created_at.desc()).limit(RECENT_PER_TYPE).all()


def recent_activity():
    """Latest projects, posts and messages merged, newest first."""
    activity = [
        {"type": "project", "id": p.id, "title": p.title, "created_at": p.created_at}
        for p in _latest(Project)
    ] + [
        {"type": "blog", "id": b.id, "title": b.title, "created_at": b.created_at}
        for b in _latest(BlogPost)
    ] + [
        {
            "type": "message",
            "id": m.id,
            "title": f"Message from {m.name}",
            "created_at": m.created_at,
        }
        for m in _latest(ContactMessage)
    ]

    activity.sort(key=lambda item: normalize_ts(item["created_at"]), reverse=True)
    return [
        {**item, "created_at": isoformat(item["created_at"])}
        for item in activity[:RECENT_LIMIT]
    ]


def dashboard():
    return {"stats": dashboard_stats(), "recent_activity": recent_activity()}
