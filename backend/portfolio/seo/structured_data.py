# portfolio/seo/structured_data.py
from typing import Any, Dict

from portfolio.richtext.editor import content_text
from portfolio.utils.text import count_words

SCHEMA_CONTEXT = "https://schema.org"
SERVICE_AREA_PRICE_RANGE = "$500-$15000"


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


def _person(site):
    return {"@type": "Person", "name": site["author"], "url": site["url"]}


def creative_work(site, project):
    url = f"{site['url']}/projects/{project['slug']}"
    return _compact({
        "@context": SCHEMA_CONTEXT,
        "@type": "CreativeWork",
        "name": project["title"],
        "description": project["description"],
        "image": project.get("image_url"),
        "url": url,
        "author": _person(site),
        "dateCreated": project.get("created_at"),
        "dateModified": project.get("updated_at"),
        "keywords": ", ".join(project.get("technologies") or []),
        "genre": project.get("category"),
        "workExample": (
            {"@type": "WebSite", "url": project["live_url"]}
            if project.get("live_url") else None
        ),
    })


def blog_posting(site, post):
    url = f"{site['url']}/blog/{post['slug']}"
    return _compact({
        "@context": SCHEMA_CONTEXT,
        "@type": "BlogPosting",
        "headline": post["title"],
        "description": post["excerpt"],
        "image": post.get("image_url"),
        "url": url,
        "datePublished": post.get("published_at") or post.get("created_at"),
        "dateModified": post.get("updated_at"),
        "author": _person(site),
        "publisher": _person(site),
        "keywords": ", ".join(post.get("tags") or []),
        "articleSection": post.get("category"),
        "wordCount": count_words(content_text(post.get("content"))),
        "mainEntityOfPage": {"@type": "WebPage", "@id": url},
    })


def source_code(site, snippet):
    return _compact({
        "@context": SCHEMA_CONTEXT,
        "@type": "SoftwareSourceCode",
        "name": snippet["title"],
        "description": snippet["description"],
        "url": f"{site['url']}/snippets/{snippet['slug']}",
        "dateCreated": snippet.get("created_at"),
        "dateModified": snippet.get("updated_at"),
        "author": _person(site),
        "programmingLanguage": snippet.get("language"),
        "keywords": ", ".join(snippet.get("tags") or []),
        "codeRepository": f"{site['url']}/snippets",
    })


def city_name(area) -> str:
    # "Shopify Expert in Dubai" -> "Dubai"
    parts = area["title"].split(" in ", 1)
    return parts[1] if len(parts) > 1 and parts[1] else area["slug"]


def local_business(site, area):
    city = city_name(area)
    return _compact({
        "@context": SCHEMA_CONTEXT,
        "@type": "LocalBusiness",
        "name": area["title"],
        "description": area.get("meta_description"),
        "address": {"@type": "PostalAddress", "addressLocality": city},
        "serviceArea": city,
        "priceRange": SERVICE_AREA_PRICE_RANGE,
        "email": site["email"],
    })
