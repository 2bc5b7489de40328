# portfolio/seo/metadata.py
from typing import Any, Dict, Iterable, Optional


def full_title(title: str, author: str) -> str:
    return title if author in title else f"{title} | {author}"


def build_metadata(
    site: Dict[str, str],
    *,
    title: str,
    description: str,
    path: str,
    image: Optional[str] = None,
    og_type: str = "website",
    published_time: Optional[str] = None,
    modified_time: Optional[str] = None,
    tags: Iterable[str] = (),
    keywords: Iterable[str] = (),
) -> Dict[str, Any]:
    """
    Page metadata: title, description, canonical URL, Open Graph and
    Twitter card values, plus article times and tags for articles.
    """
    url = f"{site['url']}{path}"
    page_title = full_title(title, site["author"])
    og_image = image or site["default_og_image"]
    tags = [tag for tag in tags if tag]
    keywords = [keyword for keyword in keywords if keyword] or tags

    meta: Dict[str, Any] = {
        "title": page_title,
        "description": description,
        "keywords": ", ".join(keywords) or None,
        "author": site["author"],
        "robots": "index, follow",
        "canonical": url,
        "open_graph": {
            "type": og_type,
            "url": url,
            "title": page_title,
            "description": description,
            "image": og_image,
            "site_name": site["name"],
            "locale": "en_US",
        },
        "twitter": {
            "card": "summary_large_image",
            "url": url,
            "title": page_title,
            "description": description,
            "image": og_image,
            "creator": site["twitter_creator"],
        },
    }

    if og_type == "article":
        meta["article"] = {
            "published_time": published_time,
            "modified_time": modified_time,
            "author": site["author"],
            "tags": tags,
        }

    return meta


def project_metadata(site, project):
    return build_metadata(
        site,
        title=project.get("meta_title") or project["title"],
        description=project.get("meta_description") or project["description"],
        path=f"/projects/{project['slug']}",
        image=project.get("image_url"),
        keywords=[*(project.get("technologies") or []), project.get("category")],
    )


def blog_post_metadata(site, post):
    return build_metadata(
        site,
        title=post.get("meta_title") or f"{post['title']} - Blog",
        description=post.get("meta_description") or post["excerpt"],
        path=f"/blog/{post['slug']}",
        image=post.get("image_url"),
        og_type="article",
        published_time=post.get("published_at") or post.get("created_at"),
        modified_time=post.get("updated_at"),
        tags=post.get("tags") or [],
        keywords=[
            post.get("category"),
            *(post.get("tags") or []),
            "web development",
            "blog post",
            "tutorial",
            site["author"],
        ],
    )


def snippet_metadata(site, snippet):
    return build_metadata(
        site,
        title=f"{snippet['title']} - Code Snippet",
        description=snippet["description"],
        path=f"/snippets/{snippet['slug']}",
        og_type="article",
        published_time=snippet.get("created_at"),
        modified_time=snippet.get("updated_at"),
        tags=snippet.get("tags") or [],
        keywords=[snippet.get("language"), *(snippet.get("tags") or [])],
    )


def service_area_metadata(site, area):
    return build_metadata(
        site,
        title=area.get("meta_title") or area["title"],
        description=area.get("meta_description") or area.get("intro_text") or "",
        path=f"/shopify-expert-{area['slug']}",
        image=area.get("hero_image"),
    )


def not_found_metadata(site, kind: str):
    return build_metadata(
        site,
        title=f"{kind} Not Found",
        description=f"The requested {kind.lower()} could not be found.",
        path="/",
    )
