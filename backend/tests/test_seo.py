from portfolio.seo.metadata import blog_post_metadata, full_title, project_metadata, service_area_metadata
from portfolio.seo.structured_data import blog_posting, city_name, creative_work, local_business

SITE = {
    "url": "https://hamzatahir.dev",
    "author": "Hamza Tahir",
    "name": "Hamza Tahir - Full-Stack Developer",
    "twitter_creator": "@hamzatahir",
    "default_og_image": "/og-image.jpg",
    "email": "hello@hamzatahir.com",
}

POST = {
    "title": "Flask tips",
    "slug": "flask-tips",
    "excerpt": "Short tips",
    "content": "<p>one two</p><p>three</p>",
    "category": "Python",
    "tags": ["flask", "web"],
    "published_at": "2024-01-01T00:00:00+00:00",
    "created_at": "2023-12-30T00:00:00+00:00",
    "updated_at": "2024-01-02T00:00:00+00:00",
}


def test_title_suffix_unless_author_present():
    assert full_title("Projects", "Hamza Tahir") == "Projects | Hamza Tahir"
    assert full_title("Hamza Tahir - Developer", "Hamza Tahir") == "Hamza Tahir - Developer"


def test_project_metadata_defaults():
    meta = project_metadata(SITE, {
        "title": "Shop",
        "slug": "shop",
        "description": "A store",
        "technologies": ["Shopify", "Liquid"],
        "category": "E-commerce",
    })

    assert meta["title"] == "Shop | Hamza Tahir"
    assert meta["canonical"] == "https://hamzatahir.dev/projects/shop"
    assert meta["open_graph"]["image"] == "/og-image.jpg"
    assert meta["twitter"]["creator"] == "@hamzatahir"
    assert meta["keywords"] == "Shopify, Liquid, E-commerce"
    assert "article" not in meta


def test_blog_metadata_is_an_article():
    meta = blog_post_metadata(SITE, POST)

    assert meta["title"] == "Flask tips - Blog | Hamza Tahir"
    assert meta["open_graph"]["type"] == "article"
    assert meta["article"]["published_time"] == POST["published_at"]
    assert meta["article"]["tags"] == ["flask", "web"]


def test_blog_posting_counts_words_of_plain_text():
    data = blog_posting(SITE, POST)
    assert data["@type"] == "BlogPosting"
    assert data["wordCount"] == 3
    assert data["mainEntityOfPage"]["@id"] == "https://hamzatahir.dev/blog/flask-tips"


def test_creative_work_drops_empty_values():
    data = creative_work(SITE, {"title": "Shop", "slug": "shop", "description": "d"})
    assert data["@type"] == "CreativeWork"
    assert "image" not in data
    assert "workExample" not in data


def test_service_area_pages():
    area = {"slug": "dubai", "title": "Shopify Expert in Dubai", "meta_description": "Local"}

    assert city_name(area) == "Dubai"
    assert city_name({"slug": "remote", "title": "Shopify Expert"}) == "remote"
    assert service_area_metadata(SITE, area)["canonical"] == "https://hamzatahir.dev/shopify-expert-dubai"

    business = local_business(SITE, area)
    assert business["@type"] == "LocalBusiness"
    assert business["address"]["addressLocality"] == "Dubai"
