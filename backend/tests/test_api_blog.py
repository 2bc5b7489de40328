from portfolio.extensions import db
from portfolio.models.blog_post import BlogPost

WORDS_400 = "<p>" + " ".join(["word"] * 400) + "</p>"


def test_read_time_is_estimated_from_content(create):
    post = create("blog", title="Long read", excerpt="e", content=WORDS_400)

    assert post["slug"] == "long-read"
    assert post["read_time"] == 2
    assert post["published_at"] is None


def test_explicit_read_time_wins(create):
    post = create("blog", title="T", excerpt="e", content=WORDS_400, read_time=7)
    assert post["read_time"] == 7


def test_clients_cannot_set_published_at(create):
    post = create("blog", title="T", excerpt="e", published_at="2020-01-01T00:00:00Z")
    assert post["published_at"] is None


def test_publish_on_create_stamps_published_at(create):
    post = create("blog", title="T", excerpt="e", published=True)
    assert post["published_at"] is not None


def test_toggle_sets_published_at_only_when_publishing(client, admin_headers, create):
    post = create("blog", title="T", excerpt="e")
    url = f"/api/v1/admin/blog/{post['id']}/toggle"

    published = client.post(url, headers=admin_headers).get_json()
    assert published["published"] is True
    assert published["published_at"] is not None

    unpublished = client.post(url, headers=admin_headers).get_json()
    assert unpublished["published"] is False
    assert unpublished["published_at"] == published["published_at"]


def test_update_publishing_stamps_once(client, admin_headers, create):
    post = create("blog", title="T", excerpt="e")
    url = f"/api/v1/admin/blog/{post['id']}"

    first = client.put(url, json={"published": True}, headers=admin_headers).get_json()
    second = client.put(url, json={"published": True, "excerpt": "new"}, headers=admin_headers).get_json()

    assert first["published_at"] is not None
    assert second["published_at"] == first["published_at"]


def test_archive_pages_nine_at_a_time(client, create):
    for index in range(20):
        create("blog", title=f"Post {index}", excerpt="e", published=True)

    sizes = []
    for page in (1, 2, 3):
        body = client.get(f"/api/v1/blog?page={page}").get_json()
        sizes.append(len(body["items"]))
        assert body["pagination"]["total"] == 20
        assert body["pagination"]["total_pages"] == 3

    assert sizes == [9, 9, 2]


def test_archive_is_newest_published_first(client, admin_headers, create):
    older = create("blog", title="Older", excerpt="e")
    newer = create("blog", title="Newer", excerpt="e")

    client.post(f"/api/v1/admin/blog/{older['id']}/toggle", headers=admin_headers)
    client.post(f"/api/v1/admin/blog/{newer['id']}/toggle", headers=admin_headers)

    body = client.get("/api/v1/blog").get_json()
    assert [p["title"] for p in body["items"]] == ["Newer", "Older"]
    assert "content" not in body["items"][0]


def test_archive_filters_before_paging(client, create):
    create("blog", title="Flask one", excerpt="e", published=True, category="Python")
    create("blog", title="CSS", excerpt="e", published=True, category="Frontend", tags=["flask"])
    create("blog", title="Other", excerpt="e", published=True, category="Python")

    body = client.get("/api/v1/blog?search=flask").get_json()
    assert sorted(p["title"] for p in body["items"]) == ["CSS", "Flask one"]
    assert body["pagination"]["total"] == 2

    body = client.get("/api/v1/blog?category=Frontend").get_json()
    assert [p["title"] for p in body["items"]] == ["CSS"]
    assert set(body["categories"]) == {"All", "Python", "Frontend"}


def test_bad_page_number(client):
    assert client.get("/api/v1/blog?page=0").status_code == 400
    assert client.get("/api/v1/blog?page=two").status_code == 400


def test_detail_is_an_article(client, create):
    create("blog", title="Flask tips", excerpt="Short", content="<p>a b c</p>", published=True, tags=["flask"])

    body = client.get("/api/v1/blog/flask-tips").get_json()

    assert body["item"]["content"] == "<p>a b c</p>"
    assert body["meta"]["open_graph"]["type"] == "article"
    assert body["meta"]["article"]["tags"] == ["flask"]
    assert body["structured_data"]["wordCount"] == 3


def test_unpublished_post_is_hidden(client, create):
    create("blog", title="Secret", excerpt="e")
    assert client.get("/api/v1/blog/secret").status_code == 404


def test_admin_listing_includes_drafts(client, admin_headers, create):
    create("blog", title="Draft", excerpt="e", category="Python")

    body = client.get("/api/v1/admin/blog", headers=admin_headers).get_json()
    assert [p["title"] for p in body["items"]] == ["Draft"]
    assert body["items"][0]["published"] is False


def test_delete_removes_the_row(client, admin_headers, create):
    post = create("blog", title="Gone", excerpt="e")

    client.delete(f"/api/v1/admin/blog/{post['id']}", headers=admin_headers)

    assert db.session.get(BlogPost, post["id"]) is None


def test_blog_can_be_switched_off(client, admin_headers):
    client.put("/api/v1/admin/settings", json={"enable_blog": False}, headers=admin_headers)
    assert client.get("/api/v1/blog").status_code == 403


def test_read_time_ignores_markup(client, admin_headers, create):
    content = "<ul>" + "".join("<li>word</li>" for _ in range(400)) + "</ul>"
    post = create("blog", title="List", excerpt="e", content=content)

    preview = client.post(
        "/api/v1/admin/editor/preview",
        json={"html": content},
        headers=admin_headers,
    ).get_json()

    assert preview["word_count"] == 400
    assert post["read_time"] == 2
    assert post["read_time"] == preview["read_time"]


def test_read_time_must_be_an_integer(client, admin_headers):
    response = client.post(
        "/api/v1/admin/blog",
        json={"title": "T", "excerpt": "e", "read_time": "5"},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert "read_time" in response.get_json()["message"]


def test_latest_posts_split_out_first_featured(client, create):
    for index in range(5):
        create("blog", title=f"Post {index}", excerpt="e", published=True, category="News")
    create("blog", title="Star", excerpt="e", published=True, featured=True, category="Guides")
    create("blog", title="Draft", excerpt="e", featured=True)

    body = client.get("/api/v1/blog/latest").get_json()

    assert body["featured"]["title"] == "Star"
    assert "Star" not in [p["title"] for p in body["items"]]
    assert len(body["items"]) == 5
    assert body["categories"] == ["All", "Guides", "News"]


def test_latest_posts_are_capped_and_filterable(client, create):
    for index in range(7):
        create("blog", title=f"Post {index}", excerpt="e", published=True, category="News")

    body = client.get("/api/v1/blog/latest").get_json()
    assert len(body["items"]) == 6
    assert body["featured"] is None

    body = client.get("/api/v1/blog/latest?search=post%206").get_json()
    assert [p["title"] for p in body["items"]] == ["Post 6"]

    body = client.get("/api/v1/blog/latest?category=Guides").get_json()
    assert body["items"] == []


def test_unknown_post_carries_not_found_metadata(client):
    response = client.get("/api/v1/blog/missing")

    assert response.status_code == 404
    assert response.get_json()["meta"]["title"].startswith("Blog Post Not Found")
