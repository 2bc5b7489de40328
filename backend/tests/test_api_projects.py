def test_admin_routes_need_a_token(client):
    assert client.get("/api/v1/admin/projects").status_code == 401


def test_create_derives_slug_and_defaults(create):
    project = create("projects", title="Shopify Store Build", description="A store")

    assert project["slug"] == "shopify-store-build"
    assert project["status"] == "completed"
    assert project["technologies"] == []
    assert project["published"] is False


def test_create_requires_description(client, admin_headers):
    response = client.post(
        "/api/v1/admin/projects",
        json={"title": "No description"},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.get_json()["error"] == "InvariantViolation"


def test_invalid_status_is_rejected(client, admin_headers):
    response = client.post(
        "/api/v1/admin/projects",
        json={"title": "T", "description": "d", "status": "archived"},
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_content_is_sanitized_on_save(create):
    project = create(
        "projects",
        title="T",
        description="d",
        content='<p onclick="x()">Hi</p><script>bad()</script>',
    )
    assert project["content"].startswith("<p>Hi</p>")
    assert "script" not in project["content"]


def test_public_listing_hides_unpublished(client, create):
    create("projects", title="Draft", description="d")
    create("projects", title="Live", description="d", published=True, category="Web")

    body = client.get("/api/v1/projects").get_json()

    assert [p["title"] for p in body["items"]] == ["Live"]
    assert body["categories"] == ["All", "Web"]
    assert "published" not in body["items"][0]


def test_public_category_matches_subcategory(client, create):
    create("projects", title="A", description="d", published=True, category="Web", subcategory="Shopify")
    create("projects", title="B", description="d", published=True, category="Mobile")

    body = client.get("/api/v1/projects?category=shopify").get_json()
    assert [p["title"] for p in body["items"]] == ["A"]


def test_public_search_covers_technologies(client, create):
    create("projects", title="A", description="d", published=True, technologies=["React", "Node"])
    create("projects", title="B", description="d", published=True, technologies=["Django"])

    body = client.get("/api/v1/projects?search=react").get_json()
    assert [p["title"] for p in body["items"]] == ["A"]


def test_admin_search_and_category(client, admin_headers, create):
    create("projects", title="Alpha", description="first", category="Web")
    create("projects", title="Beta", description="second", category="Mobile")

    body = client.get("/api/v1/admin/projects?search=SECOND", headers=admin_headers).get_json()
    assert [p["title"] for p in body["items"]] == ["Beta"]

    body = client.get("/api/v1/admin/projects?category=All", headers=admin_headers).get_json()
    assert len(body["items"]) == 2


def test_featured_is_capped_at_three(client, create):
    for index in range(4):
        create("projects", title=f"P{index}", description="d", published=True, featured=True)
    create("projects", title="Hidden", description="d", featured=True)

    body = client.get("/api/v1/projects/featured").get_json()
    assert len(body["items"]) == 3
    assert "Hidden" not in [p["title"] for p in body["items"]]


def test_toggle_publishes_and_unpublishes(client, admin_headers, create):
    project = create("projects", title="T", description="d")
    url = f"/api/v1/admin/projects/{project['id']}/toggle"

    assert client.post(url, headers=admin_headers).get_json()["published"] is True
    assert client.get("/api/v1/projects/t").status_code == 200

    assert client.post(url, headers=admin_headers).get_json()["published"] is False
    assert client.get("/api/v1/projects/t").status_code == 404


def test_update_and_delete(client, admin_headers, create):
    project = create("projects", title="Old title", description="d")
    url = f"/api/v1/admin/projects/{project['id']}"

    response = client.put(url, json={"title": "New title", "date_completed": "2024-03-01"}, headers=admin_headers)
    body = response.get_json()
    assert body["slug"] == "new-title"
    assert body["date_completed"] == "2024-03-01"

    assert client.delete(url, headers=admin_headers).status_code == 200
    assert client.get(url, headers=admin_headers).status_code == 404


def test_bad_date_is_rejected(client, admin_headers, create):
    project = create("projects", title="T", description="d")
    response = client.put(
        f"/api/v1/admin/projects/{project['id']}",
        json={"date_completed": "not a date"},
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_detail_carries_metadata(client, create):
    create(
        "projects",
        title="Shop",
        description="A store",
        published=True,
        live_url="https://shop.example.com",
    )

    body = client.get("/api/v1/projects/shop").get_json()

    assert body["item"]["title"] == "Shop"
    assert body["meta"]["title"] == "Shop | Hamza Tahir"
    assert body["meta"]["canonical"].endswith("/projects/shop")
    assert body["structured_data"]["@type"] == "CreativeWork"
    assert body["structured_data"]["workExample"]["url"] == "https://shop.example.com"


def test_unknown_slug_is_json_404(client):
    response = client.get("/api/v1/projects/missing")
    assert response.status_code == 404
    assert response.get_json()["error"] == "Not Found"


def test_disabled_feature_is_forbidden(client, admin_headers):
    client.put("/api/v1/admin/settings/enable_projects", json={"value": False}, headers=admin_headers)
    assert client.get("/api/v1/projects").status_code == 403


def test_unknown_slug_carries_not_found_metadata(client):
    body = client.get("/api/v1/projects/missing").get_json()

    assert body["meta"]["title"].startswith("Project Not Found")
    assert body["meta"]["canonical"].endswith("/")


def test_wrong_value_types_are_rejected(client, admin_headers):
    for payload in (
        {"title": 123, "description": "d"},
        {"title": "T", "description": "d", "content": 5},
        {"title": "T", "description": "d", "published": "true"},
    ):
        response = client.post("/api/v1/admin/projects", json=payload, headers=admin_headers)
        assert response.status_code == 400, payload
        assert response.get_json()["error"] == "InvariantViolation"


def test_update_rejects_wrong_value_types(client, admin_headers, create):
    project = create("projects", title="T", description="d")
    response = client.put(
        f"/api/v1/admin/projects/{project['id']}",
        json={"featured": "yes"},
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_public_sort_by_title_and_featured(client, create):
    create("projects", title="beta", description="d", published=True)
    create("projects", title="Alpha", description="d", published=True, featured=True)
    create("projects", title="Gamma", description="d", published=True)

    body = client.get("/api/v1/projects?sort=title").get_json()
    assert [p["title"] for p in body["items"]] == ["Alpha", "beta", "Gamma"]

    body = client.get("/api/v1/projects?sort=featured").get_json()
    assert [p["title"] for p in body["items"]] == ["Alpha", "Gamma", "beta"]

    body = client.get("/api/v1/projects?sort=date").get_json()
    assert [p["title"] for p in body["items"]] == ["Gamma", "Alpha", "beta"]


def test_unknown_sort_is_rejected(client):
    response = client.get("/api/v1/projects?sort=popularity")
    assert response.status_code == 400
    assert "popularity" in response.get_json()["message"]
