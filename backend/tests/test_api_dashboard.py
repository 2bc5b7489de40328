def test_dashboard_counts(client, admin_headers, create):
    create("projects", title="P1", description="d", published=True)
    create("projects", title="P2", description="d")
    create("blog", title="B1", excerpt="e", published=True)
    create("snippets", title="S1", code="x", language="Python")
    client.post("/api/v1/contact", json={"name": "Ada", "email": "a@example.com", "message": "Hi"})

    body = client.get("/api/v1/admin/dashboard", headers=admin_headers).get_json()

    assert body["stats"] == {
        "total_projects": 2,
        "published_projects": 1,
        "total_posts": 1,
        "published_posts": 1,
        "total_snippets": 1,
        "total_messages": 1,
        "unread_messages": 1,
    }


def test_recent_activity_merges_latest_three_of_each(client, admin_headers, create):
    for index in range(4):
        create("projects", title=f"P{index}", description="d")
        create("blog", title=f"B{index}", excerpt="e")
        client.post("/api/v1/contact", json={"name": f"N{index}", "email": "a@example.com", "message": "Hi"})

    activity = client.get("/api/v1/admin/dashboard", headers=admin_headers).get_json()["recent_activity"]

    assert len(activity) == 9
    assert [item["type"] for item in activity].count("project") == 3
    assert activity[0]["title"] == "Message from N3"
    assert activity == sorted(activity, key=lambda item: item["created_at"], reverse=True)


def test_dashboard_is_admin_only(client):
    assert client.get("/api/v1/admin/dashboard").status_code == 401
