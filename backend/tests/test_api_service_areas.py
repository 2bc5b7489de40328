AREA = {
    "slug": "Dubai City",
    "title": "Shopify Expert in Dubai",
    "meta_description": "Shopify development in Dubai",
    "faq": [{"question": "Do you work remotely?", "answer": "Yes"}],
    "local_expertise": ["Arabic storefronts"],
}


def test_slug_is_cleaned_not_derived(client, admin_headers, create):
    area = create("service-areas", **AREA)
    assert area["slug"] == "dubai-city"
    assert area["active"] is True

    response = client.post(
        "/api/v1/admin/service-areas",
        json={"title": "Shopify Expert in Paris"},
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_faq_entries_need_question_and_answer(client, admin_headers):
    response = client.post(
        "/api/v1/admin/service-areas",
        json={**AREA, "faq": [{"question": "Only a question"}]},
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_public_detail_is_a_local_business(client, create):
    create("service-areas", **AREA)

    body = client.get("/api/v1/service-areas/dubai-city").get_json()

    assert body["item"]["faq"][0]["answer"] == "Yes"
    assert "active" not in body["item"]
    assert body["meta"]["canonical"].endswith("/shopify-expert-dubai-city")
    assert body["structured_data"]["@type"] == "LocalBusiness"
    assert body["structured_data"]["serviceArea"] == "Dubai"


def test_toggle_is_persisted(client, admin_headers, create):
    area = create("service-areas", **AREA)

    body = client.post(f"/api/v1/admin/service-areas/{area['id']}/toggle", headers=admin_headers).get_json()
    assert body["active"] is False

    assert client.get("/api/v1/service-areas").get_json()["items"] == []
    assert client.get("/api/v1/service-areas/dubai-city").status_code == 404

    admin = client.get(f"/api/v1/admin/service-areas/{area['id']}", headers=admin_headers).get_json()
    assert admin["active"] is False


def test_delete_is_persisted(client, admin_headers, create):
    area = create("service-areas", **AREA)

    client.delete(f"/api/v1/admin/service-areas/{area['id']}", headers=admin_headers)

    assert client.get("/api/v1/admin/service-areas", headers=admin_headers).get_json()["items"] == []


def test_unknown_area_carries_not_found_metadata(client):
    response = client.get("/api/v1/service-areas/nowhere")

    assert response.status_code == 404
    assert response.get_json()["meta"]["title"].startswith("Service Area Not Found")
