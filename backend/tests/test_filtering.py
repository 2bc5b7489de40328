from portfolio.utils.filtering import facet_values, filter_records, matches_facet

POSTS = [
    {"title": "Flask tips", "excerpt": "Blueprints", "category": "Python", "tags": ["web"]},
    {"title": "CSS grid", "excerpt": "Layouts", "category": "Frontend", "tags": []},
    {"title": "Async IO", "excerpt": "More FLASK internals", "category": "Python", "tags": []},
    {"title": "Docker", "excerpt": "Images", "category": "DevOps", "tags": ["ops"]},
    {"title": "Testing", "excerpt": "pytest", "category": "Python", "tags": ["quality"]},
]


def test_search_is_case_insensitive_and_keeps_order():
    result = filter_records(POSTS, search="flask", search_fields=("title", "excerpt"))
    assert [post["title"] for post in result] == ["Flask tips", "Async IO"]


def test_search_matches_list_elements():
    result = filter_records(POSTS, search="OPS", search_fields=("title", "tags"))
    assert [post["title"] for post in result] == ["Docker"]


def test_all_or_empty_facet_disables_it():
    for value in ("All", "", None):
        result = filter_records(POSTS, facets={"category": (value, ("category",))})
        assert len(result) == 5


def test_facet_and_search_combine():
    result = filter_records(
        POSTS,
        search="t",
        search_fields=("title",),
        facets={"category": ("python", ("category",))},
    )
    assert [post["title"] for post in result] == ["Flask tips", "Testing"]


def test_facet_checks_every_listed_field():
    project = {"category": "Web", "subcategory": "Shopify"}
    assert matches_facet(project, "Shopify", ("category", "subcategory"))
    assert not matches_facet(project, "Mobile", ("category", "subcategory"))


def test_facet_values_are_unique_in_first_seen_order():
    assert facet_values(POSTS, "category") == ["All", "Python", "Frontend", "DevOps"]
