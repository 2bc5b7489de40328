from portfolio.application.settings import (
    infer_type,
    is_feature_enabled,
    load_site_settings,
    save_settings,
    seed_settings,
    update_setting,
)
from portfolio.extensions import db
from portfolio.models.site_setting import SiteSetting


def _add(key, value, setting_type):
    db.session.add(SiteSetting(key=key, value=value, type=setting_type))
    db.session.commit()


def test_load_parses_by_type(app):
    _add("site_title", "My Site", "string")
    _add("enable_blog", "true", "boolean")
    _add("social_links", '{"github": "https://github.com/me"}', "json")

    result = load_site_settings()

    assert result["error"] is None
    assert result["settings"] == {
        "enable_blog": True,
        "site_title": "My Site",
        "social_links": {"github": "https://github.com/me"},
    }


def test_invalid_json_is_left_raw(app):
    _add("broken", "{not json", "json")
    assert load_site_settings()["settings"]["broken"] == "{not json"


def test_infer_type():
    assert infer_type(True) == "boolean"
    assert infer_type(["a"]) == "json"
    assert infer_type({"a": 1}) == "json"
    assert infer_type("text") == "string"
    assert infer_type(3) == "string"


def test_save_settings_upserts(app):
    _add("site_title", "Old", "string")

    result = save_settings({"site_title": "New", "enable_blog": False, "nav": ["home", "blog"]})

    assert result["settings"] == {"site_title": "New", "enable_blog": False, "nav": ["home", "blog"]}
    assert SiteSetting.query.count() == 3
    assert SiteSetting.query.filter_by(key="nav").one().type == "json"


def test_update_setting_keeps_description(app):
    update_setting("site_title", "First", "Shown in the header")
    setting = update_setting("site_title", "Second")

    assert setting.value == "Second"
    assert setting.description == "Shown in the header"


def test_unset_feature_counts_as_enabled(app):
    assert is_feature_enabled("blog") is True

    update_setting("enable_blog", False)
    assert is_feature_enabled("blog") is False


def test_seed_settings_only_adds_missing(app):
    _add("site_title", "Custom", "string")

    created = seed_settings()

    assert created == SiteSetting.query.count() - 1
    assert SiteSetting.query.filter_by(key="site_title").one().value == "Custom"
    assert seed_settings() == 0
