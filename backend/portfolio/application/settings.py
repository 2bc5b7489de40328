# portfolio/application/settings.py
import json
from typing import Any, Dict

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from portfolio.extensions import db
from portfolio.models.site_setting import SiteSetting, SETTING_TYPES
from portfolio.utils.transaction import transactional

DEFAULT_SETTINGS = (
    ("site_title", "Hamza Tahir - Full-Stack Developer", "string", "Site title"),
    ("site_description", "", "string", "Site description"),
    ("enable_blog", "true", "boolean", "Show the blog"),
    ("enable_projects", "true", "boolean", "Show the projects section"),
    ("enable_snippets", "true", "boolean", "Show the code snippets section"),
    ("enable_contact", "true", "boolean", "Accept contact messages"),
    ("social_links", "{}", "json", "Social profile URLs"),
)


def parse_setting(setting: SiteSetting) -> Any:
    """Decode a stored value according to its type column."""
    if setting.type not in SETTING_TYPES:
        current_app.logger.warning(f"Setting '{setting.key}' has unknown type '{setting.type}'")
        return setting.value

    if setting.type == "boolean":
        return str(setting.value).lower() == "true"

    if setting.type == "json":
        try:
            return json.loads(setting.value) if setting.value else None
        except ValueError:
            current_app.logger.warning(f"Setting '{setting.key}' holds invalid JSON")
            return setting.value

    return setting.value


def infer_type(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (list, dict)):
        return "json"
    return "string"


def encode_value(value: Any, setting_type: str) -> str:
    if setting_type == "boolean":
        return "true" if value else "false"
    if setting_type == "json":
        return json.dumps(value)
    return "" if value is None else str(value)


def load_site_settings() -> Dict[str, Any]:
    """
    Read every setting into a flat dict.

    Returns {"settings": {...}, "error": None}, or an empty settings dict
    with the error message when the table cannot be read.
    """
    try:
        rows = SiteSetting.query.order_by(SiteSetting.key.asc()).all()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Failed to load site settings: {e}")
        return {"settings": {}, "error": "Failed to load site settings"}

    return {
        "settings": {row.key: parse_setting(row) for row in rows},
        "error": None,
    }


def list_settings():
    return [
        {
            "key": row.key,
            "value": parse_setting(row),
            "type": row.type,
            "description": row.description,
        }
        for row in SiteSetting.query.order_by(SiteSetting.key.asc()).all()
    ]


def _upsert(key: str, value: Any, description=None) -> SiteSetting:
    setting_type = infer_type(value)
    setting = SiteSetting.query.filter_by(key=key).first()
    if setting is None:
        setting = SiteSetting(key=key)
        db.session.add(setting)

    setting.type = setting_type
    setting.value = encode_value(value, setting_type)
    if description is not None:
        setting.description = description
    return setting


def update_setting(key: str, value: Any, description=None) -> SiteSetting:
    with transactional():
        setting = _upsert(key, value, description)

    current_app.logger.info(f"Updated setting {key}")
    return setting


def save_settings(values: Dict[str, Any]) -> Dict[str, Any]:
    """Upsert every key in one transaction, then reload."""
    with transactional():
        for key, value in values.items():
            _upsert(key, value)

    current_app.logger.info(f"Saved settings: {', '.join(values)}")
    return load_site_settings()


def seed_settings() -> int:
    """Insert the default settings that are missing; return how many."""
    created = 0
    with transactional():
        for key, value, setting_type, description in DEFAULT_SETTINGS:
            if SiteSetting.query.filter_by(key=key).first():
                continue
            db.session.add(SiteSetting(
                key=key, value=value, type=setting_type, description=description,
            ))
            created += 1
    return created


def is_feature_enabled(name: str) -> bool:
    setting = SiteSetting.query.filter_by(key=f"enable_{name}").first()
    if setting is None:
        return True
    return bool(parse_setting(setting))
