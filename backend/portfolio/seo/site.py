from flask import current_app


def site_identity():
    """Site-wide values every metadata builder needs, read from config."""
    config = current_app.config
    return {
        "url": config["SITE_URL"].rstrip("/"),
        "author": config["SITE_AUTHOR"],
        "name": config["SITE_NAME"],
        "twitter_creator": config["TWITTER_CREATOR"],
        "default_og_image": config["DEFAULT_OG_IMAGE"],
        "email": config["CONTACT_EMAIL"],
    }
