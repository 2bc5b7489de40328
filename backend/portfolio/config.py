import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=12)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Storage
    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", "uploads")
    IMAGE_BUCKET = "images"
    MAX_IMAGE_SIZE_MB = int(os.getenv("MAX_IMAGE_SIZE_MB", 5))

    # Site identity used for SEO metadata
    SITE_URL = os.getenv("SITE_URL", "https://hamzatahir.dev")
    SITE_AUTHOR = os.getenv("SITE_AUTHOR", "Hamza Tahir")
    SITE_NAME = os.getenv("SITE_NAME", "Hamza Tahir - Full-Stack Developer")
    TWITTER_CREATOR = os.getenv("TWITTER_CREATOR", "@hamzatahir")
    DEFAULT_OG_IMAGE = "/og-image.jpg"
    CONTACT_EMAIL = os.getenv("CONTACT_EMAIL", "hello@hamzatahir.com")

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI")

class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")

class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "testing-jwt-secret-key-with-enough-length"
    LOG_LEVEL = "DEBUG"

config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
