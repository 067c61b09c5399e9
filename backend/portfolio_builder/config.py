import os
from dotenv import load_dotenv

load_dotenv()

class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Media storage (primary bucket, fallback bucket)
    UPLOAD_ROOT = os.getenv("UPLOAD_ROOT", os.path.join(os.getcwd(), "uploads"))
    MEDIA_PRIMARY_BUCKET = os.getenv("MEDIA_PRIMARY_BUCKET", "portfolio-media")
    MEDIA_FALLBACK_BUCKET = os.getenv("MEDIA_FALLBACK_BUCKET", "public")
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", 50 * 1024 * 1024))

    # Contact form relay
    EMAIL_RELAY_URL = os.getenv("EMAIL_RELAY_URL")
    EMAIL_RELAY_API_KEY = os.getenv("EMAIL_RELAY_API_KEY")
    CONTACT_EMAIL = os.getenv("CONTACT_EMAIL")
    EMAIL_RELAY_TIMEOUT = float(os.getenv("EMAIL_RELAY_TIMEOUT", 10))

    # Missing section renderers raise instead of being skipped
    SECTION_RENDER_STRICT = False

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///portfolio_dev.db")
    SECTION_RENDER_STRICT = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET_KEY = "test-jwt-secret-key-with-enough-length"
    SECTION_RENDER_STRICT = True
    EMAIL_RELAY_URL = None
    EMAIL_RELAY_API_KEY = None
    CONTACT_EMAIL = None

class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")

config_by_name = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig
}
