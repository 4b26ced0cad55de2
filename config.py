import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")

    # "test" selects the local unsecured cache endpoint, anything else the TLS one
    ENVIRONMENT = data.get("ENVIRONMENT", "test")

    # Cache (Redis)
    REDIS_URL = data.get("REDIS_URL", "redis://localhost:6379/0")
    REDIS_HOST = data.get("REDIS_HOST", "localhost")
    REDIS_PORT = int(data.get("REDIS_PORT", 6379))
    REDIS_USERNAME = data.get("REDIS_USERNAME")
    REDIS_PASSWORD = data.get("REDIS_PASSWORD")
    REDIS_TLS_KEYFILE = data.get("REDIS_TLS_KEYFILE")
    REDIS_TLS_CERTFILE = data.get("REDIS_TLS_CERTFILE")
    REDIS_TLS_CA_CERTS = data.get("REDIS_TLS_CA_CERTS")
    REDIS_MAX_RETRIES = int(data.get("REDIS_MAX_RETRIES", 10))
    REDIS_BACKOFF_BASE = float(data.get("REDIS_BACKOFF_BASE", 0.05))
    REDIS_BACKOFF_CAP = float(data.get("REDIS_BACKOFF_CAP", 2.0))
    CACHE_TIMEOUT_SECONDS = float(data.get("CACHE_TIMEOUT_SECONDS", 2.0))
    BLACKLIST_FAIL_CLOSED = bool(data.get("BLACKLIST_FAIL_CLOSED", False))

    # Outbound mail
    MAIL_BACKEND = data.get("MAIL_BACKEND", "console")
    SMTP_HOST = data.get("SMTP_HOST", "localhost")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USERNAME = data.get("SMTP_USERNAME")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD")
    SMTP_STARTTLS = bool(data.get("SMTP_STARTTLS", True))
    MAIL_FROM = data.get("MAIL_FROM", "no-reply@localhost")
    MAIL_TIMEOUT_SECONDS = float(data.get("MAIL_TIMEOUT_SECONDS", 10.0))
