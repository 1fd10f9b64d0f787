import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./risk_register.db")
    API_PREFIX = data.get("API_PREFIX", "/api/v1")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    CREATE_TABLES_ON_STARTUP = bool(data.get("CREATE_TABLES_ON_STARTUP", 1))
    SEED_DEV_USERS = bool(data.get("SEED_DEV_USERS", False))
    SEED_DEV_PASSWORD = data.get("SEED_DEV_PASSWORD", "password123")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    JWT_EXPIRY_HOURS = data.get("JWT_EXPIRY_HOURS", 24)
    BCRYPT_ROUNDS = data.get("BCRYPT_ROUNDS", 12)
    AUDIT_FAILURE_FATAL = bool(data.get("AUDIT_FAILURE_FATAL", False))
    AUDIT_LIST_LIMIT = data.get("AUDIT_LIST_LIMIT", 50)
    RISK_PAGE_SIZE = data.get("RISK_PAGE_SIZE", 20)
    RISK_MAX_PAGE_SIZE = data.get("RISK_MAX_PAGE_SIZE", 100)
