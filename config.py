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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    MIGRATION_DB_URI = data.get("MIGRATION_DB_URI", "sqlite:///./test.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")

    # Tenant resolution
    TENANT_HEADER = data.get("TENANT_HEADER", "X-Tenant-ID")
    LOCAL_HOST_MARKERS = data.get("LOCAL_HOST_MARKERS", ["localhost"])
    TENANT_EXEMPT_PATHS = data.get(
        "TENANT_EXEMPT_PATHS",
        ["/health", "/docs", "/redoc", "/openapi.json", "/admin", "/onboarding"],
    )
    TENANT_STRICT_READS = bool(data.get("TENANT_STRICT_READS", False))
    TENANT_TRIAL_DAYS = data.get("TENANT_TRIAL_DAYS", 14)

    # Audit trail
    AUDIT_RETENTION_DAYS = data.get("AUDIT_RETENTION_DAYS", 90)
    AUDIT_SENSITIVE_FIELDS = data.get(
        "AUDIT_SENSITIVE_FIELDS",
        ["password", "token", "secret", "key", "authorization", "cookie"],
    )
    AUDIT_REDACTION_MARKER = data.get("AUDIT_REDACTION_MARKER", "[REDACTED]")
