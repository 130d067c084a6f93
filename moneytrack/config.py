import os
from pathlib import Path
from dotenv import load_dotenv
from sqlalchemy.engine import URL

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")


def _database_url():
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    if os.getenv("DB_HOST"):
        return URL.create(
            "postgresql+psycopg2",
            username=os.getenv("DB_USER") or None,
            password=os.getenv("DB_PASSWORD") or None,
            host=os.getenv("DB_HOST"),
            port=int(os.getenv("DB_PORT", "5432")),
            database=os.getenv("DB_NAME") or None,
        ).render_as_string(hide_password=False)
    return f"sqlite:///{BASE_DIR / 'moneytrack.db'}"


def _engine_options(url):
    # Pool limits only apply to server databases; SQLite keeps SQLAlchemy's defaults.
    if not url.startswith("postgresql"):
        return {}
    options = {
        "pool_size": int(os.getenv("DB_POOL_MAX", "20")),
        "max_overflow": 0,
        "pool_timeout": int(os.getenv("DB_POOL_TIMEOUT", "2")),
        # QueuePool has no idle reaper; connections older than this are replaced on checkout
        "pool_recycle": int(os.getenv("DB_POOL_IDLE_TIMEOUT", "30")),
        "pool_pre_ping": True,
    }
    sslmode = os.getenv("DB_SSLMODE")
    if sslmode:
        options["connect_args"] = {"sslmode": sslmode}
    return options


def _flag(name, default):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options(SQLALCHEMY_DATABASE_URI)
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    BOOTSTRAP_ON_STARTUP = _flag("BOOTSTRAP_ON_STARTUP", "true")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    BOOTSTRAP_ON_STARTUP = True
