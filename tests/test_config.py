from sqlalchemy.engine import make_url

from moneytrack import config


def _clear_db_env(monkeypatch):
    for name in ("DATABASE_URL", "DB_HOST", "DB_PORT", "DB_NAME", "DB_USER", "DB_PASSWORD",
                 "DB_POOL_IDLE_TIMEOUT", "DB_SSLMODE"):
        monkeypatch.delenv(name, raising=False)


def test_database_url_escapes_credentials(monkeypatch):
    _clear_db_env(monkeypatch)
    monkeypatch.setenv("DB_HOST", "db.example")
    monkeypatch.setenv("DB_PORT", "6543")
    monkeypatch.setenv("DB_NAME", "money")
    monkeypatch.setenv("DB_USER", "tracker")
    monkeypatch.setenv("DB_PASSWORD", "p@ss/w#rd")

    url = make_url(config._database_url())
    assert url.drivername == "postgresql+psycopg2"
    assert url.host == "db.example"
    assert url.port == 6543
    assert url.database == "money"
    assert url.username == "tracker"
    assert url.password == "p@ss/w#rd"


def test_database_url_prefers_explicit_url(monkeypatch):
    _clear_db_env(monkeypatch)
    monkeypatch.setenv("DATABASE_URL", "sqlite:///elsewhere.db")
    monkeypatch.setenv("DB_HOST", "db.example")
    assert config._database_url() == "sqlite:///elsewhere.db"


def test_database_url_defaults_to_sqlite_file(monkeypatch):
    _clear_db_env(monkeypatch)
    assert config._database_url().endswith("moneytrack.db")


def test_postgres_pool_options(monkeypatch):
    _clear_db_env(monkeypatch)
    monkeypatch.setenv("DB_SSLMODE", "require")
    options = config._engine_options("postgresql+psycopg2://u@h/d")
    assert options["pool_size"] == 20
    assert options["pool_timeout"] == 2
    assert options["pool_recycle"] == 30
    assert options["connect_args"] == {"sslmode": "require"}

    monkeypatch.setenv("DB_POOL_IDLE_TIMEOUT", "120")
    assert config._engine_options("postgresql+psycopg2://u@h/d")["pool_recycle"] == 120


def test_sqlite_keeps_default_pool():
    assert config._engine_options("sqlite:///x.db") == {}
