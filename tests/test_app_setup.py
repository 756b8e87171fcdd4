from sqlalchemy.pool import StaticPool

from bloodwork_api import __main__ as runner
from bloodwork_api.config import settings
from bloodwork_api.database import make_engine


def test_runner_uses_configured_host_and_port(monkeypatch):
    calls = []
    monkeypatch.setattr(runner.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setattr(settings, "app_host", "127.0.0.1")
    monkeypatch.setattr(settings, "app_port", 9100)
    monkeypatch.setattr(settings, "app_env", "prod")

    runner.main()

    assert calls == [
        (
            "bloodwork_api.main:app",
            {"host": "127.0.0.1", "port": 9100, "reload": False, "log_level": settings.log_level.lower()},
        )
    ]


def test_in_memory_sqlite_shares_one_connection():
    engine = make_engine("sqlite://")

    assert isinstance(engine.pool, StaticPool)


def test_file_sqlite_uses_default_pool(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'screenings.db'}")

    assert not isinstance(engine.pool, StaticPool)
    assert engine.url.get_backend_name() == "sqlite"
