import pytest

from backend import serve
from backend.core import config


def test_main_runs_app_on_configured_address(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(serve, 'configure_logging', lambda level: None)
    monkeypatch.setattr(serve.uvicorn, 'run', lambda app, **kwargs: calls.append((app, kwargs)))

    serve.main()

    from backend.main import app

    assert calls == [(app, {'host': config.HOST, 'port': config.PORT, 'log_level': config.LOG_LEVEL.lower()})]
