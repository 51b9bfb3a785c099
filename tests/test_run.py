from types import SimpleNamespace

import run


def test_main_runs_app_with_cli_options(monkeypatch):
    calls = []
    fake_app = SimpleNamespace(run=lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(run, "create_app", lambda: fake_app)
    monkeypatch.setattr("sys.argv", ["keeplater", "--port", "9000", "--debug"])

    run.main()

    assert calls == [{"host": "127.0.0.1", "port": 9000, "debug": True}]
