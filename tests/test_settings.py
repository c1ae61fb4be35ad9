from travel_agent.config.settings import get_port


def test_port_defaults_when_unset(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert get_port() == 8080


def test_port_defaults_when_empty(monkeypatch):
    monkeypatch.setenv("PORT", "")
    assert get_port() == 8080


def test_port_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "9191")
    assert get_port() == 9191
