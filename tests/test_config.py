from productos_api.config import Settings


def test_settings_defaults(monkeypatch):
    for name in ("APP_TITLE", "LOG_LEVEL", "PORT", "HANDLERS_MODULE", "CORS_ALLOW_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)

    assert s.app_title == "Productos API"
    assert s.log_level == "INFO"
    assert s.port == 8000
    assert s.handlers_module is None
    assert s.cors_allow_origins == []


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "9100")
    monkeypatch.setenv("HANDLERS_MODULE", "mi_paquete.handlers")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", '["http://localhost:3000"]')

    s = Settings(_env_file=None)

    assert s.port == 9100
    assert s.handlers_module == "mi_paquete.handlers"
    assert s.cors_allow_origins == ["http://localhost:3000"]
