import importlib

from src.hr_timekeeping.hr_timekeeping.container import build_container, load_settings
from src.hr_timekeeping.hr_timekeeping.deviation.calculator import StandardTime


def test_container_from_testing_settings():
    container = build_container(settings=importlib.import_module("config.testing"))

    assert container.policy.offset_minutes == 210
    assert container.standard_entry == StandardTime(6, 0)
    assert container.standard_exit == StandardTime(14, 0)


def test_app_env_selects_settings(monkeypatch):
    monkeypatch.delenv("HR_TIMEKEEPING_ENV", raising=False)
    monkeypatch.setenv("APP_ENV", "testing")
    assert load_settings().__name__ == "config.testing"


def test_project_env_var_wins_over_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("HR_TIMEKEEPING_ENV", "test")
    assert load_settings().__name__ == "config.testing"


def test_unknown_env_falls_back_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.setenv("HR_TIMEKEEPING_ENV", "staging")
    assert load_settings().__name__ == "config.development"


def test_env_overrides_standards(monkeypatch):
    monkeypatch.setenv("STANDARD_ENTRY", "07:30")
    settings = importlib.reload(importlib.import_module("config.production"))
    try:
        container = build_container(settings=settings)
        assert container.standard_entry == StandardTime(7, 30)
    finally:
        monkeypatch.delenv("STANDARD_ENTRY")
        importlib.reload(settings)


def test_report_service_shares_resolver():
    container = build_container(settings=importlib.import_module("config.testing"))

    class EmptySource:
        def get_commute_rows(self, **kwargs):
            return []

        def get_short_leave_rows(self, **kwargs):
            return []

    svc = container.report_service(EmptySource())
    assert svc._resolver is container.resolver
