import pytest
from pydantic import ValidationError

from smartignore.config import PACKAGED_TEMPLATES_DIR, Settings, load_settings


def test_defaults(monkeypatch):
    for name in ("SMART_GITIGNORE_GITHUB_URL", "SMART_GITIGNORE_API_URL",
                 "SMART_GITIGNORE_TIMEOUT", "SMART_GITIGNORE_TEMPLATES_DIR"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.github_url == "https://raw.githubusercontent.com/github/gitignore/main"
    assert settings.timeout_seconds == 10.0
    assert settings.templates_dir == PACKAGED_TEMPLATES_DIR


def test_timeout_from_environment(monkeypatch):
    monkeypatch.setenv("SMART_GITIGNORE_TIMEOUT", "2.5")
    assert Settings().timeout_seconds == 2.5


@pytest.mark.parametrize("value", ["abc", "0", "-1"])
def test_invalid_timeout_is_a_validation_error(monkeypatch, value):
    monkeypatch.setenv("SMART_GITIGNORE_TIMEOUT", value)
    with pytest.raises(ValidationError):
        Settings()


def test_load_settings_pins_templates_dir(tmp_path):
    assert load_settings(str(tmp_path)).templates_dir == tmp_path
