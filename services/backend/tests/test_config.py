import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.append(str(BACKEND_DIR))

from crop_relay.config import Settings  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("PREDICTION_API_URL", "FLASK_API_URL", "CORS_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.prediction_api_url == "http://localhost:5000/predict"
    assert settings.cors_origins == ["*"]
    assert settings.log_level == "INFO"


def test_prediction_url_from_env(monkeypatch):
    monkeypatch.setenv("PREDICTION_API_URL", " http://ml:5000/predict ")

    assert Settings(_env_file=None).prediction_api_url == "http://ml:5000/predict"


def test_flask_url_alias(monkeypatch):
    monkeypatch.setenv("FLASK_API_URL", "https://flask.internal/predict")

    assert Settings(_env_file=None).prediction_api_url == "https://flask.internal/predict"


@pytest.mark.parametrize("value", ["", "   ", "ftp://ml/predict"])
def test_rejects_unusable_url(monkeypatch, value):
    monkeypatch.setenv("PREDICTION_API_URL", value)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_cors_origins_split(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")

    assert Settings(_env_file=None).cors_origins == ["https://a.example", "https://b.example"]


def test_log_level_normalised(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert Settings(_env_file=None).log_level == "DEBUG"
