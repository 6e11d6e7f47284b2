import os
import sys

import pytest
from pydantic import ValidationError

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from salon_dashboard.config import Settings


def test_cors_origins_accept_comma_separated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SALON_CORS_ORIGINS", "http://a.test, http://b.test,")

    settings = Settings()

    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_cors_origins_default_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SALON_CORS_ORIGINS", raising=False)

    assert "*" in Settings().cors_origins


def test_known_shop_timezone_is_kept(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SALON_SHOP_TIMEZONE", "America/Sao_Paulo")

    assert Settings().shop_timezone == "America/Sao_Paulo"


def test_unknown_shop_timezone_fails_at_load(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SALON_SHOP_TIMEZONE", "Mars/Olympus_Mons")

    with pytest.raises(ValidationError, match="Unknown timezone"):
        Settings()
