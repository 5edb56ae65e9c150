"""
Tests for settings helpers
"""
import base64
import json
import pytest

from loanlink.core.config import Settings, decode_service_account


def _encode(document) -> str:
    return base64.b64encode(json.dumps(document).encode("utf-8")).decode("ascii")


class TestServiceAccount:

    @pytest.mark.unit
    def test_decode_service_account(self):
        account = decode_service_account(_encode({"type": "service_account", "project_id": "loanlink"}))

        assert account["project_id"] == "loanlink"

    @pytest.mark.unit
    def test_settings_property(self):
        settings = Settings(FB_SERVICE_KEY=_encode({"project_id": "loanlink"}))

        assert settings.service_account == {"project_id": "loanlink"}

    @pytest.mark.unit
    @pytest.mark.parametrize("encoded", [
        "",
        "%%%not base64%%%",
        base64.b64encode(b"not json").decode(),
        _encode(["project_id"]),
        _encode({"type": "service_account"}),
    ])
    def test_invalid_service_account(self, encoded):
        with pytest.raises(ValueError):
            decode_service_account(encoded)


class TestCorsOrigins:

    @pytest.mark.unit
    def test_default_origins(self):
        settings = Settings(_env_file=None)

        assert "http://localhost:5173" in settings.cors_origins_list
        assert "https://b12-m11-session.web.app" in settings.cors_origins_list

    @pytest.mark.unit
    def test_origins_are_trimmed(self):
        settings = Settings(CORS_ORIGINS=" https://a.example , https://b.example ,")

        assert settings.cors_origins_list == ["https://a.example", "https://b.example"]
