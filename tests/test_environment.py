"""
Tests for csob_gateway.core.environment.
"""
from __future__ import annotations

from csob_gateway import gateway_settings


class TestGatewaySettings:
    def test_precedence(self, tmp_path):
        """Overrides beat the base environment, which beats the file."""
        env_file = tmp_path / ".env"
        env_file.write_text(
            "CSOB_A=file\nCSOB_B=file\nCSOB_C=file\n", encoding="utf-8"
        )
        settings = gateway_settings(
            env_file=str(env_file),
            base={"CSOB_B": "base", "CSOB_C": "base"},
            overrides={"CSOB_C": "override"},
        )
        assert settings == {"CSOB_A": "file", "CSOB_B": "base", "CSOB_C": "override"}

    def test_only_prefixed_keys(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("OTHER=1\nCSOB_SHOP_NAME=Shop\n", encoding="utf-8")
        settings = gateway_settings(
            env_file=str(env_file), base={"PATH": "/usr/bin", "CSOB_MERCHANT_ID": "M1"}
        )
        assert settings == {"CSOB_SHOP_NAME": "Shop", "CSOB_MERCHANT_ID": "M1"}

    def test_file_parsing(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "\n# comment\nNOT A PAIR\n"
            "export CSOB_MERCHANT_ID=M123\n"
            "CSOB_SHOP_NAME='My Shop'\n"
            'CSOB_RETURN_URL = "https://shop.example/return" \n',
            encoding="utf-8",
        )
        settings = gateway_settings(env_file=str(env_file), base={})
        assert settings == {
            "CSOB_MERCHANT_ID": "M123",
            "CSOB_SHOP_NAME": "My Shop",
            "CSOB_RETURN_URL": "https://shop.example/return",
        }

    def test_blank_values_dropped(self):
        settings = gateway_settings(
            env_file=None, base={"CSOB_API_URL": "  ", "CSOB_SHOP_NAME": '""'}
        )
        assert settings == {}

    def test_blank_override_clears_lower_layer(self):
        settings = gateway_settings(
            env_file=None,
            base={"CSOB_API_URL": "https://gw.example"},
            overrides={"CSOB_API_URL": ""},
        )
        assert "CSOB_API_URL" not in settings

    def test_missing_file_is_ignored(self, tmp_path):
        settings = gateway_settings(
            env_file=str(tmp_path / "nope.env"), base={"CSOB_MERCHANT_ID": "M1"}
        )
        assert settings == {"CSOB_MERCHANT_ID": "M1"}

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv("CSOB_MERCHANT_ID", "FROM_ENV")
        assert gateway_settings(env_file=None)["CSOB_MERCHANT_ID"] == "FROM_ENV"
