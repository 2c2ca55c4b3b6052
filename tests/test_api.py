"""
Tests for csob_gateway.api.
"""
from __future__ import annotations

import pytest

from csob_gateway import ConfigError, create_diagnostics


class TestCreateDiagnostics:
    def test_without_config(self):
        context = create_diagnostics()
        assert context.config is None
        assert len(context) == 0

    def test_with_prebuilt_config(self, config):
        context = create_diagnostics(config=config)
        assert context.config is config

    def test_from_sources(self, env_values):
        context = create_diagnostics(base=env_values, shop_name="Override Shop")
        assert context.config.merchant_id == "M123"
        assert context.config.shop_name == "Override Shop"

    def test_config_and_sources_conflict(self, config):
        with pytest.raises(ValueError, match="not both"):
            create_diagnostics(config=config, merchant_id="M999")

    def test_invalid_sources(self):
        with pytest.raises(ConfigError):
            create_diagnostics(base={"CSOB_MERCHANT_ID": "M123"})

    def test_fresh_context_each_call(self, config):
        first = create_diagnostics(config=config)
        first.record_call(1, {}, {"ok": True})
        assert len(create_diagnostics(config=config)) == 0
