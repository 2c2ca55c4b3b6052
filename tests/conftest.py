"""
Shared fixtures for csob_gateway tests.
"""
from __future__ import annotations

import pytest

from csob_gateway import DiagnosticsContext, GatewayConfig


@pytest.fixture
def config():
    """Minimal valid configuration."""
    return GatewayConfig("M123", "/keys/priv.key", "/keys/bank.pub", "My Shop")


@pytest.fixture
def context():
    """Empty diagnostics context."""
    return DiagnosticsContext()


@pytest.fixture
def env_values():
    """Complete set of CSOB_* variables."""
    return {
        "CSOB_MERCHANT_ID": "M123",
        "CSOB_PRIVATE_KEY_PATH": "/keys/priv.key",
        "CSOB_BANK_PUBLIC_KEY_PATH": "/keys/bank.pub",
        "CSOB_SHOP_NAME": "My Shop",
    }
