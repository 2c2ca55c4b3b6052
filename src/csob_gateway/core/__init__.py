"""
Core primitives: gateway configuration and call diagnostics.
"""

from .config import (
    ConfigError,
    ConfigParameters,
    GatewayConfig,
    ReturnMethod,
    load_gateway_config,
)
from .diagnostics import DiagnosticEntry, DiagnosticsContext
from .environment import ENV_PREFIX, gateway_settings
from .gateway_url import DEFAULT_API_URL, GatewayUrl
from .logged import LoggedRequest, LoggedResponse
from .panel import CONFIG_MISSING_WARNING, DiagnosticsPanel, PanelAdapter

__all__ = [
    "CONFIG_MISSING_WARNING",
    "ConfigError",
    "ConfigParameters",
    "DEFAULT_API_URL",
    "DiagnosticEntry",
    "DiagnosticsContext",
    "DiagnosticsPanel",
    "GatewayConfig",
    "GatewayUrl",
    "LoggedRequest",
    "LoggedResponse",
    "PanelAdapter",
    "ReturnMethod",
    "ENV_PREFIX",
    "gateway_settings",
    "load_gateway_config",
]
