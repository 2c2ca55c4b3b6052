"""
Public facade for the CSOB gateway configuration and diagnostics package.

The most useful pieces are re-exported so integrators can
``from csob_gateway import ...`` without navigating the package.
"""

from .api import create_diagnostics
from .core import (
    CONFIG_MISSING_WARNING,
    DEFAULT_API_URL,
    ENV_PREFIX,
    ConfigError,
    ConfigParameters,
    DiagnosticEntry,
    DiagnosticsContext,
    DiagnosticsPanel,
    GatewayConfig,
    GatewayUrl,
    LoggedRequest,
    LoggedResponse,
    PanelAdapter,
    ReturnMethod,
    gateway_settings,
    load_gateway_config,
)

__all__ = (
    "CONFIG_MISSING_WARNING",
    "ConfigError",
    "ConfigParameters",
    "DEFAULT_API_URL",
    "ENV_PREFIX",
    "DiagnosticEntry",
    "DiagnosticsContext",
    "DiagnosticsPanel",
    "GatewayConfig",
    "GatewayUrl",
    "LoggedRequest",
    "LoggedResponse",
    "PanelAdapter",
    "ReturnMethod",
    "create_diagnostics",
    "gateway_settings",
    "load_gateway_config",
)
