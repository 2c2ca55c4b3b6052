"""
Public, high-level helpers for wiring diagnostics into a gateway client.
"""

from __future__ import annotations

from typing import Mapping, Optional, Union

from .core.config import (
    ConfigError,
    ConfigParameters,
    GatewayConfig,
    ReturnMethod,
    load_gateway_config,
)
from .core.diagnostics import DiagnosticsContext

__all__ = [
    "ConfigError",
    "DiagnosticsContext",
    "GatewayConfig",
    "create_diagnostics",
    "load_gateway_config",
]


def create_diagnostics(
    *,
    config: Optional[GatewayConfig] = None,
    env_file: Optional[str] = None,
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ConfigParameters] = None,
    merchant_id: Optional[str] = None,
    private_key_path: Optional[str] = None,
    bank_public_key_path: Optional[str] = None,
    shop_name: Optional[str] = None,
    return_url: Optional[str] = None,
    api_url: Optional[str] = None,
    private_key_password: Optional[str] = None,
    return_method: Optional[Union[ReturnMethod, str]] = None,
    close_payment: Optional[bool] = None,
) -> DiagnosticsContext:
    """
    Construct a fresh :class:`DiagnosticsContext` for one unit of work.

    Callers can either supply a ready-made :class:`GatewayConfig` or let the
    helper assemble one from environment data. Without any of those the
    context starts with no configuration registered.
    """
    sources = (
        env_file,
        overrides,
        base,
        parameters,
        merchant_id,
        private_key_path,
        bank_public_key_path,
        shop_name,
        return_url,
        api_url,
        private_key_password,
        return_method,
        close_payment,
    )
    has_sources = any(item is not None and item != {} for item in sources)

    if config is not None:
        if has_sources:
            raise ValueError(
                "Provide either a pre-built GatewayConfig or individual parameters, not both."
            )
        return DiagnosticsContext(config)

    context = DiagnosticsContext()
    if has_sources:
        context.set_active_config(
            load_gateway_config(
                env_file=env_file,
                overrides=overrides,
                base=base,
                parameters=parameters,
                merchant_id=merchant_id,
                private_key_path=private_key_path,
                bank_public_key_path=bank_public_key_path,
                shop_name=shop_name,
                return_url=return_url,
                api_url=api_url,
                private_key_password=private_key_password,
                return_method=return_method,
                close_payment=close_payment,
            )
        )
    return context
