"""
Configuration objects and helpers for integrating with the CSOB gateway.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Union

from .environment import gateway_settings
from .gateway_url import DEFAULT_API_URL, GatewayUrl

__all__ = [
    "ConfigError",
    "ConfigParameters",
    "GatewayConfig",
    "ReturnMethod",
    "load_gateway_config",
]

_PARAMETER_TO_ENV_KEY = {
    "merchant_id": "CSOB_MERCHANT_ID",
    "private_key_path": "CSOB_PRIVATE_KEY_PATH",
    "bank_public_key_path": "CSOB_BANK_PUBLIC_KEY_PATH",
    "shop_name": "CSOB_SHOP_NAME",
    "return_url": "CSOB_RETURN_URL",
    "api_url": "CSOB_API_URL",
    "private_key_password": "CSOB_PRIVATE_KEY_PASSWORD",
    "return_method": "CSOB_RETURN_METHOD",
    "close_payment": "CSOB_CLOSE_PAYMENT",
}

_REQUIRED_FIELDS = (
    "merchant_id",
    "private_key_path",
    "bank_public_key_path",
    "shop_name",
)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})

MASKED_SECRET = "*****"


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


class ReturnMethod(str, enum.Enum):
    """HTTP method used to send the customer back to ``return_url``."""

    GET = "GET"
    POST = "POST"

    @classmethod
    def parse(cls, value: Union["ReturnMethod", str]) -> "ReturnMethod":
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError as exc:
            raise ConfigError(
                f"Return method must be GET or POST, got '{value}'"
            ) from exc


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, ReturnMethod):
        return value.value
    return str(value)


def _parse_bool(raw: str, key: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{key} must be a boolean flag, got '{raw}'")


@dataclass(frozen=True)
class ConfigParameters:
    """
    Explicit parameter bundle for :meth:`GatewayConfig.from_env`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_gateway_config`.
    """

    merchant_id: Optional[str] = None
    private_key_path: Optional[str] = None
    bank_public_key_path: Optional[str] = None
    shop_name: Optional[str] = None
    return_url: Optional[str] = None
    api_url: Optional[str] = None
    private_key_password: Optional[str] = None
    return_method: Optional[Union[ReturnMethod, str]] = None
    close_payment: Optional[bool] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = _stringify(value)
        return overrides


@dataclass(frozen=True)
class GatewayConfig:
    """
    Everything a gateway client needs to know about the merchant.

    ``private_key_path`` must point outside of any publicly served directory.
    Instances are immutable; use :meth:`with_overrides` to derive a variant,
    e.g. one that returns customers with ``GET`` or leaves payments open.
    """

    merchant_id: str
    private_key_path: str
    bank_public_key_path: str
    shop_name: str
    return_url: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    private_key_password: Optional[str] = None
    return_method: ReturnMethod = ReturnMethod.POST
    close_payment: bool = True

    def __post_init__(self) -> None:
        for name in _REQUIRED_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"{name} must be a non-empty string")

        # Empty values fall back to the defaults instead of being stored.
        if not self.api_url:
            object.__setattr__(self, "api_url", DEFAULT_API_URL)
        if not self.private_key_password:
            object.__setattr__(self, "private_key_password", None)

        object.__setattr__(self, "return_method", ReturnMethod.parse(self.return_method))
        close_payment = self.close_payment
        if isinstance(close_payment, str):
            close_payment = _parse_bool(close_payment, "close_payment")
        object.__setattr__(self, "close_payment", bool(close_payment))

    @property
    def is_production(self) -> bool:
        return self.api_url.rstrip("/") in GatewayUrl.production_urls()

    def with_overrides(self, **changes: Any) -> "GatewayConfig":
        """
        Return a copy with ``changes`` applied and validated again.
        """
        return replace(self, **changes)

    def as_dict(self, *, mask_secrets: bool = True) -> Dict[str, Any]:
        snapshot: Dict[str, Any] = {}
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, ReturnMethod):
                value = value.value
            snapshot[field.name] = value
        if mask_secrets and snapshot["private_key_password"] is not None:
            snapshot["private_key_password"] = MASKED_SECRET
        return snapshot

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "GatewayConfig":
        required: Dict[str, str] = {}
        for name in _REQUIRED_FIELDS:
            env_key = _PARAMETER_TO_ENV_KEY[name]
            raw = values.get(env_key)
            if raw is None or not raw.strip():
                raise ConfigError(f"{env_key} must be provided")
            required[name] = raw.strip()

        close_raw = values.get("CSOB_CLOSE_PAYMENT")
        close_payment = (
            True if not close_raw else _parse_bool(close_raw, "CSOB_CLOSE_PAYMENT")
        )

        return cls(
            merchant_id=required["merchant_id"],
            private_key_path=required["private_key_path"],
            bank_public_key_path=required["bank_public_key_path"],
            shop_name=required["shop_name"],
            return_url=values.get("CSOB_RETURN_URL") or None,
            api_url=(values.get("CSOB_API_URL") or DEFAULT_API_URL).rstrip("/"),
            private_key_password=values.get("CSOB_PRIVATE_KEY_PASSWORD") or None,
            return_method=values.get("CSOB_RETURN_METHOD") or ReturnMethod.POST.value,
            close_payment=close_payment,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
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
    ) -> "GatewayConfig":
        explicit = ConfigParameters(
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
        merged_overrides = dict(overrides or {})
        if parameters is not None:
            merged_overrides.update(parameters.as_overrides())
        merged_overrides.update(explicit.as_overrides())

        settings = gateway_settings(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(settings)


def load_gateway_config(
    *,
    env_file: Optional[str] = ".env",
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
) -> GatewayConfig:
    """
    Convenience wrapper that mirrors :meth:`GatewayConfig.from_env`.

    The configuration can be provided entirely through environment variables,
    a ``.env`` file, direct keyword arguments, or any combination of the three.
    """
    return GatewayConfig.from_env(
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
