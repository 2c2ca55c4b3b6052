"""
Known CSOB payment gateway endpoints.
"""

from __future__ import annotations

from typing import FrozenSet

__all__ = ["GatewayUrl", "DEFAULT_API_URL"]


class GatewayUrl:
    """
    Sandbox (``TEST_*``) and live (``PRODUCTION_*``) base URLs per API version.
    """

    TEST_1_0 = "https://iapi.iplatebnibrana.csob.cz/api/v1"
    PRODUCTION_1_0 = "https://api.platebnibrana.csob.cz/api/v1"

    TEST_1_5 = "https://iapi.iplatebnibrana.csob.cz/api/v1.5"
    PRODUCTION_1_5 = "https://api.platebnibrana.csob.cz/api/v1.5"

    TEST_1_6 = "https://iapi.iplatebnibrana.csob.cz/api/v1.6"
    PRODUCTION_1_6 = "https://api.platebnibrana.csob.cz/api/v1.6"

    TEST_1_7 = "https://iapi.iplatebnibrana.csob.cz/api/v1.7"
    PRODUCTION_1_7 = "https://api.platebnibrana.csob.cz/api/v1.7"

    TEST_1_8 = "https://iapi.iplatebnibrana.csob.cz/api/v1.8"
    PRODUCTION_1_8 = "https://api.platebnibrana.csob.cz/api/v1.8"

    TEST_LATEST = TEST_1_8
    PRODUCTION_LATEST = PRODUCTION_1_8

    @classmethod
    def production_urls(cls) -> FrozenSet[str]:
        return frozenset(
            value
            for name, value in vars(cls).items()
            if name.startswith("PRODUCTION_") and isinstance(value, str)
        )


# The sandbox endpoint stays the default until an integration goes live.
DEFAULT_API_URL = GatewayUrl.TEST_1_5
