"""
Snapshots of a single gateway call, filled in by the client while it runs.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

__all__ = ["LoggedRequest", "LoggedResponse"]


class _LoggedObject:
    def as_dict(self) -> Dict[str, Any]:
        return {field.name: getattr(self, field.name) for field in fields(self)}


@dataclass
class LoggedRequest(_LoggedObject):
    http_method: Optional[str] = None
    api_method: Optional[str] = None
    url: Optional[str] = None
    payload: Optional[Dict[str, Any]] = None
    encoded_payload: Optional[str] = None
    signature_base: Optional[str] = None
    request_number: Optional[int] = None
    successfully_sent: Optional[bool] = None
    sending_error_code: Optional[int] = None
    sending_error_text: Optional[str] = None


@dataclass
class LoggedResponse(_LoggedObject):
    request_number: Optional[int] = None
    http_status: Optional[int] = None
    raw_response: Optional[str] = None
    response: Optional[Dict[str, Any]] = None
    signature_correct: Optional[bool] = None
    expected_signature: Optional[str] = None
    expected_signature_base: Optional[str] = None
    api_result_code: Optional[int] = None
