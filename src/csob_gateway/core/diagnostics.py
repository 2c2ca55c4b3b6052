"""
Per-unit-of-work recorder of gateway calls.

A :class:`DiagnosticsContext` is created once per unit of work (typically one
inbound web request), handed to the client that talks to the gateway and later
to :class:`csob_gateway.core.panel.DiagnosticsPanel` for rendering. Nothing is
shared between contexts.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import requests

from .config import GatewayConfig
from .logged import LoggedRequest, LoggedResponse

__all__ = ["DiagnosticEntry", "DiagnosticsContext"]


def _snapshot(value: Any) -> Any:
    if isinstance(value, Mapping):
        return dict(value)
    return value


@dataclass(frozen=True)
class DiagnosticEntry:
    call_id: int
    request: Any
    response: Any

    @property
    def failed(self) -> bool:
        return not self.response


def _decode_body(body: Any) -> Any:
    if body is None:
        return None
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return repr(body)
    try:
        return json.loads(body)
    except (TypeError, ValueError):
        return body


def _request_snapshot(response: requests.Response) -> Dict[str, Any]:
    prepared = response.request
    if prepared is None:
        return {"method": None, "url": response.url, "body": None}
    return {
        "method": prepared.method,
        "url": prepared.url,
        "body": _decode_body(prepared.body),
    }


def _response_snapshot(response: requests.Response) -> Optional[Dict[str, Any]]:
    if response.status_code is None or response.status_code >= 400:
        logging.debug("Gateway responded with status %s", response.status_code)
        return None
    if response._content is False and response.raw is not None:
        # Streamed body not consumed yet; reading it here would drain it.
        return {"status_code": response.status_code, "body": None}
    try:
        payload = response.json()
    except ValueError:
        logging.debug("Gateway response from %s is not JSON", response.url)
        return None
    except requests.RequestException as exc:
        logging.warning("Unable to read gateway response from %s: %s", response.url, exc)
        return None
    if isinstance(payload, Mapping):
        return dict(payload)
    return {"body": payload}


class DiagnosticsContext:
    """
    Accumulates request/response pairs keyed by caller-assigned ids.

    Recording a call under an id that was already used replaces the earlier
    entry but keeps its position, so iteration follows first-seen order.
    """

    def __init__(self, config: Optional[GatewayConfig] = None) -> None:
        self._entries: Dict[int, DiagnosticEntry] = {}
        self._config = config

    @property
    def config(self) -> Optional[GatewayConfig]:
        return self._config

    def set_active_config(self, config: GatewayConfig) -> None:
        self._config = config

    @property
    def entries(self) -> List[DiagnosticEntry]:
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def next_call_id(self) -> int:
        return max(self._entries, default=0) + 1

    def record_call(self, call_id: int, request: Any, response: Any) -> None:
        if call_id in self._entries:
            logging.debug("Replacing recorded gateway call %s", call_id)
        self._entries[call_id] = DiagnosticEntry(
            call_id=call_id,
            request=_snapshot(request),
            response=_snapshot(response),
        )

    def record_exchange(
        self,
        request: LoggedRequest,
        response: Optional[LoggedResponse] = None,
    ) -> int:
        """
        Record a call described by the client's logged objects.

        Returns the id the call was stored under.
        """
        call_id = request.request_number
        if call_id is None:
            call_id = self.next_call_id()
        if response is None or not response.response:
            response_snapshot: Optional[Dict[str, Any]] = None
        else:
            response_snapshot = response.as_dict()
        self.record_call(call_id, request.as_dict(), response_snapshot)
        return call_id

    def summary_counts(self) -> Tuple[int, int]:
        total = 0
        errors = 0
        for entry in self._entries.values():
            total += 1
            if entry.failed:
                errors += 1
        return total, errors

    def response_hook(self) -> Callable[..., requests.Response]:
        """
        Build a hook recording every response of a :class:`requests.Session`::

            session.hooks["response"].append(context.response_hook())
        """

        def _record(response: requests.Response, *args: Any, **kwargs: Any) -> requests.Response:
            self.record_call(
                self.next_call_id(),
                _request_snapshot(response),
                _response_snapshot(response),
            )
            return response

        return _record
