"""
HTML rendering of a :class:`DiagnosticsContext` for developer tooling.
"""

from __future__ import annotations

import html
import json
import logging
from typing import Any, List

from .assets import ICON_DATA_URI
from .diagnostics import DiagnosticsContext

__all__ = ["CONFIG_MISSING_WARNING", "DiagnosticsPanel", "PanelAdapter"]

CONFIG_MISSING_WARNING = "Can not load client configuration!!!"

_UNRENDERABLE = "<unrenderable value>"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def _fallback(value: Any) -> str:
    try:
        return str(value)
    except Exception:  # noqa: BLE001
        return object.__repr__(value)


def _dump(value: Any) -> str:
    try:
        text = json.dumps(value, indent=2, ensure_ascii=False, default=_fallback)
    except Exception as exc:  # noqa: BLE001
        logging.warning("Unable to render diagnostics value: %s", exc)
        text = _UNRENDERABLE
    return f'<pre class="csob-dump">{html.escape(text)}</pre>'


class DiagnosticsPanel:
    """
    Read-only view over one diagnostics context.
    """

    def __init__(self, context: DiagnosticsContext) -> None:
        self.context = context

    def render_summary(self) -> str:
        total, errors = self.context.summary_counts()
        label = f"{total} req"
        if errors:
            label += f' + <span style="color:red">{_plural(errors, "error")}</span>'
        return (
            '<span title="ČSOB debugger">'
            f'<img alt="ČSOB" src="{ICON_DATA_URI}">'
            f"&nbsp;{label}</span>"
        )

    def render_detail(self) -> str:
        entries = self.context.entries
        parts: List[str] = [
            f"<h1>ČSOB request debugger | {_plural(len(entries), 'request')}</h1>",
            '<div class="tracy-inner">',
        ]

        config = self.context.config
        if config is not None:
            try:
                snapshot = config.as_dict()
            except Exception as exc:  # noqa: BLE001
                logging.warning("Unable to snapshot the gateway configuration: %s", exc)
                snapshot = config
            parts.append('<div class="csob-config">' + _dump(snapshot) + "</div>")
        else:
            parts.append(
                '<p class="csob-config-missing" style="color: red; font-size: 16pt">'
                f"{html.escape(CONFIG_MISSING_WARNING)}</p>"
            )

        parts.append("<table>")
        for position, entry in enumerate(entries, start=1):
            marker = '<br><span style="color:red">ERROR</span>' if entry.failed else ""
            parts.append(
                f"<tr><th>{position}{marker}</th><td>"
                "<table><tr><th>Request</th></tr></table>"
                f"{_dump(entry.request)}"
                "<table><tr><th>Response</th></tr></table>"
                f"{_dump(entry.response)}"
                "</td></tr><tr><th>&nbsp;</th><th>&nbsp;</th></tr>"
            )
        parts.append("</table></div>")
        return "".join(parts)


class PanelAdapter:
    """
    Hook for debug toolbars that expect ``get_tab()`` / ``get_panel()``.
    """

    def __init__(self, panel: DiagnosticsPanel) -> None:
        self.panel = panel

    @classmethod
    def for_context(cls, context: DiagnosticsContext) -> "PanelAdapter":
        return cls(DiagnosticsPanel(context))

    def get_tab(self) -> str:
        return self.panel.render_summary()

    def get_panel(self) -> str:
        return self.panel.render_detail()
