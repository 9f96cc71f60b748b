"""JSON output for documents, statistics and errors."""

from __future__ import annotations

import json
from typing import Any

from fountainkit.cli.formatters.base import OutputFormat, OutputFormatter


def _jsonable(data: Any) -> Any:
    if hasattr(data, "to_dict"):
        return data.to_dict()
    if isinstance(data, dict | list | tuple):
        return data
    return {"value": data}


class JsonFormatter(OutputFormatter[Any]):
    """Serialize command results as indented JSON."""

    def format(self, data: Any, format_type: OutputFormat = OutputFormat.JSON) -> str:  # noqa: ARG002
        """Format ``data`` as JSON regardless of ``format_type``.

        Objects with a ``to_dict()`` method are serialized through it; other
        scalars are wrapped as ``{"value": ...}``.
        """
        return json.dumps(_jsonable(data), default=str, indent=2)

    def format_error_response(self, error: str | Exception, code: int = 1) -> str:
        """JSON error object with ``success``, ``code``, ``error`` and ``hint``."""
        response: dict[str, Any] = {"success": False, "code": code}
        if isinstance(error, str):
            response["error"] = error
            return json.dumps(response, indent=2)

        response["error"] = getattr(error, "message", str(error))
        hint = getattr(error, "hint", None)
        if hint:
            response["hint"] = hint
        return json.dumps(response, indent=2)
