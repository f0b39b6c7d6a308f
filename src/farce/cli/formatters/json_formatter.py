"""JSON output formatter for CLI."""

from __future__ import annotations

import json
from typing import Any

from farce.cli.formatters.base import OutputFormat, OutputFormatter


class JsonFormatter(OutputFormatter[Any]):
    """Generic JSON formatter for CLI output."""

    def format(
        self,
        data: Any,
        format_type: OutputFormat = OutputFormat.JSON,  # noqa: ARG002
    ) -> str:
        """Format data as JSON.

        Args:
            data: Data to format
            format_type: Output format type (ignored, always JSON)

        Returns:
            JSON string
        """
        if hasattr(data, "to_dict"):
            # Parsed documents and statistics
            return json.dumps(data.to_dict(), default=str, indent=2)
        if hasattr(data, "model_dump"):
            # Pydantic models
            return json.dumps(data.model_dump(), default=str, indent=2)
        if isinstance(data, dict | list | tuple):
            return json.dumps(data, default=str, indent=2)
        return json.dumps({"value": data}, default=str, indent=2)

    def format_error_response(self, error: str | Exception, code: int = 1) -> str:
        """Format an error response.

        Args:
            error: Error message or exception
            code: Error code

        Returns:
            JSON string
        """
        response: dict[str, Any] = {"success": False, "code": code}
        if isinstance(error, Exception):
            response["error"] = getattr(error, "message", str(error))
            hint = getattr(error, "hint", None)
            if hint:
                response["hint"] = hint
            details = getattr(error, "details", None)
            if details:
                response["details"] = details
        else:
            response["error"] = error
        return json.dumps(response, default=str, indent=2)
