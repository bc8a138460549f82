"""Service layer — runs the checker and maps its outcomes to HTTP responses."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from fastapi import status
from fastapi.responses import JSONResponse

from src.api.schemas import (
    AnalysisResult,
    DiscoveryResponse,
    ErrorResponse,
    ToolFunction,
    ToolParameter,
)
from src.heuristics import (
    TOOL_DESCRIPTION,
    TOOL_NAME,
    FetchError,
    MalformedInputError,
    SpeedHeuristicsChecker,
)

logger = logging.getLogger(__name__)

TOOL_ENDPOINT = f"/tools/{TOOL_NAME}"


def build_discovery(auth_enabled: bool = False) -> DiscoveryResponse:
    """Describe the tool for discovery clients."""
    auth = [{"provider": "bearer", "scope_bundle": "tools", "required": True}] if auth_enabled else []
    return DiscoveryResponse(
        functions=[
            ToolFunction(
                name=TOOL_NAME,
                description=TOOL_DESCRIPTION,
                parameters=[
                    ToolParameter(
                        name="url",
                        type="string",
                        description="URL to analyse",
                        required=True,
                    )
                ],
                endpoint=TOOL_ENDPOINT,
                http_method="POST",
                auth_requirements=auth,
            )
        ]
    )


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


async def run_checker(
    checker: SpeedHeuristicsChecker,
    parameters: Mapping[str, Any],
) -> AnalysisResult | JSONResponse:
    """Run one analysis; failures become ``{"error": ...}`` responses."""
    try:
        return await checker.run(parameters)
    except MalformedInputError as exc:
        logger.warning("rejected tool call", extra={"reason": exc.message})
        return _error(status.HTTP_400_BAD_REQUEST, exc.message)
    except FetchError as exc:
        logger.warning(
            "analysis aborted",
            extra={"url": exc.url, "status": exc.status_code, "reason": exc.message},
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)
    except Exception:
        logger.exception("analysis failed", extra={"url": parameters.get("url")})
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Analysis failed")
