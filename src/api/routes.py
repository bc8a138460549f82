"""GET /discovery and the speed_heuristics_checker tool endpoint handlers."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from src.api.schemas import AnalysisResult, DiscoveryResponse, ErrorResponse, ToolCallRequest
from src.api.service import TOOL_ENDPOINT, build_discovery, run_checker
from src.auth.dependencies import require_bearer_token
from src.config import Settings, get_settings
from src.heuristics import SpeedHeuristicsChecker

router = APIRouter()
tools_router = APIRouter(dependencies=[Depends(require_bearer_token)])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_checker(request: Request) -> SpeedHeuristicsChecker:
    return request.app.state.checker


@router.get("/discovery", response_model=DiscoveryResponse)
async def discovery(settings: Settings = Depends(get_settings)):
    return build_discovery(auth_enabled=bool(settings.tool_bearer_token))


@tools_router.post(
    TOOL_ENDPOINT,
    response_model=AnalysisResult,
    responses=_ERROR_RESPONSES,
)
async def call_tool(
    body: ToolCallRequest,
    checker: SpeedHeuristicsChecker = Depends(get_checker),
):
    return await run_checker(checker, body.parameters)


@tools_router.get(
    TOOL_ENDPOINT,
    response_model=AnalysisResult,
    responses=_ERROR_RESPONSES,
)
async def check_url(
    url: str | None = None,
    checker: SpeedHeuristicsChecker = Depends(get_checker),
):
    return await run_checker(checker, {"url": url})


router.include_router(tools_router)
