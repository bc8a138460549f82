"""Request/response Pydantic models."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ToolCallRequest(BaseModel):
    """Body of a discovery-style tool invocation: ``{"parameters": {...}}``."""

    parameters: dict[str, Any] = {}


class AnalysisResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    total_scripts: int = Field(0, ge=0, alias="totalScripts")
    blocking_scripts: int = Field(0, ge=0, alias="blockingScripts")
    inline_script_kb: int = Field(0, ge=0, alias="inlineScriptKB")
    total_images: int = Field(0, ge=0, alias="totalImages")
    images_missing_lazy_load: int = Field(0, ge=0, alias="imagesMissingLazyLoad")
    suspected_large_images: int = Field(0, ge=0, alias="suspectedLargeImages")
    performance_smell_score: int = Field(100, ge=0, le=100, alias="performanceSmellScore")
    notes: list[str] = []


class ErrorResponse(BaseModel):
    error: str


class ToolParameter(BaseModel):
    name: str
    type: Literal["string", "integer", "number", "boolean", "list", "dictionary"]
    description: str
    required: bool = True


class ToolFunction(BaseModel):
    name: str
    description: str
    parameters: list[ToolParameter] = []
    endpoint: str
    http_method: str = "POST"
    auth_requirements: list[dict[str, Any]] = []


class DiscoveryResponse(BaseModel):
    functions: list[ToolFunction] = []
