from pydantic import BaseModel, Field
from typing import Any, Dict
import enum


class ProxyTask(str, enum.Enum):
    GENERATE_STREAM = "generateStream"
    GENERATE_IMAGE = "generateImage"
    START_VIDEO_GENERATION = "startVideoGeneration"
    CHECK_VIDEO_STATUS = "checkVideoStatus"
    FETCH_VIDEO = "fetchVideo"


class ProxyRequest(BaseModel):
    task: str
    params: Dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    error: str


class ImageResponse(BaseModel):
    imageBytes: str


class OperationResponse(BaseModel):
    operation: Dict[str, Any]
