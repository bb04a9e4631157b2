"""Generation proxy endpoint"""

import asyncio
import json
import logging
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse
from pydantic import ValidationError

from djkit.schemas import (
    ImageGenerationParams,
    StreamChunk,
    VideoFetchParams,
    VideoGenerationParams,
    VideoStatusParams,
    parse_generation_request,
)
from app.schemas.proxy import (
    ErrorResponse,
    ImageResponse,
    OperationResponse,
    ProxyRequest,
    ProxyTask,
)
from app.services.downloads import proxy_video_download
from app.services.gemini import GeminiService, get_gemini_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["proxy"])

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


def validation_message(error: ValidationError) -> str:
    """Describe the first invalid field of a params payload."""
    details = error.errors()
    if not details:
        return "Invalid parameters."
    first = details[0]
    field = ".".join(str(part) for part in first.get("loc", ()))
    if field:
        return f"Invalid parameter '{field}': {first['msg']}"
    return f"Invalid parameters: {first['msg']}"


async def _event_stream(
    first: Optional[StreamChunk],
    chunks: AsyncIterator[StreamChunk],
) -> AsyncIterator[str]:
    try:
        if first is not None:
            yield first.to_event()
        async for chunk in chunks:
            yield chunk.to_event()
    except asyncio.CancelledError:
        logger.info("[proxy] Client disconnected, closing provider stream")
        raise
    except Exception as e:
        logger.error(f"[proxy] Text stream failed: {e}")
        yield f"data: {json.dumps({'error': str(e)})}\n\n"
    finally:
        await chunks.aclose()


async def generate_stream(params: Dict[str, Any], service: GeminiService):
    request = parse_generation_request(params)
    chunks = service.stream_text(request)

    # Pull the first chunk now so a provider failure becomes a JSON error
    try:
        first = await chunks.__anext__()
    except StopAsyncIteration:
        first = None
    except BaseException:
        await chunks.aclose()
        raise

    return StreamingResponse(
        _event_stream(first, chunks),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


async def generate_image(params: Dict[str, Any], service: GeminiService):
    image_params = ImageGenerationParams.model_validate(params)
    image_bytes = await service.generate_image(image_params)
    return ImageResponse(imageBytes=image_bytes)


async def start_video_generation(params: Dict[str, Any], service: GeminiService):
    video_params = VideoGenerationParams.model_validate(params)
    operation = await service.start_video(video_params)
    return OperationResponse(operation=operation)


async def check_video_status(params: Dict[str, Any], service: GeminiService):
    status_params = VideoStatusParams.model_validate(params)
    operation = await service.check_video(status_params.operation)
    return OperationResponse(operation=operation)


async def fetch_video(params: Dict[str, Any], service: GeminiService):
    fetch_params = VideoFetchParams.model_validate(params)
    return await proxy_video_download(fetch_params.download_link, service.api_key)


TASK_HANDLERS = {
    ProxyTask.GENERATE_STREAM.value: generate_stream,
    ProxyTask.GENERATE_IMAGE.value: generate_image,
    ProxyTask.START_VIDEO_GENERATION.value: start_video_generation,
    ProxyTask.CHECK_VIDEO_STATUS.value: check_video_status,
    ProxyTask.FETCH_VIDEO.value: fetch_video,
}


def resolve_task(req: ProxyRequest) -> ProxyRequest:
    """Reject unknown tasks before the provider credential is looked up."""
    if req.task not in TASK_HANDLERS:
        logger.warning(f"[proxy] Invalid task: {req.task}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid task specified.",
        )
    return req


@router.post(
    "/geminiProxy",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def gemini_proxy(
    req: ProxyRequest = Depends(resolve_task),
    service: GeminiService = Depends(get_gemini_service),
):
    """
    Run one provider task on behalf of a client

    Args:
        req: ProxyRequest with the task name and its params
        service: GeminiService holding the provider credential

    Returns:
        An SSE stream for `generateStream`, the video bytes for `fetchVideo`,
        JSON otherwise
    """
    handler = TASK_HANDLERS[req.task]

    try:
        logger.info(f"[proxy] Handling task: {req.task}")
        return await handler(req.params, service)

    except HTTPException:
        raise
    except ValidationError as e:
        logger.warning(f"[proxy] Invalid params for {req.task}: {e.error_count()} error(s)")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=validation_message(e),
        )
    except Exception as e:
        logger.error(f"[proxy] Task {req.task} failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "An internal server error occurred.",
        )
