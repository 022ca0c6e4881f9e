"""JSON chat endpoints.

Same dispatch semantics as the chat page: one generation call per request,
temperature clamped to the model maximum, every failure collapsed into the
generic error message.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from src.agent.chat_agent import get_agent_service
from src.chat.catalog import SUPPORTED_MODELS, clamp_temperature, is_supported
from src.chat.state import GENERIC_ERROR_MESSAGE
from src.models.schemas import ChatRequest, ChatResponse, ModelOption, current_timestamp

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


def _resolve_model(requested: str | None, default: str) -> str:
    """Pick the model for a request.

    Args:
        requested: Model from the request body, if any.
        default: Configured default model.

    Returns:
        A supported model identifier.

    Raises:
        HTTPException: 422 if the requested model is not supported.
    """
    model_id = requested or default
    if not is_supported(model_id):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unsupported model: {model_id}",
        )
    return model_id


@router.get("/models", response_model=list[ModelOption])
async def list_models() -> list[ModelOption]:
    """List selectable models with their temperature ceilings."""
    return list(SUPPORTED_MODELS)


@router.post("", response_model=ChatResponse)
async def chat(request: ChatRequest) -> ChatResponse:
    """Generate a single complete response for a prompt.

    Args:
        request: Prompt with optional model and temperature.

    Returns:
        ChatResponse with the text and the parameters actually used.

    Raises:
        422: Empty message, negative temperature or unsupported model.
        502: The Gemini call failed for any reason.
    """
    service = get_agent_service()
    model_id = _resolve_model(request.model, service.config.default_model)
    requested_temperature = (
        request.temperature
        if request.temperature is not None
        else service.config.default_temperature
    )
    temperature = clamp_temperature(requested_temperature, model_id)

    try:
        text = await service.generate(request.message, model_id, temperature)
    except Exception as e:
        logger.exception(f"Error fetching data from {model_id}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=GENERIC_ERROR_MESSAGE,
        ) from e

    return ChatResponse(
        response=text,
        model=model_id,
        temperature=temperature,
        timestamp=current_timestamp(),
    )
