"""Supported Gemini models and their temperature bounds."""

from src.models.schemas import ModelOption

# Models without an explicit ceiling are capped at 1.0
DEFAULT_MAX_TEMPERATURE = 1.0

SUPPORTED_MODELS: tuple[ModelOption, ...] = (
    ModelOption(id="gemini-1.5-pro", label="Gemini 1.5 Pro", max_temperature=2.0),
    ModelOption(id="gemini-1.5-flash", label="Gemini 1.5 Flash", max_temperature=1.0),
)

DEFAULT_MODEL = SUPPORTED_MODELS[0].id
DEFAULT_TEMPERATURE = 0.7


def is_supported(model_id: str) -> bool:
    return any(option.id == model_id for option in SUPPORTED_MODELS)


def get_model_option(model_id: str) -> ModelOption:
    """Look up a supported model.

    Args:
        model_id: Model identifier, e.g. ``gemini-1.5-pro``.

    Returns:
        The matching ModelOption.

    Raises:
        ValueError: If the identifier is not supported.
    """
    for option in SUPPORTED_MODELS:
        if option.id == model_id:
            return option
    supported = ", ".join(option.id for option in SUPPORTED_MODELS)
    raise ValueError(f"Unsupported model '{model_id}'. Choose one of: {supported}")


def max_temperature_for(model_id: str) -> float:
    for option in SUPPORTED_MODELS:
        if option.id == model_id:
            return option.max_temperature
    return DEFAULT_MAX_TEMPERATURE


def clamp_temperature(value: float, model_id: str) -> float:
    """Clamp a temperature into ``[0, max_temperature_for(model_id)]``."""
    return min(max(float(value), 0.0), max_temperature_for(model_id))


def model_labels() -> dict[str, str]:
    """Map model identifiers to display labels, in display order."""
    return {option.id: option.label for option in SUPPORTED_MODELS}
