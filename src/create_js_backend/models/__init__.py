"""create-js-backend data models - re-exports all public model classes."""

from create_js_backend.models.config import GeneratorConfig, load_generator_config
from create_js_backend.models.result import GenerationResult, GenerationState, StepOutcome

__all__ = [
    "GenerationResult",
    "GenerationState",
    "GeneratorConfig",
    "StepOutcome",
    "load_generator_config",
]
