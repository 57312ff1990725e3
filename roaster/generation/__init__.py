"""Generation package — heuristic and language-model text backends."""

from roaster.generation.prompts import strip_code_fences
from roaster.generation.providers import (
    HeuristicGenerator,
    LLMGenerator,
    OllamaGenerator,
    OpenAIGenerator,
    TextGenerator,
    build_generator,
)

__all__ = [
    "TextGenerator",
    "HeuristicGenerator",
    "LLMGenerator",
    "OpenAIGenerator",
    "OllamaGenerator",
    "build_generator",
    "strip_code_fences",
]
