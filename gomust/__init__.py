"""gomust - generate Must wrappers for Go functions that return an error."""

__version__ = "0.1.0"

from .config import GeneratorConfig
from .pipeline import GenerationResult, run_pipeline
from .emit import render

__all__ = [
    "GeneratorConfig",
    "GenerationResult",
    "run_pipeline",
    "render",
]
