"""Resolution model and post-resolver middlewares.

Main components:
- models: Resolution, ResolutionState
- translate_errors: TranslateErrors middleware
- pipeline: Middleware protocol and ResolutionPipeline
"""

from infrastructure.resolution.models import Resolution, ResolutionState
from infrastructure.resolution.pipeline import Middleware, ResolutionPipeline
from infrastructure.resolution.translate_errors import TranslateErrors, to_raw_error

__all__ = [
    "Resolution",
    "ResolutionState",
    "Middleware",
    "ResolutionPipeline",
    "TranslateErrors",
    "to_raw_error",
]
