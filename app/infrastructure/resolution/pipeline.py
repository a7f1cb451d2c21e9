"""Composition of resolution middlewares."""

from typing import Iterable, List, Optional, Protocol

from infrastructure.resolution.models import Resolution


class Middleware(Protocol):
    """One stage of resolution post-processing."""

    def call(self, resolution: Resolution) -> Resolution:
        """Return the (possibly updated) resolution."""
        ...  # pylint: disable=unnecessary-ellipsis


class ResolutionPipeline:
    """Runs middlewares in order over one resolution.

    A pipeline is itself a Middleware, so pipelines nest.

    Example:
        pipeline = ResolutionPipeline([TranslateErrors(translator)])
        resolution = pipeline.call(resolution)
    """

    def __init__(self, middlewares: Optional[Iterable[Middleware]] = None):
        self.middlewares: List[Middleware] = list(middlewares or [])

    def append(self, middleware: Middleware) -> "ResolutionPipeline":
        """Add a stage at the end and return the pipeline."""
        self.middlewares.append(middleware)
        return self

    def call(self, resolution: Resolution) -> Resolution:
        for middleware in self.middlewares:
            resolution = middleware.call(resolution)
        return resolution

    def __len__(self) -> int:
        return len(self.middlewares)
