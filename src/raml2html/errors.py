"""Render pipeline errors.

Every failure inside the pipeline is surfaced as exactly one RenderError
subclass. None of them are retried; a failure discards the whole render.
"""


class RenderError(Exception):
    """Base class for failures reported by the render pipeline.

    Attributes:
        stage: Pipeline stage that failed ("parse", "template", "post_process")
        message: Human-readable description
    """

    stage = "render"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON logging."""
        return {"stage": self.stage, "message": self.message}


class ParseError(RenderError):
    """Raised when the source document cannot be read or parsed."""

    stage = "parse"


class TemplateError(RenderError):
    """Raised when the main template or a partial fails to compile or render."""

    stage = "template"


class PostProcessError(RenderError):
    """Raised when the post-processing step rejects the rendered output."""

    stage = "post_process"
