"""Render outcome entities.

A render produces exactly one RenderResult: either a RenderSuccess holding the
final output or a RenderFailure holding the error. Nothing in between is
observable.
"""

from dataclasses import dataclass

from raml2html.errors import RenderError


@dataclass(frozen=True)
class RenderSuccess:
    """Successful render.

    Attributes:
        output: Final rendered document (after post-processing, if enabled)
    """

    output: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class RenderFailure:
    """Failed render.

    Attributes:
        error: The parse, template or post-processing error
    """

    error: RenderError

    @property
    def ok(self) -> bool:
        return False

    @property
    def stage(self) -> str:
        """Pipeline stage that failed."""
        return self.error.stage


RenderResult = RenderSuccess | RenderFailure
