"""Domain exceptions for conversion and CLI diagnostics."""

from __future__ import annotations


class ConversionStageError(RuntimeError):
    """Raised when a specific conversion stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped conversion error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
