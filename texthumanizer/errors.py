"""Domain exceptions for the transformation engine and CLI diagnostics."""

from __future__ import annotations


class InvalidInputError(TypeError):
    """Raised when the engine receives input that is not a text string."""

    def __init__(self, value: object) -> None:
        """Initialize with the offending value's type name."""

        self.received_type = type(value).__name__
        super().__init__(f"Input must be a string, got `{self.received_type}`.")


class CommandStageError(RuntimeError):
    """Raised when a specific CLI command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
