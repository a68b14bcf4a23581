"""
Custom exception classes.

Represent rejections raised while validating a function config
and failures while resolving its package.
"""


class FunctionConfigError(Exception):
    """Base exception class for function config handling."""

    pass


class InvalidConfigurationError(FunctionConfigError):
    """Raised when a function config violates a validation rule."""

    def __init__(self, reason: str, field: str | None = None):
        self.reason = reason
        self.field = field
        super().__init__(reason)


class ArtifactError(FunctionConfigError):
    """Raised when a function package cannot be loaded or introspected."""

    def __init__(self, locator: str | None, detail: str, cause: Exception | None = None):
        self.locator = locator
        self.detail = detail
        self.cause = cause
        if locator:
            super().__init__(f"{detail}: {locator}")
        else:
            super().__init__(detail)
