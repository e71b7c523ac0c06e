"""Unified error codes and custom exceptions.

Error code ranges:
  4xxx: Request input
  9xxx: System (config, clock, sequence store)
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 4xxx: Request input ---

class InvalidSnowflakeError(AppError):
    def __init__(self, value: object) -> None:
        super().__init__(4001, f"Not a valid 64-bit snowflake id: {value}", 422)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)


class ConfigError(AppError):
    """Invalid or missing startup configuration. Fatal: the process must not serve."""

    def __init__(self, detail: str) -> None:
        super().__init__(9101, detail, 500)


class ClockError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(9102, f"Clock unusable: {detail}", 503)


class StoreUnavailableError(AppError):
    """The sequence store could not be reached or timed out.

    ``operation`` names the store call that failed; ``cause`` keeps the
    underlying transport exception (also chained as ``__cause__``).
    """

    def __init__(self, operation: str, cause: BaseException | None = None) -> None:
        self.operation = operation
        self.cause = cause
        detail = f"Couldn't {operation}"
        if cause is not None:
            detail = f"{detail}: {str(cause) or type(cause).__name__}"
        super().__init__(9103, detail, 503)


class SequenceExhaustedError(AppError):
    def __init__(self, machine_id: int, attempts: int) -> None:
        super().__init__(
            9104,
            f"Sequence exhausted for machine {machine_id} after {attempts} attempts",
            503,
        )
