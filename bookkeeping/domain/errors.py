"""Domain error codes for the bookkeeping module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_INPUT = "INVALID_INPUT"
    UNKNOWN_PRICING_OPTION = "UNKNOWN_PRICING_OPTION"
    PROGRAM_NOT_FOUND = "PROGRAM_NOT_FOUND"
    SEASON_NOT_FOUND = "SEASON_NOT_FOUND"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidInputError(DomainError):
    """Raised when a value violates a domain invariant (negative, out of range)."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_INPUT,
            message=f"{field}: {message}",
        )
        object.__setattr__(self, "field", field)


class UnknownPricingOptionError(DomainError):
    """Raised when a registration entry references a missing or inactive option."""

    def __init__(self, pricing_option_id: str, inactive: bool = False) -> None:
        reason = "is inactive" if inactive else "does not exist"
        super().__init__(
            code=ErrorCode.UNKNOWN_PRICING_OPTION,
            message=f"Pricing option {pricing_option_id} {reason}",
        )
        object.__setattr__(self, "pricing_option_id", pricing_option_id)
        object.__setattr__(self, "inactive", inactive)


class ProgramNotFoundError(DomainError):
    """Raised when a program is not found."""

    def __init__(self, program_id: str) -> None:
        super().__init__(
            code=ErrorCode.PROGRAM_NOT_FOUND,
            message="Program not found",
        )
        object.__setattr__(self, "program_id", program_id)


class SeasonNotFoundError(DomainError):
    """Raised when a season is not found."""

    def __init__(self, season_id: str) -> None:
        super().__init__(
            code=ErrorCode.SEASON_NOT_FOUND,
            message="Season not found",
        )
        object.__setattr__(self, "season_id", season_id)
