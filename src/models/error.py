"""Error payload returned by every failing endpoint."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Human readable message plus the HTTP status code as a string."""

    message: str = Field(description="Human readable error message")
    code: str = Field(description="HTTP status code, e.g. '400'")

    @classmethod
    def for_status(cls, message: str, status_code: int) -> "ErrorResponse":
        return cls(message=message, code=str(status_code))
