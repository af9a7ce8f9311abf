# Standard library imports
from typing import Any

# Third-party imports
from pydantic import BaseModel

# Error details may be a string, a list of strings, or a dict
DetailsType = str | list[str] | dict[str, Any]


class ErrorDetails(BaseModel):
    code: str
    message: str
    kind: str | None = None
    details: DetailsType | None = None


class BaseResponse(BaseModel):
    """
    Error envelope returned by every failing request.

    Successful requests return their resource model directly.
    """

    ok: bool = False
    error: ErrorDetails

    def model_dump(self, **kwargs: Any) -> dict[str, Any]:
        kwargs.setdefault("exclude_none", True)
        return super().model_dump(**kwargs)

    @classmethod
    def failure(
        cls,
        code: str,
        message: str,
        kind: str | None = None,
        details: DetailsType | None = None,
    ) -> "BaseResponse":
        return cls(error=ErrorDetails(code=code, message=message, kind=kind, details=details))
