from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from blockfinder.errors import BlockFinderError, ErrorCode

InputT = TypeVar("InputT", bound=BaseModel)


def parse_input(model: type[InputT], **arguments: Any) -> InputT:
    """Validate raw tool arguments, raising ``BlockFinderError`` on bad input."""
    try:
        return model(**arguments)
    except ValidationError as exc:
        first = exc.errors()[0]
        raise BlockFinderError(
            code=ErrorCode.INVALID_INPUT,
            message=first["msg"].removeprefix("Value error, "),
            suggestion="Check the tool arguments and try again.",
        ) from exc
