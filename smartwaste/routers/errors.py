from fastapi import HTTPException, status

from smartwaste.core.errors import InvalidDateError, NotFoundError, SmartWasteError, ValidationError


def to_http_exception(exc: SmartWasteError) -> HTTPException:
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, ValidationError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"kind": exc.kind.value, "message": exc.message},
        )
    if isinstance(exc, InvalidDateError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"kind": "invalid-date", "message": str(exc)},
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
