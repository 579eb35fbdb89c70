"""
Translation of domain errors into HTTP responses.

The response ``detail`` carries the error's numeric code so clients can
distinguish, for example, an unregistered record (code 0) from a duplicate
nia without parsing messages.
"""
from fastapi import HTTPException, status

from student_records.exceptions import (
    DuplicateNiaError,
    NotRecordOwnerError,
    NotRegistryAdminError,
    RecordNotFoundError,
    RecordNotRegisteredError,
    RecordsError,
    RegistryNotEmptyError,
    RegistryNotFoundError,
)

_STATUS_BY_ERROR = {
    RegistryNotFoundError: status.HTTP_404_NOT_FOUND,
    RecordNotFoundError: status.HTTP_404_NOT_FOUND,
    NotRecordOwnerError: status.HTTP_403_FORBIDDEN,
    NotRegistryAdminError: status.HTTP_403_FORBIDDEN,
    DuplicateNiaError: status.HTTP_409_CONFLICT,
    RecordNotRegisteredError: status.HTTP_409_CONFLICT,
    RegistryNotEmptyError: status.HTTP_409_CONFLICT,
}


def to_http_exception(err: RecordsError) -> HTTPException:
    status_code = _STATUS_BY_ERROR.get(type(err), status.HTTP_400_BAD_REQUEST)
    return HTTPException(status_code=status_code, detail={"code": err.code, "message": err.message})
