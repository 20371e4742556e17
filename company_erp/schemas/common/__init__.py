from company_erp.schemas.common.base import BaseSchema, CamelSchema
from company_erp.schemas.common.response import (
    DataResponse,
    ErrorDetail,
    ErrorResponse,
    ListResponse,
    TokenResponse,
    error_responses,
)

__all__ = [
    "BaseSchema",
    "CamelSchema",
    "DataResponse",
    "ErrorDetail",
    "ErrorResponse",
    "ListResponse",
    "TokenResponse",
    "error_responses",
]
