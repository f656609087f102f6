"""
Application errors and their JSON representation.
"""
from enum import Enum
from typing import Any, ClassVar, Dict, Optional


class ErrorCode(Enum):
    """Machine readable error codes returned by the API"""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"

    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    PLUGIN_NOT_FOUND = "PLUGIN_NOT_FOUND"

    DATABASE_ERROR = "DATABASE_ERROR"
    TEMPLATE_ERROR = "TEMPLATE_ERROR"


class BaseApplicationException(Exception):
    """Error carrying an HTTP status and an error code"""

    status_code: ClassVar[int] = 400
    default_error_code: ClassVar[ErrorCode] = ErrorCode.VALIDATION_ERROR

    def __init__(
        self,
        message: str,
        error_code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = (error_code or self.default_error_code).value
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "status_code": self.status_code,
        }


class ValidationException(BaseApplicationException):
    """Rejected input"""


class NotFoundException(BaseApplicationException):
    """Missing product, plugin or other entity"""

    status_code = 404
    default_error_code = ErrorCode.ENTITY_NOT_FOUND

    def __init__(
        self,
        entity_type: str,
        entity_id: Any = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[ErrorCode] = None,
    ):
        details = dict(details or {}, entity_type=entity_type)
        if entity_id is None:
            message = f"{entity_type} not found"
        else:
            message = f"{entity_type} with id '{entity_id}' not found"
            details["entity_id"] = entity_id
        super().__init__(message, error_code, details)


class InfrastructureException(BaseApplicationException):
    """Database or template failure"""

    status_code = 500
    default_error_code = ErrorCode.DATABASE_ERROR


class ExceptionFactory:
    """Shortcuts for the errors raised by the storefront"""

    @staticmethod
    def product_not_found(product_id: int) -> NotFoundException:
        return NotFoundException("Product", product_id, error_code=ErrorCode.PRODUCT_NOT_FOUND)

    @staticmethod
    def plugin_not_found(plugin_name: str) -> NotFoundException:
        return NotFoundException("Plugin", plugin_name, error_code=ErrorCode.PLUGIN_NOT_FOUND)
