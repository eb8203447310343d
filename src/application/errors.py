from __future__ import annotations

from typing import Any, Mapping

from src.domain.errors import (
    CalculationError,
    DataInsufficientError,
    InfraError,
    KpiDomainError,
    MetricError,
    PeriodError,
)
from src.domain.errors import ValidationError as KpiValidationError


class AppError(Exception):
    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class AuthError(AppError):
    code = "auth_error"
    status_code = 401


class NotFound(AppError):
    code = "not_found"
    status_code = 404


class ValidationError(AppError):
    code = "validation_error"
    status_code = 422


class PeriodValidationError(ValidationError):
    code = "period_error"


class DataInsufficient(NotFound):
    code = "data_insufficient"


class CalculationFailed(AppError):
    code = "calculation_error"
    status_code = 500


class InfrastructureError(AppError):
    code = "infrastructure_error"
    status_code = 500


def app_error_from_kpi(error: KpiDomainError) -> AppError:
    """Translate a KPI domain error into an HTTP-facing application error.

    Only the message and the variant's own context reach the client; causes
    (driver errors, exceptions) stay in the logs.
    """
    if isinstance(error, KpiValidationError):
        details = {"field": error.field} if error.field else None
        return ValidationError(error.message, details=details)
    if isinstance(error, PeriodError):
        details = {"invalid_period": error.invalid_period} if error.invalid_period else None
        return PeriodValidationError(error.message, details=details)
    if isinstance(error, DataInsufficientError):
        details = {"required_data": list(error.required_data)} if error.required_data else None
        return DataInsufficient(error.message, details=details)
    if isinstance(error, MetricError):
        details = {"metric_type": error.metric_type} if error.metric_type else None
        return CalculationFailed(error.message, details=details)
    if isinstance(error, CalculationError):
        return CalculationFailed(error.message)
    if isinstance(error, InfraError):
        return InfrastructureError(error.message)
    return InfrastructureError("Unexpected error")
