"""Breeding KPI domain errors.

Errors are plain values returned inside ``Err`` results, never raised. The
HTTP layer turns them into ``AppError`` exceptions at the edge.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, ClassVar, Literal, Union


@dataclass(frozen=True, slots=True)
class ValidationError:
    message: str
    field: str | None = None
    type: ClassVar[Literal["ValidationError"]] = "ValidationError"


@dataclass(frozen=True, slots=True)
class CalculationError:
    message: str
    cause: str | None = None
    type: ClassVar[Literal["CalculationError"]] = "CalculationError"


@dataclass(frozen=True, slots=True)
class DataInsufficientError:
    message: str
    required_data: tuple[str, ...] | None = None
    type: ClassVar[Literal["DataInsufficientError"]] = "DataInsufficientError"


@dataclass(frozen=True, slots=True)
class PeriodError:
    message: str
    invalid_period: str | None = None
    type: ClassVar[Literal["PeriodError"]] = "PeriodError"


@dataclass(frozen=True, slots=True)
class MetricError:
    message: str
    metric_type: str | None = None
    value: float | None = None
    type: ClassVar[Literal["MetricError"]] = "MetricError"


@dataclass(frozen=True, slots=True)
class InfraError:
    message: str
    cause: BaseException | None = None
    type: ClassVar[Literal["InfraError"]] = "InfraError"


KpiDomainError = Union[
    ValidationError,
    CalculationError,
    DataInsufficientError,
    PeriodError,
    MetricError,
    InfraError,
]


def create_validation_error(message: str, field: str | None = None) -> ValidationError:
    return ValidationError(message=message, field=field)


def create_calculation_error(message: str, cause: str | None = None) -> CalculationError:
    return CalculationError(message=message, cause=cause)


def create_data_insufficient_error(
    message: str, required_data: list[str] | tuple[str, ...] | None = None
) -> DataInsufficientError:
    return DataInsufficientError(
        message=message,
        required_data=tuple(required_data) if required_data is not None else None,
    )


def create_period_error(message: str, invalid_period: str | None = None) -> PeriodError:
    return PeriodError(message=message, invalid_period=invalid_period)


def create_metric_error(
    message: str, metric_type: str | None = None, value: float | None = None
) -> MetricError:
    return MetricError(message=message, metric_type=metric_type, value=value)


def create_infra_error(message: str, cause: BaseException | None = None) -> InfraError:
    return InfraError(message=message, cause=cause)


def get_error_message(error: KpiDomainError) -> str:
    """Human-readable (es) rendering of a domain error."""
    if isinstance(error, ValidationError):
        suffix = f" (campo: {error.field})" if error.field else ""
        return f"Error de validación: {error.message}{suffix}"
    if isinstance(error, CalculationError):
        suffix = f" (causa: {error.cause})" if error.cause else ""
        return f"Error de cálculo: {error.message}{suffix}"
    if isinstance(error, DataInsufficientError):
        suffix = (
            f" (datos requeridos: {', '.join(error.required_data)})"
            if error.required_data
            else ""
        )
        return f"Datos insuficientes: {error.message}{suffix}"
    if isinstance(error, PeriodError):
        suffix = f" (período inválido: {error.invalid_period})" if error.invalid_period else ""
        return f"Error de período: {error.message}{suffix}"
    if isinstance(error, MetricError):
        suffix = f" (indicador: {error.metric_type})" if error.metric_type else ""
        if error.value is not None:
            suffix += f" (valor: {error.value})"
        return f"Error de indicador: {error.message}{suffix}"
    if isinstance(error, InfraError):
        return f"Error de infraestructura: {error.message}"
    return "Error desconocido"


def get_error_details(error: KpiDomainError) -> dict[str, Any]:
    """Structured record of a domain error for logs."""
    details: dict[str, Any] = {"type": error.type, "message": error.message}
    if isinstance(error, ValidationError):
        details["field"] = error.field
    elif isinstance(error, CalculationError):
        details["cause"] = error.cause
    elif isinstance(error, DataInsufficientError):
        details["required_data"] = (
            list(error.required_data) if error.required_data is not None else None
        )
    elif isinstance(error, PeriodError):
        details["invalid_period"] = error.invalid_period
    elif isinstance(error, MetricError):
        details["metric_type"] = error.metric_type
        details["value"] = error.value
    elif isinstance(error, InfraError):
        details["cause"] = repr(error.cause) if error.cause is not None else None
    details["timestamp"] = datetime.now(timezone.utc).isoformat()
    return details
