"""Helpers that turn executor data into typed results at the boundary."""

from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..errors import UnexpectedResponseError
from .operations import OperationSpec


T = TypeVar("T")


def require_field(data: Mapping[str, Any], key: str, operation: OperationSpec) -> Any:
    if not isinstance(data, Mapping) or key not in data:
        raise UnexpectedResponseError(f"{operation.name} response is missing '{key}'")
    return data[key]


def require_bool(data: Mapping[str, Any], key: str, operation: OperationSpec) -> bool:
    value = require_field(data, key, operation)
    if not isinstance(value, bool):
        raise UnexpectedResponseError(
            f"{operation.name} returned {type(value).__name__} for '{key}', expected bool"
        )
    return value


def parse_model(
    model: Union[Type[T], TypeAdapter],
    value: Any,
    operation: OperationSpec,
) -> T:
    try:
        if isinstance(model, TypeAdapter):
            return model.validate_python(value)
        if isinstance(model, type) and issubclass(model, BaseModel):
            return model.model_validate(value)
        return TypeAdapter(model).validate_python(value)
    except ValidationError as e:
        raise UnexpectedResponseError(f"{operation.name} returned malformed data: {e}") from e
