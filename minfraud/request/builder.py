"""Fluent builder shared by all request models."""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import InvalidFieldError

ModelT = TypeVar("ModelT", bound=BaseModel)


class Builder(Generic[ModelT]):
    """Collects field values and produces a validated, frozen model.

    Every model field (plus any names listed in the model's
    ``builder_inputs``) is available as a chainable setter::

        event = Event.builder().transaction_id("t12").shop_id("s2").build()
    """

    def __init__(self, model: type[ModelT], **values: Any) -> None:
        self._model = model
        self._values: dict[str, Any] = dict(values)

    def _setter_names(self) -> set[str]:
        return set(self._model.model_fields) | set(getattr(self._model, "builder_inputs", ()))

    def __getattr__(self, name: str) -> Callable[[Any], "Builder[ModelT]"]:
        if name.startswith("_") or name not in self._setter_names():
            raise AttributeError(f"{type(self).__name__} for {self._model.__name__} has no setter {name!r}")

        def setter(value: Any) -> "Builder[ModelT]":
            self._values[name] = value
            return self

        return setter

    def build(self) -> ModelT:
        try:
            return self._model(**self._values)
        except ValidationError as exc:
            raise InvalidFieldError.from_validation_error(exc) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._model.__name__}, fields={sorted(self._values)})"
