"""Validation utilities for termite configuration."""

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from termite.lib.errors import InvalidArgumentError

ModelT = TypeVar("ModelT", bound=BaseModel)


def describe_validation_errors(exc: PydanticValidationError) -> list[str]:
    """Describe each option that failed validation on one line.

    Lines read ``<option>: <problem>``. Items inside list options are
    addressed by index, e.g. ``symbols.1``.
    """
    described = []
    for error in exc.errors():
        option = ".".join(str(part) for part in error["loc"]) or "options"
        described.append(f"{option}: {error['msg']}")
    return described


def build_config(model: type[ModelT], **options: Any) -> ModelT:
    """Validate keyword options against a configuration model.

    Options set to None are dropped so the model default applies.

    Args:
        model: Pydantic model class to instantiate.
        **options: Field values.

    Returns:
        The validated model instance.

    Raises:
        InvalidArgumentError: Naming the first offending field, with every
            field error in the message.
    """
    supplied = {key: value for key, value in options.items() if value is not None}
    try:
        return model(**supplied)
    except PydanticValidationError as e:
        loc = e.errors()[0]["loc"] if e.errors() else ()
        field = str(loc[0]) if loc else "options"
        message = "; ".join(describe_validation_errors(e))
        raise InvalidArgumentError(field, message) from e
