"""Request validation helpers."""

from __future__ import annotations

from typing import Type, TypeVar

from flask import request
from pydantic import BaseModel, ValidationError

M = TypeVar("M", bound=BaseModel)


def jsonable_errors(exc: ValidationError) -> list[dict]:
    errors = exc.errors()
    for err in errors:
        if "ctx" in err and isinstance(err["ctx"], dict):
            err["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
    return errors


def parse_json(schema_cls: Type[M]) -> tuple[M | None, ValidationError | None]:
    payload = request.get_json(silent=True) or {}
    try:
        return schema_cls.model_validate(payload), None
    except ValidationError as exc:
        return None, exc


def parse_query(schema_cls: Type[M]) -> tuple[M | None, ValidationError | None]:
    data = {k: v for k, v in request.args.items()}
    try:
        return schema_cls.model_validate(data), None
    except ValidationError as exc:
        return None, exc
