from fastapi import Query
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from typing import Callable, Optional, Type, TypeVar

from inkwell.database.engine import get_db

ModelType = TypeVar("ModelType", bound=BaseModel)

__all__ = ["get_db", "rpc_input"]


def rpc_input(model: Type[ModelType]) -> Callable[..., ModelType]:
    """
    Build a dependency that reads the input of an RPC query.

    Queries are plain GET requests, so their input travels JSON-encoded in the
    ``input`` query parameter:

        GET /rpc/getArticleBySlug?input={"slug":"intro-js"}

    A missing parameter is read as ``{}``, which lets inputs whose fields all
    have defaults be omitted entirely. Parse failures surface as
    ``RequestValidationError`` like any other FastAPI input error.
    """

    def dependency(
        raw_input: Optional[str] = Query(None, alias="input", description="JSON-encoded procedure input")
    ) -> ModelType:
        try:
            if raw_input is None:
                return model.model_validate({})
            return model.model_validate_json(raw_input)
        except ValidationError as e:
            raise RequestValidationError([
                {**error, "loc": ("query", "input", *error["loc"])}
                for error in e.errors(include_url=False)
            ])

    return dependency
