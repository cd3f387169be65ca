"""Pydantic integration: serialization, deserialization and JSON schema.

``ImeiField`` is an ``Annotated`` form of :class:`~imei.Imei` that pydantic
models can use directly::

    class Device(BaseModel):
        imei: ImeiField

On the wire an IMEI is a plain JSON string. Decoding always goes through
:meth:`Imei.try_new`; there is no coercion from numbers or bytes and no
whitespace stripping, regardless of model config.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler, TypeAdapter, ValidationError
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from imei.domain.checksum import IMEI_EXAMPLE, IMEI_LENGTH, IMEI_PATTERN
from imei.domain.errors import InvalidImeiError, InvalidReason
from imei.domain.imei import Imei

IMEI_JSON_SCHEMA: dict[str, Any] = {
    "type": "string",
    "title": "IMEI",
    "description": "International Mobile Equipment Identity: 15 digits with a Luhn check digit.",
    "pattern": IMEI_PATTERN,
    "minLength": IMEI_LENGTH,
    "maxLength": IMEI_LENGTH,
    "examples": [IMEI_EXAMPLE],
}


class _ImeiAnnotation:
    """Pydantic hooks for :class:`Imei`, attached via ``Annotated``."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source_type: Any, _handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.chain_schema(
            [
                core_schema.str_schema(strict=True, strip_whitespace=False),
                core_schema.no_info_plain_validator_function(Imei.try_new),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(Imei), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                Imei.into_inner,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: core_schema.CoreSchema, _handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {**IMEI_JSON_SCHEMA, "examples": list(IMEI_JSON_SCHEMA["examples"])}


ImeiField = Annotated[Imei, _ImeiAnnotation]

imei_adapter: TypeAdapter[Imei] = TypeAdapter(ImeiField)


def dump_json(imei: Imei) -> str:
    """Serialize *imei* as a JSON string literal, e.g. ``'"354406185514933"'``."""
    return imei_adapter.dump_json(imei).decode("utf-8")


def load_json(data: str | bytes) -> Imei:
    """Decode a JSON string literal into an :class:`Imei`.

    Raises:
        InvalidImeiError: The JSON value is not a string holding a valid IMEI.
        pydantic.ValidationError: *data* is not well-formed JSON.
    """
    try:
        return imei_adapter.validate_json(data)
    except ValidationError as exc:
        for err in exc.errors():
            cause = err.get("ctx", {}).get("error")
            if isinstance(cause, InvalidImeiError):
                raise cause from exc
            if err["type"] == "string_type":
                raise InvalidImeiError(err["input"], InvalidReason.NON_DIGIT) from exc
        raise


def json_schema() -> dict[str, Any]:
    """JSON schema describing an IMEI value."""
    return imei_adapter.json_schema()
