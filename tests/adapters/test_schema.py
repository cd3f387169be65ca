"""Tests for the pydantic serialization and JSON schema adapter."""

from __future__ import annotations

import json

import pytest
from pydantic import BaseModel, ValidationError

from imei.adapters.schema import IMEI_JSON_SCHEMA, ImeiField, dump_json, json_schema, load_json
from imei.domain.errors import InvalidImeiError, InvalidReason
from imei.domain.imei import Imei


class Device(BaseModel):
    name: str
    imei: ImeiField


class StrippingDevice(BaseModel):
    model_config = {"str_strip_whitespace": True}

    imei: ImeiField


class TestJsonHelpers:
    def test_dump_is_plain_string(self) -> None:
        assert dump_json(Imei.try_new("354406185514933")) == '"354406185514933"'

    def test_load_reconstructs_equal_instance(self) -> None:
        original = Imei.try_new("354406185514933")
        assert load_json(dump_json(original)) == original

    def test_load_accepts_bytes(self) -> None:
        assert load_json(b'"490154203237518"') == Imei.try_new("490154203237518")

    @pytest.mark.parametrize(
        "raw,reason",
        [
            ('"123456789012345"', InvalidReason.CHECKSUM),
            ('"12345678901234"', InvalidReason.LENGTH),
            ('"12345678901234A"', InvalidReason.NON_DIGIT),
            ('" 490154203237518"', InvalidReason.LENGTH),
        ],
    )
    def test_load_rejects_invalid_strings(self, raw: str, reason: InvalidReason) -> None:
        with pytest.raises(InvalidImeiError) as exc_info:
            load_json(raw)
        assert exc_info.value.reason is reason

    def test_load_does_not_coerce_numbers(self) -> None:
        with pytest.raises(InvalidImeiError):
            load_json("490154203237518")

    def test_load_malformed_json(self) -> None:
        with pytest.raises(ValidationError):
            load_json('"490154203237518')


class TestModelField:
    def test_validate_from_json(self) -> None:
        device = Device.model_validate_json('{"name": "phone", "imei": "490154203237518"}')
        assert isinstance(device.imei, Imei)
        assert device.imei.into_inner() == "490154203237518"

    def test_validate_from_python_string(self) -> None:
        device = Device(name="phone", imei="490154203237518")  # type: ignore[arg-type]
        assert device.imei == Imei.try_new("490154203237518")

    def test_accepts_existing_instance(self) -> None:
        imei = Imei.try_new("490154203237518")
        assert Device(name="phone", imei=imei).imei == imei

    def test_dump_python(self) -> None:
        device = Device(name="phone", imei=Imei.try_new("354406185514933"))
        assert device.model_dump() == {"name": "phone", "imei": "354406185514933"}

    def test_dump_json(self) -> None:
        device = Device(name="phone", imei=Imei.try_new("354406185514933"))
        assert json.loads(device.model_dump_json()) == {"name": "phone", "imei": "354406185514933"}

    def test_invalid_string_fails(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Device.model_validate_json('{"name": "phone", "imei": "123456789012345"}')
        errors = exc_info.value.errors()
        assert errors[0]["loc"] == ("imei",)
        assert isinstance(errors[0]["ctx"]["error"], InvalidImeiError)

    @pytest.mark.parametrize("value", [490154203237518, b"490154203237518", None])
    def test_non_string_python_values_fail(self, value: object) -> None:
        with pytest.raises(ValidationError):
            Device(name="phone", imei=value)  # type: ignore[arg-type]

    def test_model_config_does_not_strip(self) -> None:
        with pytest.raises(ValidationError):
            StrippingDevice.model_validate_json('{"imei": " 490154203237518 "}')


class TestJsonSchema:
    def test_standalone_schema(self) -> None:
        schema = json_schema()
        assert schema["type"] == "string"
        assert schema["pattern"] == "^[0-9]{15}$"
        assert schema["examples"] == ["522872587498800"]
        assert schema["minLength"] == schema["maxLength"] == 15

    def test_model_schema_uses_imei_description(self) -> None:
        props = Device.model_json_schema()["properties"]["imei"]
        assert props["type"] == "string"
        assert props["pattern"] == IMEI_JSON_SCHEMA["pattern"]
        assert props["examples"] == IMEI_JSON_SCHEMA["examples"]

    def test_schema_constant_not_mutated(self) -> None:
        json_schema()["pattern"] = "changed"
        assert IMEI_JSON_SCHEMA["pattern"] == "^[0-9]{15}$"
