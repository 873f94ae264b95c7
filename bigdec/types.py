"""Pydantic field types for decimals.

DecStr accepts a Dec, an int or decimal text and serializes to the
canonical string, so models round-trip through JSON without losing scale.
"""

from typing import Annotated, Any

from pydantic import Field, GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from bigdec.dec import Dec
from bigdec.errors import ParseError


def validate_dec(value: Any) -> Dec:
    """Validate and convert a value to Dec.

    Args:
        value: Dec, int, or decimal string (e.g. "12.50")

    Returns:
        The value as a Dec

    Raises:
        ValueError: If value is not a supported type or not valid decimal text
    """
    if isinstance(value, Dec):
        return value

    # Accept int directly (bool is not a number here)
    if isinstance(value, int) and not isinstance(value, bool):
        return Dec.from_int(value)

    if not isinstance(value, str):
        raise ValueError(f"Dec must be string, int or Dec, got {type(value).__name__}")

    try:
        return Dec.parse(value)
    except ParseError as err:
        raise ValueError(f"Dec must be a decimal string: '{value}'") from err


class _DecAnnotation:
    """Schema hooks that let pydantic validate and serialize Dec."""

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            validate_dec,
            serialization=core_schema.plain_serializer_function_ser_schema(str, when_used="always"),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return handler(core_schema.str_schema(pattern=r"^[+-]?(\d+\.?\d*|\.\d+)$"))


# Decimal with explicit scale, exchanged as its canonical string
DecStr = Annotated[
    Dec,
    _DecAnnotation,
    Field(description="Decimal number as string; digits after the point set the scale"),
]
