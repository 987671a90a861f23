from .statement_serializer import (
    encode_value,
    serialize_reference,
    serialize_snak,
    serialize_statement,
)

__all__ = ["encode_value", "serialize_reference", "serialize_snak", "serialize_statement"]
