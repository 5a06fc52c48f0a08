"""Compact string codecs for shareable links."""

from furniture.application.codecs.column_codec import (
    CODE_TO_TYPE,
    TYPE_TO_CODE,
    decode_column_configs,
    encode_column_configs,
    is_valid_column_code,
)
from furniture.application.codecs.template_codec import (
    WARDROBE_CODEC,
    TemplateCodec,
    get_template_codec,
)

__all__ = [
    "CODE_TO_TYPE",
    "TYPE_TO_CODE",
    "TemplateCodec",
    "WARDROBE_CODEC",
    "decode_column_configs",
    "encode_column_configs",
    "get_template_codec",
    "is_valid_column_code",
]
