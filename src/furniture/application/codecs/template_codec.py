"""Template short-code codecs for rack-like and wardrobe families.

Each column is encoded as its template's short code, e.g. "OS,FD,HC".
Unknown codes decode to the family's default template with a warning.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from furniture.domain.templates import TemplateCatalog, get_template_catalog
from furniture.domain.value_objects import FurnitureFamily

logger = logging.getLogger(__name__)

WARDROBE_TEMPLATE_CODES: dict[str, str] = {
    "FULL_HANGING": "FH",
    "DOUBLE_HANGING": "DH",
    "HANGING_WITH_DRAWERS": "HD",
    "HANGING_WITH_SHELVES": "HS",
    "SHELVES_ONLY": "SO",
    "DRAWERS_ONLY": "DO",
    "MIXED_STORAGE_COMPLEX": "MS",
    "THREE_ZONE_COMBO": "TZ",
    "SHOE_STORAGE": "SS",
    "ACCESSORIES_ORGANIZER": "AO",
}


class TemplateCodec:
    """Bidirectional mapping between template ids and short codes.

    Args:
        label: Family label used in log messages.
        codes: Mapping of template id to short code.
        default_template_id: Template used for unknown ids and codes.
    """

    def __init__(self, label: str, codes: Mapping[str, str], default_template_id: str) -> None:
        if default_template_id not in codes:
            raise ValueError(f"Default template {default_template_id} has no code")
        self.label = label
        self.template_to_code = dict(codes)
        self.code_to_template = {code: tid for tid, code in codes.items()}
        self.default_template_id = default_template_id

    @classmethod
    def from_catalog(cls, catalog: TemplateCatalog) -> "TemplateCodec":
        return cls(
            label=catalog.family.value,
            codes={template.id: template.code for template in catalog},
            default_template_id=catalog.default_template_id,
        )

    def encode(self, template_ids: Iterable[str]) -> str:
        """Encode template ids; unknown ids encode as the default template."""
        default_code = self.template_to_code[self.default_template_id]
        return ",".join(self.template_to_code.get(tid, default_code) for tid in template_ids)

    def decode(self, encoded: str | None) -> list[str]:
        """Decode a code string into template ids. Never raises."""
        if not encoded or not isinstance(encoded, str):
            return []

        template_ids: list[str] = []
        for raw in encoded.split(","):
            code = raw.strip()
            if not code:
                continue
            template_id = self.code_to_template.get(code)
            if template_id is None:
                logger.warning(f"Unknown {self.label} configuration code: {code}")
                template_id = self.default_template_id
            template_ids.append(template_id)
        return template_ids

    def is_valid_code(self, code: str) -> bool:
        return code in self.code_to_template


WARDROBE_CODEC = TemplateCodec("wardrobe", WARDROBE_TEMPLATE_CODES, "SHELVES_ONLY")


def get_template_codec(family: FurnitureFamily | str) -> TemplateCodec:
    """Return the template codec of a family.

    Raises:
        KeyError: If the family has no template encoding.
    """
    family = FurnitureFamily(family)
    if family is FurnitureFamily.WARDROBE:
        return WARDROBE_CODEC
    return TemplateCodec.from_catalog(get_template_catalog(family))
