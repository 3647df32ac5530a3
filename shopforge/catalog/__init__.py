"""Insertable section catalog."""

from .lib import (
    LANDING_TEMPLATES,
    PRODUCT_TEMPLATES,
    SectionTemplate,
    get_template,
    list_templates,
)

__all__ = [
    "SectionTemplate",
    "LANDING_TEMPLATES",
    "PRODUCT_TEMPLATES",
    "list_templates",
    "get_template",
]
