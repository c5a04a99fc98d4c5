"""Attachment 及其组件"""

from .attachment import Attachment, AttachmentBuilder
from .components import (
    AttachmentField,
    Author,
    Color,
    ColorPreset,
    ComponentModel,
    Footer,
    Title,
)

__all__ = [
    "Attachment",
    "AttachmentBuilder",
    "AttachmentField",
    "Author",
    "Color",
    "ColorPreset",
    "ComponentModel",
    "Footer",
    "Title",
]
