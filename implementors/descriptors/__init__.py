"""Public API for structured implementor descriptors."""

from .implementor_descriptor import ImplementorDescriptor
from .markup_parser import markup_to_text, parse_implementor

__all__ = ["ImplementorDescriptor", "markup_to_text", "parse_implementor"]
