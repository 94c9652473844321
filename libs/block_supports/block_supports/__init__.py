"""
block_supports : styles d'éléments par instance de bloc.

Usage:
    >>> from block_supports import render_elements_support
    >>> html = render_elements_support(block_content, parsed_block)

Usage (pipeline deux phases):
    >>> from block_supports import render_elements_support_styles, render_elements_class_name, get_store
    >>> block = render_elements_support_styles(parsed_block)
    >>> html  = render_elements_class_name(block_content, block)
    >>> css   = get_store("block-supports").get_stylesheet()
"""
from .elements import (
    ELEMENT_COLOR_PATHS,
    get_elements_class_name,
    should_add_elements_class_name,
    render_elements_support,
    render_elements_support_styles,
    render_elements_class_name,
)
from .errors import BlockSupportsError, BlockTypeRegistrationError
from .registry import BlockTypeRegistry, get_default_registry, should_skip_serialization
from .schemas import BlockType, ParsedBlock
from .style_engine import StyleStore, compile_value, get_store, get_styles
from .tag_processor import TagProcessor

__version__ = "0.1.0"

__all__ = [
    # elements
    "ELEMENT_COLOR_PATHS",
    "get_elements_class_name", "should_add_elements_class_name",
    "render_elements_support", "render_elements_support_styles", "render_elements_class_name",
    # registry
    "BlockTypeRegistry", "get_default_registry", "should_skip_serialization",
    "BlockType", "ParsedBlock",
    # style engine
    "StyleStore", "compile_value", "get_store", "get_styles",
    # html
    "TagProcessor",
    # erreurs
    "BlockSupportsError", "BlockTypeRegistrationError",
]
