"""threadstyle - rewrite style shorthand attributes into inline styles."""

__version__ = "0.3.0"

from threadstyle.config import ThreadConfig, load_config
from threadstyle.errors import ConfigurationError, OverlappingEditError, ThreadStyleError
from threadstyle.parser import ParseError, parse_markup
from threadstyle.patch import apply_edits
from threadstyle.preprocessor import ThreadPreprocessor, thread_preprocessor
from threadstyle.serializer import camel_to_kebab, serialize_properties
from threadstyle.thread import plan_edits, transform

__all__ = [
    "ConfigurationError",
    "OverlappingEditError",
    "ParseError",
    "ThreadConfig",
    "ThreadPreprocessor",
    "ThreadStyleError",
    "__version__",
    "apply_edits",
    "camel_to_kebab",
    "load_config",
    "parse_markup",
    "plan_edits",
    "serialize_properties",
    "thread_preprocessor",
    "transform",
]
