"""Text generator clients."""

from .generate import TextGenerator, parse_json_object

__all__ = ["TextGenerator", "parse_json_object"]
