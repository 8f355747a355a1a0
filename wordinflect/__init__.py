"""English inflection: noun plurals, ordinals, present participles and numbers in words."""

__version__ = "0.1.0"
__all__ = ["number", "ordinal", "plural", "participle"]