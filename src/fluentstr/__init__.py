"""
fluentstr - A fluent wrapper around Python strings.

``StringWrapper`` carries a string through a chain of searching, slicing,
casing, trimming, replacing and splitting operations. Lookups that can
fail return an ``Option`` and split-like operations return an
``ArrayWrapper``.
"""

from fluentstr.option import Nothing, Option, Some, maybe, none, some
from fluentstr.sequence import ArrayWrapper
from fluentstr.wrapper import InPlace, StringWrapper

__version__ = "0.1.0"
__all__ = [
    "StringWrapper",
    "InPlace",
    "ArrayWrapper",
    "Option",
    "Some",
    "Nothing",
    "some",
    "none",
    "maybe",
]
