"""Resolver stages: structure -> duration bucket -> workout format."""

from wod_engine.resolvers.base import DrawContext, RandomSource
from wod_engine.resolvers.duration import resolve_duration
from wod_engine.resolvers.format import resolve_format
from wod_engine.resolvers.structure import resolve_structure

__all__ = [
    "DrawContext",
    "RandomSource",
    "resolve_duration",
    "resolve_format",
    "resolve_structure",
]
