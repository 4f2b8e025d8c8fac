"""
Blog-style sample schema showcasing blazenaming strategies.
"""

from .demo import build_schema, run_demo
from .models import BLOG_ENTITIES, Embedded, Entity, ManyToMany, Property

__all__ = [
    "BLOG_ENTITIES",
    "Embedded",
    "Entity",
    "ManyToMany",
    "Property",
    "build_schema",
    "run_demo",
]
