"""
Entity descriptions for the blazenaming blog example.

A real ORM collects this metadata from model classes; plain dataclasses are
enough to show which names the strategy is asked for.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Property:
    name: str
    column: Optional[str] = None


@dataclass(frozen=True)
class Embedded:
    name: str
    properties: List[Property] = field(default_factory=list)


@dataclass(frozen=True)
class ManyToMany:
    name: str
    target: str
    inverse: str


@dataclass(frozen=True)
class Entity:
    class_name: str
    table: Optional[str] = None
    properties: List[Property] = field(default_factory=list)
    embedded: List[Embedded] = field(default_factory=list)
    many_to_many: List[ManyToMany] = field(default_factory=list)


Address = Embedded(
    "homeAddress",
    [Property("streetLine"), Property("postalCode", column="zip_code")],
)

BLOG_ENTITIES = [
    Entity(
        "Author",
        properties=[Property("id"), Property("displayName"), Property("email")],
        embedded=[Address],
    ),
    Entity(
        "BlogPost",
        properties=[Property("id"), Property("title"), Property("publishedAt")],
        many_to_many=[ManyToMany("tags", target="Tag", inverse="blogPosts")],
    ),
    Entity(
        "Tag",
        table="post_tags",
        properties=[Property("id"), Property("label")],
    ),
]
