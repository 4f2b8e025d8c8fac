"""
Derive every physical name of the blog example with a naming strategy.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Union

from blazenaming import NamingStrategy, get_naming_strategy
from blazenaming.utils import configure_logging, get_logger

from .models import BLOG_ENTITIES, Entity

logger = get_logger("examples.blog_schema")


def build_schema(
    entities: Sequence[Entity],
    strategy: Optional[Union[str, NamingStrategy]] = None,
) -> Dict[str, List[str]]:
    """
    Return a mapping of table name to column names, join tables included.
    """

    naming = get_naming_strategy(strategy)
    tables = {
        entity.class_name: naming.table_name(entity.class_name, entity.table)
        for entity in entities
    }
    schema: Dict[str, List[str]] = {}

    for entity in entities:
        columns = [naming.column_name(prop.name, prop.column, []) for prop in entity.properties]
        for embedded in entity.embedded:
            columns.extend(
                naming.column_name(prop.name, prop.column, [embedded.name])
                for prop in embedded.properties
            )
        schema[tables[entity.class_name]] = columns

    for entity in entities:
        owner = tables[entity.class_name]
        for relation in entity.many_to_many:
            target = tables[relation.target]
            join_table = naming.join_table_name(owner, target, relation.name, relation.inverse)
            schema[join_table] = [
                naming.join_table_column_name(owner, "id"),
                naming.join_table_column_name(target, "id"),
            ]

    return schema


def run_demo(strategy: Optional[Union[str, NamingStrategy]] = "strict") -> Dict[str, List[str]]:
    configure_logging()
    schema = build_schema(BLOG_ENTITIES, strategy)
    for table, columns in schema.items():
        logger.info("%s: %s", table, ", ".join(columns))
    return schema


if __name__ == "__main__":  # pragma: no cover
    run_demo()
