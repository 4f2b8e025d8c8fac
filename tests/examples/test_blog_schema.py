import pytest

from blazenaming import TableClassNameMustBePascalCaseError
from examples.blog_schema import BLOG_ENTITIES, Entity, Property, build_schema, run_demo


def test_blog_schema_names():
    schema = build_schema(BLOG_ENTITIES, "strict")
    assert schema["authors"] == [
        "id",
        "display_name",
        "email",
        "home_address_street_line",
        "home_address_zip_code",
    ]
    assert schema["blog_posts"] == ["id", "title", "published_at"]
    assert schema["post_tags"] == ["id", "label"]
    assert schema["blog_posts_tags_post_tags"] == ["blog_post_id", "post_tag_id"]


def test_strict_strategy_rejects_lowercase_entity():
    with pytest.raises(TableClassNameMustBePascalCaseError):
        build_schema([Entity("author", properties=[Property("id")])], "strict")
    assert build_schema([Entity("author", properties=[Property("id")])]) == {"authors": ["id"]}


def test_run_demo_returns_schema():
    schema = run_demo()
    assert set(schema) == {"authors", "blog_posts", "post_tags", "blog_posts_tags_post_tags"}
