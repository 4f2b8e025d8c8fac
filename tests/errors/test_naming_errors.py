import pytest

from blazenaming.errors import (
    ColumnNameMustBeSnakeCaseError,
    ManyToManyPropertyMustBePluralError,
    NamingConventionError,
    PropertyNameMustBeCamelCaseError,
    TableClassNameMustBePascalCaseError,
    TableClassNameMustBeSingularError,
    TableNameMustBePluralError,
    TableNameMustBeSnakeCaseError,
)


@pytest.mark.parametrize(
    "error_cls, value, suggestion",
    [
        (TableNameMustBePluralError, "user", "users"),
        (TableNameMustBeSnakeCaseError, "UserAccounts", "user_accounts"),
        (TableClassNameMustBeSingularError, "Users", "User"),
        (TableClassNameMustBePascalCaseError, "user_account", "UserAccount"),
        (ColumnNameMustBeSnakeCaseError, "createdAt", "created_at"),
        (PropertyNameMustBeCamelCaseError, "created_at", "createdAt"),
        (ManyToManyPropertyMustBePluralError, "tag", "tags"),
    ],
)
def test_error_carries_value_and_suggestion(error_cls, value, suggestion):
    error = error_cls(value)
    assert isinstance(error, NamingConventionError)
    assert isinstance(error, ValueError)
    assert error.value == value
    assert error.suggestion == suggestion
    assert f"'{value}'" in str(error)
    assert f"'{suggestion}'" in str(error)


def test_rules_are_distinct():
    rules = {
        cls.rule
        for cls in (
            TableNameMustBePluralError,
            TableNameMustBeSnakeCaseError,
            TableClassNameMustBeSingularError,
            TableClassNameMustBePascalCaseError,
            ColumnNameMustBeSnakeCaseError,
            PropertyNameMustBeCamelCaseError,
            ManyToManyPropertyMustBePluralError,
        )
    }
    assert len(rules) == 7


def test_explicit_suggestion_overrides_default():
    error = TableNameMustBePluralError("person", suggestion="people")
    assert error.suggestion == "people"
    assert str(error) == "Table name must be plural; change 'person' to 'people'."
