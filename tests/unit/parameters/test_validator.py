"""Tests for named placeholder extraction."""

import pytest

from sqlrelate.exceptions import ParameterError
from sqlrelate.parameters import ParameterValidator


@pytest.fixture
def validator() -> ParameterValidator:
    return ParameterValidator()


def test_extracts_names_in_order(validator: ParameterValidator) -> None:
    sql = "SELECT * FROM users WHERE id = :id AND name = :name OR id = :id"

    names = [info.name for info in validator.extract_parameters(sql)]

    assert names == ["id", "name", "id"]
    assert validator.parameter_names(sql) == ["id", "name"]


def test_reports_offsets(validator: ParameterValidator) -> None:
    sql = "SELECT :value"

    (info,) = validator.extract_parameters(sql)

    assert sql[info.start : info.end] == ":value"
    assert info.ordinal == 0
    assert info.placeholder_text == ":value"


@pytest.mark.parametrize(
    "sql",
    [
        "SELECT ':not_a_param' FROM t",
        'SELECT ":not_a_param" FROM t',
        "SELECT 1 -- :not_a_param",
        "SELECT /* :not_a_param */ 1",
        "SELECT $$ :not_a_param $$",
        "SELECT $body$ :not_a_param $body$",
        "SELECT created::timestamp FROM t",
    ],
    ids=["single_quote", "double_quote", "line_comment", "block_comment", "dollar", "dollar_tag", "cast"],
)
def test_ignores_literals_comments_and_casts(validator: ParameterValidator, sql: str) -> None:
    assert validator.extract_parameters(sql) == []
    assert not validator.has_parameters(sql)


def test_placeholder_followed_by_cast(validator: ParameterValidator) -> None:
    assert validator.parameter_names("SELECT :created::date") == ["created"]


def test_time_literal_is_not_a_placeholder(validator: ParameterValidator) -> None:
    assert validator.parameter_names("SELECT '12:30:00', :at") == ["at"]


def test_postgres_json_operators_are_ignored(validator: ParameterValidator) -> None:
    assert validator.parameter_names("SELECT data ?? 'k', data ?| :keys") == ["keys"]


@pytest.mark.parametrize("sql", ["SELECT ? FROM t WHERE a = :a", "SELECT :1 FROM t"], ids=["qmark", "numeric"])
def test_rejects_positional_markers(validator: ParameterValidator, sql: str) -> None:
    with pytest.raises(ParameterError, match="Positional marker"):
        validator.extract_parameters(sql)


def test_results_are_cached(validator: ParameterValidator) -> None:
    sql = "SELECT :a"

    assert validator.extract_parameters(sql) is validator.extract_parameters(sql)


def test_key_exists_operator_before_literal_is_ignored(validator: ParameterValidator) -> None:
    assert validator.parameter_names("SELECT * FROM t WHERE doc ? 'k' AND id = :id") == ["id"]
    assert validator.parameter_names('SELECT doc ?"k", :id') == ["id"]


def test_cache_evicts_least_recently_used() -> None:
    validator = ParameterValidator(cache_max_size=2)
    first = validator.extract_parameters("SELECT :a")
    validator.extract_parameters("SELECT :b")

    assert validator.extract_parameters("SELECT :a") is first
    validator.extract_parameters("SELECT :c")

    assert validator.extract_parameters("SELECT :a") is first
    assert list(validator._parameter_cache) == ["SELECT :c", "SELECT :a"]


def test_cache_never_exceeds_max_size() -> None:
    validator = ParameterValidator(cache_max_size=3)
    for index in range(10):
        validator.extract_parameters(f"SELECT :p{index}")

    assert len(validator._parameter_cache) == 3
    assert "SELECT :p0" not in validator._parameter_cache
