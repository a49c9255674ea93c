import logging
import re

import pytest
from pydantic import ValidationError

from dynaqs import QueryStringParser, QueryOptions, parse_query
from dynaqs.error import ConfigurationError
from dynaqs.query import after, between


@pytest.fixture
def parser():
    return QueryStringParser()


def test_empty_query(parser):
    assert parser.parse({}) == {}


@pytest.mark.parametrize("query, expected", [
    ({"age": "5"}, {"age": 5}),
    ({"age": ">=5"}, {"age": {"ge": 5}}),
    ({"age": "<18"}, {"age": {"lt": 18}}),
    ({"flag": "true"}, {"flag": True}),
    ({"tag": ""}, {"tag": {"not_null": True}}),
    ({"tag": "!"}, {"tag": {"not_null": False}}),
    ({"name": "!bob"}, {"name": {"ne": "bob"}}),
    ({"name": "^jo"}, {"name": {"begins_with": "jo"}}),
    ({"name": "$ann"}, {"name": {"contains": "ann"}}),
    ({"name": "12abc"}, {"name": "12abc"}),
    ({"tags[]": ["a", "b"]}, {"tags": {"in": ["a", "b"]}}),
    ({"tags[]": ["!c", "d"]}, {"tags": {"not_contains": ["c"], "in": ["d"]}}),
    ({"tags": ["a", "2"]}, {"tags": {"in": ["a", 2]}}),
    ({"tags[]": []}, {}),
])
def test_parse(parser, query, expected):
    assert parser.parse(query) == expected


def test_key_order_is_kept(parser):
    result = parser.parse({"b": "1", "a": "2", "c[]": ["3"]})
    assert list(result) == ["b", "a", "c"]


def test_array_values_keep_order(parser):
    assert parser.parse({"ids[]": ["3", "1", "2"]})["ids"]["in"] == [3, 1, 2]


def test_unsupported_values_are_skipped(parser):
    assert parser.parse({"age": 5, "flag": None, "obj": {"a": "b"}, "ok": "1"}) == {"ok": 1}


@pytest.mark.parametrize("key", ["a b", "a[]", "a;b", "a=b", ""])
def test_invalid_scalar_keys_are_skipped(parser, key):
    assert parser.parse({key: "x"}) == {}


def test_invalid_array_keys_are_skipped(parser):
    assert parser.parse({"a b[]": ["x"]}) == {}
    # Only one suffix is stripped, the array key pattern accepts the second.
    assert parser.parse({"a[][]": ["x"]}) == {"a[]": {"in": ["x"]}}


def test_extended_latin_keys(parser):
    assert parser.parse({"Blåbær-ØL_1.x": "1"}) == {"Blåbær-ØL_1.x": 1}


def test_whitelist():
    parser = QueryStringParser(whitelist={"age": True})
    assert parser.parse({"age": "5", "other": "x"}) == {"age": 5}


def test_whitelist_falsy_entries_are_ignored():
    parser = QueryStringParser(whitelist={"age": True, "other": False})
    assert parser.parse({"age": "5", "other": "x"}) == {"age": 5}


def test_whitelist_array_key_without_suffix():
    parser = QueryStringParser(whitelist=["tags"])
    assert parser.parse({"tags[]": ["a"], "name": "x"}) == {"tags": {"in": ["a"]}}


def test_blacklist():
    parser = QueryStringParser(blacklist=["secret"])
    assert parser.parse({"secret": "1", "age": "2"}) == {"age": 2}


def test_skipped_keys_are_logged_at_debug(caplog):
    parser = QueryStringParser(blacklist=["secret"])
    with caplog.at_level(logging.DEBUG, logger="dynaqs.query"):
        assert parser.parse({"secret": "1"}) == {}

    [record] = [r for r in caplog.records if r.name == "dynaqs.query"]
    assert record.levelno == logging.DEBUG
    assert record.getMessage() == "Skipped query key [secret]: blacklisted"


def test_alias():
    parser = QueryStringParser(alias={"n": "name", "t": "tags"})
    assert parser.parse({"n": "^jo", "t[]": ["a"]}) == {
        "name": {"begins_with": "jo"},
        "tags": {"in": ["a"]},
    }


def test_lists_are_checked_before_alias():
    parser = QueryStringParser(alias={"n": "name"}, whitelist=["n"], blacklist=["name"])
    assert parser.parse({"n": "x", "name": "y"}) == {"name": "x"}


def test_arrays_need_in_operator():
    parser = QueryStringParser(ops=("!", ">", "<"))
    assert parser.parse({"tags[]": ["a"], "age": ">3", "name": "^x"}) == {
        "age": {"gt": 3},
        "name": "^x",
    }


def test_custom_operator_tokens_fall_back_to_equality():
    parser = QueryStringParser(ops=("~", "in"))
    assert parser.parse({"a": "~x", "b": "!y"}) == {"a": {"eq": "~x"}, "b": "!y"}


def test_coercion_flags():
    parser = QueryStringParser(to_boolean=False, to_number=False)
    assert parser.parse({"a": "true", "b": "5", "c": ">5"}) == {"a": "true", "b": "5", "c": {"gt": "5"}}


def test_legacy_option_names():
    parser = QueryStringParser({"string": {"toNumber": False}, "keyRegex": r"^[a-z]+\Z"})
    assert parser.options.to_number is False
    assert parser.options.to_boolean is True
    assert parser.parse({"age": "5", "a1": "x"}) == {"age": "5"}


def test_after_hook_on_own_key():
    parser = QueryStringParser(custom={"createdAt": after("createdAt")})
    assert parser.parse({"createdAt": "1609459200"}) == {
        "createdAt": {"ge": "2021-01-01T00:00:00.000Z"}
    }


def test_builtin_hook_names():
    parser = QueryStringParser(custom={"after": "createdAt", "before": "createdAt"})
    assert parser.parse({"after": "1609459200", "age": "3"}) == {
        "createdAt": {"ge": "2021-01-01T00:00:00.000Z"},
        "age": 3,
    }


def test_between_hook_drops_invalid_range():
    parser = QueryStringParser(custom={"d": between("d")})
    assert parser.parse({"d": "bad|alsoBad"}) == {}
    assert "d" not in parser.parse({"d": "2021-01-01|bad"})


def test_hook_owns_its_key():
    parser = QueryStringParser(custom={"age": lambda value: {"age": {"eq": value}}})
    assert parser.parse({"age": ">=5"}) == {"age": {"eq": ">=5"}}


def test_hook_receives_array_values():
    parser = QueryStringParser(custom={"ids": lambda value: {"id": {"in": list(value)}}})
    assert parser.parse({"ids[]": ["1", "2"]}) == {"id": {"in": ["1", "2"]}}


def test_hook_runs_after_aliasing():
    parser = QueryStringParser(alias={"from": "after"}, custom={"after": "createdAt"})
    assert parser.parse({"from": "2021-01-01"}) == {"createdAt": {"ge": "2021-01-01T00:00:00.000Z"}}


def test_hook_errors_propagate():
    def broken(value):
        raise ZeroDivisionError(value)

    parser = QueryStringParser(custom={"x": broken})
    with pytest.raises(ZeroDivisionError):
        parser.parse({"x": "1"})


def test_invalid_hook_configuration():
    with pytest.raises(ConfigurationError):
        QueryStringParser(custom={"x": "not-callable"})

    with pytest.raises(ConfigurationError):
        QueryStringParser(custom={"after": 10})


def test_invalid_options():
    with pytest.raises(ValidationError):
        QueryStringParser(unknown_option=True)

    with pytest.raises(ValidationError):
        QueryStringParser(ops="!^")


def test_options_are_immutable():
    options = QueryOptions(alias={"a": "b"})

    with pytest.raises(ValidationError):
        options.ops = ("!",)

    with pytest.raises(TypeError):
        options.alias["c"] = "d"


def test_options_instance_with_overrides():
    options = QueryOptions(whitelist=["age"], custom={"after": "createdAt"})
    parser = QueryStringParser(options, to_number=False)

    assert parser.options.whitelist == frozenset(["age"])
    assert parser.options.to_number is False
    assert parser.parse({"age": "5"}) == {"age": "5"}
    assert QueryStringParser(options).options is options


def test_default_patterns_are_case_insensitive():
    options = QueryOptions()
    assert options.key_regex.flags & re.IGNORECASE
    assert options.val_regex.search("a?b")
    assert not options.val_regex.search("a b*c")


def test_parse_query_shortcut():
    assert parse_query({"age": ">5", "x": "1"}, whitelist=["age"]) == {"age": {"gt": 5}}


def test_parser_is_reusable(parser):
    first = parser.parse({"tags[]": ["a"]})
    second = parser.parse({"tags[]": ["b"]})
    assert first == {"tags": {"in": ["a"]}}
    assert second == {"tags": {"in": ["b"]}}


def test_oversized_numbers_are_kept_as_strings(parser):
    digits = "1" * 5000
    assert parser.parse({"n": digits}) == {"n": digits}
    assert parser.parse({"n": ">" + digits}) == {"n": {"gt": digits}}
    assert parser.parse({"n[]": [">" + digits]}) == {"n": {"gt": digits}}


def test_non_ascii_digits_are_not_numbers(parser):
    assert parser.parse({"n": "١٢"}) == {"n": "١٢"}
    assert parser.parse({"n": ">١٢"}) == {"n": {"gt": "١٢"}}


@pytest.mark.parametrize("raw", [
    "9" * 5000,
    "9999-12-31T23:00:00-05:00",
    "0001-01-01T00:00:00+05:00",
])
def test_out_of_range_dates_are_dropped(raw):
    parser = QueryStringParser(custom={"d": after("d")})
    assert parser.parse({"d": raw}) == {}
