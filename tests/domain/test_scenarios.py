"""End-to-end shapes exercised through the public package API."""

from __future__ import annotations

import shapecast
from shapecast import either, list_of, maybe, number, record, set_of, string


class TestPublicApi:
    def test_exports(self) -> None:
        for name in ("always", "boolean", "either", "list_of", "maybe", "number", "record"):
            assert callable(getattr(shapecast, name))
        assert issubclass(shapecast.SchemaError, ValueError)


class TestScenarios:
    validate = staticmethod(
        record({"language": either(["english", "spanish"]), "itemsPerPage": number(10)})
    )

    def test_valid_language_kept(self) -> None:
        assert self.validate({"language": "spanish"}) == {
            "language": "spanish",
            "itemsPerPage": 10,
        }

    def test_unknown_language_replaced(self) -> None:
        assert self.validate({"language": "italian"}) == {
            "language": "english",
            "itemsPerPage": 10,
        }

    def test_list_of_numbers(self) -> None:
        assert list_of(number(0))([1, 2, "b", {}]) == [1, 2, 0, 0]

    def test_set_of_optional_enum(self) -> None:
        assert set_of(either([None, "a", "b", "c"]))([1, 3, "b", {}]) == {"b"}

    def test_maybe_string(self) -> None:
        assert maybe(string("foo"))(None) is None
        assert maybe(string("foo"))(2) == "foo"
