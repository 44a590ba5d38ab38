"""Tests for appcore.dispatch — mode-based routing."""

import base64
import gzip
import logging
import types

import pytest

from appcore.dispatch import (
    DispatchRequest,
    RequestDispatcher,
    RequestKind,
    lookup_function,
    parse_compress_flag,
)
from appcore.errors import DispatchError
from appcore.http.response import Response
from appcore.providers import MappingProvider
from appcore.resolver import ProviderChain, ResourceResolver


def _inflate(encoded: str) -> str:
    return gzip.decompress(base64.b64decode(encoded)).decode("utf-8")


@pytest.fixture
def dispatcher() -> RequestDispatcher:
    user = MappingProvider({"main.html": "<main>app</main>"})
    return RequestDispatcher(ResourceResolver(ProviderChain(user)))


class TestCompressFlag:
    @pytest.mark.parametrize("value", ["false", False])
    def test_disables(self, value: object) -> None:
        assert parse_compress_flag(value) is False

    @pytest.mark.parametrize("value", [None, True, "true", "False", "0", 0, ""])
    def test_everything_else_enables(self, value: object) -> None:
        assert parse_compress_flag(value) is True


class TestSourceMode:
    def test_rpc_returns_raw_value(self, dispatcher: RequestDispatcher) -> None:
        request = DispatchRequest(
            "source", {"file": "main.html", "compress": "false"}, RequestKind.RPC
        )
        assert dispatcher.run(request, {}) == "<main>app</main>"

    def test_rpc_compressed_by_default(self, dispatcher: RequestDispatcher) -> None:
        request = DispatchRequest("source", {"file": "main.html"}, RequestKind.RPC)
        assert _inflate(dispatcher.run(request, {})) == "<main>app</main>"

    def test_boolean_false_disables_compression(self, dispatcher: RequestDispatcher) -> None:
        request = DispatchRequest("source", {"file": "main.html", "compress": False}, RequestKind.RPC)
        assert dispatcher.run(request, {}) == "<main>app</main>"

    def test_rpc_miss_returns_none(self, dispatcher: RequestDispatcher) -> None:
        request = DispatchRequest("source", {"file": "ghost.html"}, RequestKind.RPC)
        assert dispatcher.run(request, {}) is None

    def test_standard_wraps_in_text_response(self, dispatcher: RequestDispatcher) -> None:
        request = DispatchRequest("source", {"file": "main.html", "compress": "false"})
        response = dispatcher.run(request, {})

        assert isinstance(response, Response)
        assert response.status == 200
        assert response.content_type.startswith("text/plain")
        assert response.text == "<main>app</main>"

    def test_standard_miss_is_empty_body(self, dispatcher: RequestDispatcher) -> None:
        response = dispatcher.run(DispatchRequest("source", {"file": "ghost.html"}), {})

        assert isinstance(response, Response)
        assert response.status == 200
        assert response.text == ""

    def test_source_wins_over_function_table(self, dispatcher: RequestDispatcher) -> None:
        def source(*args: object) -> str:
            return "table"

        request = DispatchRequest("source", {"file": "main.html", "compress": "false"}, RequestKind.RPC)
        assert dispatcher.run(request, {"source": source}) == "<main>app</main>"

    def test_missing_args_is_a_miss(self, dispatcher: RequestDispatcher) -> None:
        assert dispatcher.run(DispatchRequest("source", None, RequestKind.RPC), {}) is None


class TestFunctionMode:
    def test_calls_with_positional_args(self, dispatcher: RequestDispatcher) -> None:
        def add(a: int, b: int) -> int:
            return a + b

        result = dispatcher.run(DispatchRequest("add", [2, 3], RequestKind.RPC), {"add": add})
        assert result == 5

    def test_tuple_args(self, dispatcher: RequestDispatcher) -> None:
        result = dispatcher.run(DispatchRequest("join", ("a", "b")), {"join": lambda *p: "".join(p)})
        assert result == "ab"

    @pytest.mark.parametrize("args", [None, "sku-1", {"sku": "sku-1"}, 7])
    def test_non_sequence_args_become_empty(self, dispatcher: RequestDispatcher, args: object) -> None:
        received: list[tuple[object, ...]] = []

        def record(*params: object) -> str:
            received.append(params)
            return "ok"

        assert dispatcher.run(DispatchRequest("record", args), {"record": record}) == "ok"
        assert received == [()]

    def test_result_returned_unwrapped_for_standard(self, dispatcher: RequestDispatcher) -> None:
        result = dispatcher.run(DispatchRequest("items", []), {"items": lambda: ["a", "b"]})
        assert result == ["a", "b"]

    def test_module_as_function_table(self, dispatcher: RequestDispatcher) -> None:
        logic = types.ModuleType("logic")
        logic.greet = lambda name: f"hello {name}"  # type: ignore[attr-defined]

        assert dispatcher.run(DispatchRequest("greet", ["ana"]), logic) == "hello ana"

    def test_instance_methods_receive_table(self, dispatcher: RequestDispatcher) -> None:
        class Logic:
            def __init__(self) -> None:
                self.prefix = "item:"

            def label(self, sku: str) -> str:
                return self.prefix + sku

        table = Logic()
        assert dispatcher.run(DispatchRequest("label", ["42"]), table) == "item:42"

    def test_failure_raises_dispatch_error(self, dispatcher: RequestDispatcher) -> None:
        def do_thing() -> None:
            raise Exception("boom")

        with pytest.raises(DispatchError) as exc_info:
            dispatcher.run(DispatchRequest("doThing", []), {"doThing": do_thing})

        assert "boom" in str(exc_info.value)
        assert exc_info.value.mode == "doThing"
        assert "doThing" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, Exception)
        assert str(exc_info.value.__cause__) == "boom"

    def test_failure_is_logged(
        self, dispatcher: RequestDispatcher, caplog: pytest.LogCaptureFixture
    ) -> None:
        def explode() -> None:
            raise ValueError("bad input")

        with caplog.at_level(logging.ERROR, logger="appcore.dispatch"):
            with pytest.raises(DispatchError):
                dispatcher.run(DispatchRequest("explode", [], RequestKind.RPC), {"explode": explode})

        records = [r for r in caplog.records if r.name == "appcore.dispatch"]
        assert len(records) == 1
        assert "explode" in records[0].getMessage()
        assert "bad input" in records[0].getMessage()

    def test_wrong_arity_is_a_dispatch_error(self, dispatcher: RequestDispatcher) -> None:
        with pytest.raises(DispatchError):
            dispatcher.run(DispatchRequest("one", [1, 2]), {"one": lambda x: x})


class TestNoMatch:
    def test_unknown_mode_returns_none(self, dispatcher: RequestDispatcher) -> None:
        assert dispatcher.run(DispatchRequest("unknownMode", []), {"known": lambda: 1}) is None

    def test_missing_mode_returns_none(self, dispatcher: RequestDispatcher) -> None:
        assert dispatcher.run(DispatchRequest(None), {"": lambda: 1}) is None

    def test_empty_mode_returns_none(self, dispatcher: RequestDispatcher) -> None:
        assert dispatcher.run(DispatchRequest(""), {"": lambda: 1}) is None

    def test_non_callable_entry_returns_none(self, dispatcher: RequestDispatcher) -> None:
        assert dispatcher.run(DispatchRequest("VERSION", []), {"VERSION": "1.0"}) is None


class TestLookupFunction:
    def test_mapping(self) -> None:
        fn = lambda: 1  # noqa: E731
        assert lookup_function({"fn": fn}, "fn") is fn

    def test_attribute(self) -> None:
        table = types.SimpleNamespace(fn=len)
        assert lookup_function(table, "fn") is len

    def test_missing(self) -> None:
        assert lookup_function({}, "fn") is None
        assert lookup_function(object(), "fn") is None

    def test_failing_attribute_raises_dispatch_error(self) -> None:
        class Logic:
            @property
            def broken(self):
                raise RuntimeError("not ready")

        with pytest.raises(DispatchError) as exc_info:
            lookup_function(Logic(), "broken")

        assert exc_info.value.mode == "broken"
        assert isinstance(exc_info.value.original, RuntimeError)

    def test_failing_attribute_through_run(self, dispatcher: RequestDispatcher) -> None:
        class Logic:
            def __getattr__(self, name):
                raise KeyError(name)

        with pytest.raises(DispatchError):
            dispatcher.run(DispatchRequest("anything", []), Logic())

    def test_attribute_error_is_no_match(self, dispatcher: RequestDispatcher) -> None:
        class Logic:
            @property
            def gone(self):
                raise AttributeError("gone")

        assert dispatcher.run(DispatchRequest("gone", []), Logic()) is None
