"""Tests for bridging legacy custom functions into host callbacks."""

import pytest
from structlog.testing import capture_logs

from sassc_embedded.adapters.functions_handler import (
    CustomFunctionError,
    FunctionContext,
    FunctionsHandler,
)
from sassc_embedded.core.errors import ValueConversionError
from sassc_embedded.legacy import values
from sassc_embedded.legacy.functions import Functions
from sassc_embedded.protocol.compiler import ScriptError
from sassc_embedded.protocol.values import SassNumber, SassString


class SampleFunctions(Functions):
    def add(self, a, b):
        return values.Number(a.value + b.value, a.numerator_units)

    def option_value(self, key):
        return values.String(str(self.options[key.value]), "string")

    def boom(self):
        raise RuntimeError("kaboom")

    def broken_result(self):
        return 42

    def _private_helper(self):  # pragma: no cover - never registered
        return None


@pytest.fixture
def callbacks() -> dict:
    return FunctionsHandler({"theme": "dark"}).setup(SampleFunctions)


@pytest.mark.unit
class TestFunctionsHandler:
    def test_registers_public_functions_by_signature(self, callbacks: dict) -> None:
        assert set(callbacks) == {
            "add($a, $b)",
            "option_value($key)",
            "boom()",
            "broken_result()",
        }

    def test_default_function_set_is_empty(self) -> None:
        assert FunctionsHandler({}).setup() == {}

    def test_arguments_and_result_are_converted(self, callbacks: dict) -> None:
        result = callbacks["add($a, $b)"]([SassNumber(2, ("px",)), SassNumber(3)])

        assert result == SassNumber(5, ("px",))

    def test_functions_see_render_options(self, callbacks: dict) -> None:
        result = callbacks["option_value($key)"]([SassString("theme", quoted=False)])

        assert result == SassString("dark", quoted=True)

    def test_failure_is_reported_as_named_script_error(self, callbacks: dict) -> None:
        with pytest.raises(CustomFunctionError) as exc_info:
            callbacks["boom()"]([])

        error = exc_info.value
        assert isinstance(error, ScriptError)
        assert error.message == "Error: error in C function boom"
        assert error.function_name == "boom"
        assert error.original_message == "kaboom"
        assert isinstance(error.__cause__, RuntimeError)

    def test_failure_message_includes_cause(self, callbacks: dict) -> None:
        with pytest.raises(CustomFunctionError) as exc_info:
            callbacks["boom()"]([])

        assert "kaboom" in exc_info.value.full_message()
        assert "kaboom" in str(exc_info.value)

    def test_failure_emits_original_message_as_diagnostic(self, callbacks: dict) -> None:
        with capture_logs() as logs, pytest.raises(CustomFunctionError):
            callbacks["boom()"]([])

        failures = [log for log in logs if log["event"] == "custom_function_failed"]
        assert failures == [
            {
                "event": "custom_function_failed",
                "log_level": "warning",
                "function": "boom",
                "error": "kaboom",
                "error_type": "RuntimeError",
            }
        ]

    def test_unrelated_script_errors_are_untouched(self) -> None:
        assert ScriptError("plain").full_message() == "plain"

    def test_unconvertible_result_is_not_wrapped(self, callbacks: dict) -> None:
        with pytest.raises(ValueConversionError):
            callbacks["broken_result()"]([])


@pytest.mark.unit
def test_function_context_invokes_with_options() -> None:
    context = FunctionContext(SampleFunctions, {"theme": "light"})

    result = context.invoke("option_value", [values.String("theme")])

    assert context.options == {"theme": "light"}
    assert result == values.String("light", "string")
