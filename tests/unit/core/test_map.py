"""map(): transform the value of a Success, leave a Failure untouched."""

import pytest

from resultflow import Success, failure, success
from tests.helpers import Recorder, explode

pytestmark = pytest.mark.unit


def test_map_should_call_lambda():
    result = success(5).map(str)

    assert result.get_value() == "5"


def test_map_wraps_in_a_new_success():
    five = success(5)

    result = five.map(lambda x: x + 1)

    assert isinstance(result, Success)
    assert result is not five
    assert result.get_value() == 6
    assert five.get_value() == 5


def test_map_wraps_a_returned_result_without_flattening():
    result = success(5).map(lambda x: success(x))

    assert result.get_value() == success(5)


def test_map_should_not_call_lambda_when_its_a_failure():
    err = failure("error")

    err.map(explode)


def test_map_should_return_this_if_its_a_failure():
    err = failure("error")

    assert err.map(lambda v: "foo") is err


def test_map_calls_callback_exactly_once():
    recorder = Recorder(returns="mapped")

    result = success(1).map(recorder)

    assert recorder.calls == [1]
    assert result.get_value() == "mapped"


def test_map_propagates_callback_exceptions():
    with pytest.raises(RuntimeError, match="should not have been called"):
        success(1).map(explode)


def test_chain_stops_at_first_failure():
    recorder = Recorder()

    result = success(2).map(lambda x: x * 10).and_then(lambda _: failure("stop")).map(recorder)

    assert recorder.calls == []
    assert result.get_error() == "stop"
