import io

import pytest

from behavioral_patterns.strategy import OutputStrategy, StreamOutput


def test_stream_output_writes_lines():
    buf = io.StringIO()
    out = StreamOutput(buf)
    out.output("first")
    out.output("second")
    assert buf.getvalue().splitlines() == ["first", "second"]


def test_stream_output_defaults_to_stdout(capsys):
    StreamOutput().output("shown")
    assert capsys.readouterr().out == "shown\n"


def test_strategies_are_interchangeable():
    collected = []

    class ListOutput(OutputStrategy):
        def output(self, message):
            collected.append(message)

    buf = io.StringIO()
    for strategy in (ListOutput(), StreamOutput(buf)):
        strategy.output("msg")
    assert collected == ["msg"]
    assert buf.getvalue() == "msg\n"


def test_output_strategy_is_abstract():
    with pytest.raises(TypeError):
        OutputStrategy()