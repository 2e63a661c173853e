import asyncio

import pytest

from conftest import FakeConsole, FakeRuntime
from webhook_agent.agent.prompts import AUTONOMOUS_PROMPT
from webhook_agent.config import StreamErrorPolicy
from webhook_agent.session.drivers import AutonomousDriver, ChatDriver, SessionDriver
from webhook_agent.session.stream import SEPARATOR, ChunkOrigin, ResponseChunk


def _chat(inputs, runtime=None, policy=StreamErrorPolicy.TERMINATE):
    console = FakeConsole(inputs)
    runtime = runtime or FakeRuntime()
    code = asyncio.run(ChatDriver(runtime, console, "thread-1", policy).run())
    return code, console, runtime


def test_chat_single_turn_then_exit():
    code, console, runtime = _chat(["hello", "exit"])

    assert code == 0
    assert runtime.sent == [("hello", "thread-1")]
    assert console.lines == [
        "Starting chat mode... Type 'exit' to end.",
        "hello from agent",
        SEPARATOR,
    ]
    assert console.prompts == ["\nPrompt: ", "\nPrompt: "]


def test_separator_printed_once_per_turn_not_per_chunk():
    runtime = FakeRuntime(turns=[[
        ResponseChunk(ChunkOrigin.AGENT, "thinking"),
        ResponseChunk(ChunkOrigin.TOOL, "tool output"),
        ResponseChunk(ChunkOrigin.AGENT, "answer"),
    ]])

    _, console, _ = _chat(["go", "again", "exit"], runtime)

    assert console.lines.count(SEPARATOR) == 2
    assert console.lines[1:5] == ["thinking", "tool output", "answer", SEPARATOR]


def test_exit_is_case_insensitive_and_trimmed():
    code, _, runtime = _chat(["  EXIT  "])

    assert code == 0
    assert runtime.sent == []


def test_end_of_input_ends_chat_cleanly():
    code, _, runtime = _chat(["hello"])

    assert code == 0
    assert len(runtime.sent) == 1


def test_stream_error_terminates_chat_by_default():
    code, console, runtime = _chat(["boom", "never sent"], FakeRuntime(fail_on={0}))

    assert code == 1
    assert runtime.sent == [("boom", "thread-1")]
    assert "Error: stream exploded" in console.lines
    assert SEPARATOR not in console.lines


def test_stream_error_continue_policy_keeps_chatting():
    code, console, runtime = _chat(
        ["boom", "fine", "exit"],
        FakeRuntime(fail_on={0}),
        policy=StreamErrorPolicy.CONTINUE,
    )

    assert code == 0
    assert [text for text, _ in runtime.sent] == ["boom", "fine"]
    assert "Error: stream exploded" in console.lines
    assert console.lines.count(SEPARATOR) == 1


def _auto(runtime, interval=0.05, policy=StreamErrorPolicy.TERMINATE, stop_after=None):
    console = FakeConsole()
    driver = AutonomousDriver(runtime, console, "thread-1", interval=interval, policy=policy)
    if stop_after is not None:
        runtime.on_finish = lambda index: index >= stop_after and driver.stop()
    code = asyncio.run(driver.run())
    return code, console, driver


def test_autonomous_sends_fixed_prompt_until_stopped():
    runtime = FakeRuntime()

    code, console, driver = _auto(runtime, stop_after=2)

    assert code == 0
    assert driver.stopped
    assert runtime.sent == [(AUTONOMOUS_PROMPT, "thread-1")] * 3
    assert console.lines[0] == "Starting autonomous mode..."
    assert console.lines.count(SEPARATOR) == 3


def test_autonomous_waits_interval_between_turns():
    runtime = FakeRuntime()
    interval = 0.1

    _auto(runtime, interval=interval, stop_after=2)

    gaps = [
        start - finish
        for finish, start in zip(runtime.finished_at, runtime.started_at[1:])
    ]
    assert len(gaps) == 2
    assert all(gap >= interval - 0.01 for gap in gaps)


def test_stop_before_run_sends_nothing():
    runtime = FakeRuntime()
    console = FakeConsole()
    driver = AutonomousDriver(runtime, console, "thread-1", interval=0)
    driver.stop()

    assert asyncio.run(driver.run()) == 0
    assert runtime.sent == []


def test_autonomous_error_terminates_by_default():
    code, console, _ = _auto(FakeRuntime(fail_on={0}))

    assert code == 1
    assert "Error: stream exploded" in console.lines


def test_autonomous_error_continue_policy():
    runtime = FakeRuntime(fail_on={0})

    code, console, _ = _auto(runtime, policy=StreamErrorPolicy.CONTINUE, stop_after=1)

    assert code == 0
    assert len(runtime.sent) == 2
    assert "Error: stream exploded" in console.lines
    assert console.lines.count(SEPARATOR) == 1


def test_session_driver_requires_run():
    with pytest.raises(TypeError):
        SessionDriver(FakeRuntime(), FakeConsole(), "thread-1")
