"""Tests for the runner executor."""

import pytest

from time_capsule.runner.executor import Executor
from time_capsule.runner.schema import CallSchema, ContractConfigSchema, ScriptInput
from time_capsule.stores import InMemoryStore


def make_script(*calls, owner="A", **config):
    return ScriptInput(
        contract=ContractConfigSchema(owner=owner, **config),
        calls=[CallSchema(op=op, args=args) for op, args in calls],
    )


class TestExecute:
    """Tests for Executor.execute()."""

    @pytest.fixture
    def executor(self):
        return Executor()

    async def test_scenario(self, executor):
        """Send, read, advance, read again."""
        script = make_script(
            ("send_message", {"sender": "A", "content": "hi", "target_time": 100}),
            ("get_message", {"message_id": 0}),
            ("advance_time", {"caller": "A", "delta": 100}),
            ("get_message", {"message_id": 0}),
        )

        output = await executor.execute(script)

        assert output.success
        assert output.results[0].result == 0
        assert output.results[1].result["is_available"] is False
        assert output.results[2].result == 100
        assert output.results[3].result["is_available"] is True
        assert output.results[3].result["content"] == "hi"
        assert output.snapshot["current_time"] == 100

    async def test_failed_call_is_reported(self, executor):
        """A rejected call does not stop the script but marks it failed."""
        script = make_script(
            ("advance_time", {"caller": "B", "delta": 5}),
            ("get_current_time", {}),
        )

        output = await executor.execute(script)

        assert not output.success
        assert output.results[0].success is False
        assert output.results[0].error == "Not authorized"
        assert output.results[0].error_kind == "NOT_AUTHORIZED"
        assert output.results[1].result == 0

    async def test_user_messages(self, executor):
        script = make_script(
            ("send_message", {"sender": "bob", "content": "one", "target_time": 1}),
            ("send_message", {"sender": "bob", "content": "two", "target_time": 2}),
            ("get_user_messages", {"sender": "bob"}),
        )

        output = await executor.execute(script)

        assert output.results[2].result == [0, 1]

    async def test_unknown_operation(self, executor):
        output = await executor.execute(make_script(("self_destruct", {})))

        assert not output.success
        assert output.error_type == "ScriptError"
        assert "self_destruct" in output.error

    async def test_unknown_argument_fails_the_call(self, executor):
        output = await executor.execute(make_script(("get_message", {"id": 0})))

        assert not output.success
        assert output.error_type == ""
        assert output.results[0].success is False
        assert output.results[0].error_kind == "INVALID_ARGUMENTS"
        assert "id" in output.results[0].error

    async def test_missing_argument_fails_the_call(self, executor):
        output = await executor.execute(make_script(("advance_time", {"caller": "A"})))

        assert output.results[0].error_kind == "INVALID_ARGUMENTS"
        assert "delta" in output.results[0].error

    async def test_fractional_delta_rejected(self, executor):
        """A float delta never reaches the clock."""
        script = make_script(
            ("advance_time", {"caller": "A", "delta": 0.5}),
            ("advance_time", {"caller": "A", "delta": 0.5}),
            ("get_current_time", {}),
        )

        output = await executor.execute(script)

        assert [r.error_kind for r in output.results[:2]] == ["INVALID_ARGUMENTS"] * 2
        assert output.results[2].result == 0
        assert output.snapshot["current_time"] == 0

    async def test_boolean_delta_rejected(self, executor):
        output = await executor.execute(make_script(("advance_time", {"caller": "A", "delta": True})))

        assert output.results[0].error_kind == "INVALID_ARGUMENTS"

    async def test_string_target_time_keeps_earlier_results(self, executor):
        script = make_script(
            ("send_message", {"sender": "A", "content": "ok", "target_time": 5}),
            ("send_message", {"sender": "A", "content": "bad", "target_time": "5"}),
        )

        output = await executor.execute(script)

        assert not output.success
        assert output.results[0].success is True
        assert output.results[1].error_kind == "INVALID_ARGUMENTS"
        assert "target_time" in output.results[1].error
        assert output.snapshot["message_count"] == 1

    async def test_non_string_content_and_string_id_rejected(self, executor):
        script = make_script(
            ("send_message", {"sender": "A", "content": 42, "target_time": 0}),
            ("get_message", {"message_id": "0"}),
        )

        output = await executor.execute(script)

        assert [r.error_kind for r in output.results] == ["INVALID_ARGUMENTS"] * 2
        assert output.snapshot["message_count"] == 0

    async def test_unknown_operation_keeps_earlier_results(self, executor):
        script = make_script(
            ("send_message", {"sender": "A", "content": "hi", "target_time": 1}),
            ("self_destruct", {}),
            ("advance_time", {"caller": "A", "delta": 1}),
        )

        output = await executor.execute(script)

        assert output.error_type == "ScriptError"
        assert len(output.results) == 1
        assert output.results[0].result == 0
        assert output.snapshot["message_count"] == 1
        assert output.snapshot["current_time"] == 0

    async def test_empty_owner(self, executor):
        output = await executor.execute(make_script(owner=""))

        assert not output.success
        assert output.error_type == "ContractConfigError"

    async def test_custom_paradox_window(self, executor):
        script = make_script(
            ("advance_time", {"caller": "A", "delta": 10}),
            ("send_message", {"sender": "A", "content": "x", "target_time": 4}),
            paradox_window=5,
        )

        output = await executor.execute(script)

        assert output.results[1].error == "Paradox detected"
        assert output.snapshot["paradox_window"] == 5

    async def test_injected_store(self):
        store = InMemoryStore()
        executor = Executor(store=store)

        await executor.execute(
            make_script(("send_message", {"sender": "A", "content": "hi", "target_time": 1}))
        )

        assert await store.count("time_capsule:messages") == 1


def test_operations_listed():
    ops = Executor.operations()
    assert "send_message" in ops
    assert "get_message" in ops
    assert "get_user_messages" in ops
    assert "advance_time" in ops
    assert "get_current_time" in ops


async def test_injected_store_carries_state_between_runs():
    executor = Executor(store=InMemoryStore())
    script = make_script(
        ("send_message", {"sender": "A", "content": "hi", "target_time": 1}),
        ("advance_time", {"caller": "A", "delta": 2}),
    )

    await executor.execute(script)
    second = await executor.execute(script)

    assert second.results[0].result == 1
    assert second.results[1].result == 4


async def test_default_executor_starts_fresh_each_run():
    executor = Executor()
    script = make_script(("send_message", {"sender": "A", "content": "hi", "target_time": 1}))

    await executor.execute(script)
    second = await executor.execute(script)

    assert second.results[0].result == 0
