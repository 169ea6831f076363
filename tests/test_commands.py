# tests/test_commands.py

from __future__ import annotations

from commitment_registry.cli.commands import CommandRegistry, registry
from commitment_registry.connectors.console_connector import handle_line


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bb"])

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/BB y", emit=lambda _: None) == "h3"
    assert called == {"h2": 1, "h3": 1}


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_objective_lifecycle_via_commands(state) -> None:
    assert registry.handle(state, "/inspect") == "No objective for alice."
    assert registry.handle(state, "/initiate ship the release") == "Objective initiated."
    assert registry.handle(state, "/initiate again") == (
        "[already_exists] An objective already exists for this address."
    )
    assert registry.handle(state, "/inspect") == (
        "Objective for alice: open, description length 16."
    )
    assert registry.handle(state, "/modify done shipped") == "Objective updated."
    assert "completed" in (registry.handle(state, "/inspect") or "")
    assert registry.handle(state, "/modify maybe x") == "Usage: /modify <done|open> <text>"
    assert registry.handle(state, "/terminate") == "Objective terminated."
    assert registry.handle(state, "/terminate").startswith("[not_found]")  # type: ignore[union-attr]


def test_classify_and_schedule_commands(state) -> None:
    assert registry.handle(state, "/classify 2").startswith("[not_found]")  # type: ignore[union-attr]
    registry.handle(state, "/initiate x")
    assert registry.handle(state, "/classify two") == "Usage: /classify <1-3>"
    assert registry.handle(state, "/classify 5").startswith("[invalid_input]")  # type: ignore[union-attr]
    assert registry.handle(state, "/classify 2") == "Priority set."
    assert registry.handle(state, "/priority") == "Priority for alice: 2"

    assert registry.handle(state, "/schedule") == "Usage: /schedule <offset>"
    assert registry.handle(state, "/schedule 0").startswith("[invalid_input]")  # type: ignore[union-attr]
    assert registry.handle(state, "/schedule 10") == "Deadline scheduled."
    assert registry.handle(state, "/deadline") == (
        "Deadline for alice: block 110 (current 100, alert off)"
    )


def test_as_and_delegate_commands(state) -> None:
    assert registry.handle(state, "/delegate bob read more") == "Objective delegated."
    assert registry.handle(state, "/inspect") == "No objective for alice."

    assert registry.handle(state, "/as bob") == "Now acting as bob."
    assert state.acting_address == "bob"
    assert registry.handle(state, "/inspect") == "Objective for bob: open, description length 9."
    assert registry.handle(state, "/delegate") == "Usage: /delegate <address> <text>"


def test_counter_commands(state) -> None:
    notes: list[str] = []
    assert registry.handle(state, "/counter") == "Current block: 100"
    assert registry.handle(state, "/advance 5", emit=notes.append) == "Current block: 105"
    assert registry.handle(state, "/advance") == "Current block: 106"
    assert registry.handle(state, "/advance -3") == "Usage: /advance [n>=0]"
    assert notes == ["[COUNTER] advanced by 5"]


def test_help_lists_commands(state) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("initiate", "modify", "terminate", "classify", "schedule", "delegate", "inspect"):
        assert f"/{name}" in text


def test_console_handle_line(state) -> None:
    assert handle_line(state, "hello").startswith("Commands start with")
    assert handle_line(state, "/initiate x") == "Objective initiated."


def test_console_rejects_offset_past_counter_ceiling(state) -> None:
    handle_line(state, "/initiate x")
    assert handle_line(state, "/schedule 9223372036854775808") == "[invalid_input] Invalid input."
    assert handle_line(state, "/deadline") == "No deadline recorded for alice."


def test_console_advance_past_ceiling_keeps_running(state) -> None:
    reply = handle_line(state, "/advance 9223372036854775808")
    assert reply == "Counter cannot pass 9223372036854775807; current block: 100"
    assert handle_line(state, "/counter") == "Current block: 100"
