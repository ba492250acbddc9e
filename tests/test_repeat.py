"""Tests for repeat suppression and spam-controlled logging."""
from __future__ import annotations

from colony.sim.memory import MemoryStore
from colony.sim.timebase import TickClock
from colony.systems.repeat import ConsoleSink, Decision, LogOnce, RepeatSuppressor, repeat_key


def test_first_call_new_then_same_tick_duplicates(memory, clock):
    rs = RepeatSuppressor(memory, clock)
    assert rs.should_emit("hello", "log") is Decision.NEW
    assert rs.should_emit("hello", "log") is Decision.DUPLICATE_SAME_TICK
    assert rs.should_emit("hello", "log") is Decision.DUPLICATE_SAME_TICK


def test_previous_tick_is_remembered(memory, clock):
    rs = RepeatSuppressor(memory, clock)
    assert rs.should_emit("hello", "log") is Decision.NEW
    clock.advance()
    assert rs.should_emit("hello", "log") is Decision.DUPLICATE_PREVIOUS_TICK


def test_only_two_generations_are_kept(memory, clock):
    rs = RepeatSuppressor(memory, clock)
    assert rs.should_emit("hello", "log") is Decision.NEW
    clock.advance()
    rs.should_emit("other", "log")
    clock.advance()
    assert rs.should_emit("hello", "log") is Decision.NEW


def test_message_repeated_every_tick_stays_suppressed(memory, clock):
    rs = RepeatSuppressor(memory, clock)
    assert rs.should_emit("hello", "log") is Decision.NEW
    for _ in range(3):
        clock.advance()
        assert rs.should_emit("hello", "log") is Decision.DUPLICATE_PREVIOUS_TICK


def test_skipped_ticks_discard_history(memory, clock):
    rs = RepeatSuppressor(memory, clock)
    assert rs.should_emit("hello", "log") is Decision.NEW
    clock.advance(5)
    assert rs.should_emit("hello", "log") is Decision.NEW


def test_clock_going_backwards_discards_history(memory, clock):
    rs = RepeatSuppressor(memory, clock)
    rs.should_emit("hello", "log")
    clock.set_tick(50)
    assert rs.should_emit("hello", "log") is Decision.NEW
    assert memory.get("dontRepeat")["time"] == 50


def test_namespaces_partition_keys(memory, clock):
    rs = RepeatSuppressor(memory, clock)
    assert rs.should_emit("hello", "log") is Decision.NEW
    assert rs.should_emit("hello", "creeps") is Decision.NEW


def test_key_strips_first_underscore_only():
    assert repeat_key("msg", "my_name_space") == "myname_space_msg"
    # Known collision of the key scheme
    assert repeat_key("msg", "ab_c") == repeat_key("msg", "a_bc")


def test_persisted_layout(memory, clock):
    rs = RepeatSuppressor(memory, clock)
    rs.should_emit("hello", "log")
    clock.advance()
    rs.should_emit("bye", "log")
    assert memory.get("dontRepeat") == {
        "time": 101,
        "logCurrent": {"log_bye": True},
        "logPrevious": {"log_hello": True},
    }


def test_same_tick_duplicate_does_not_write(recording_memory, clock):
    rs = RepeatSuppressor(recording_memory, clock)
    rs.should_emit("hello", "log")
    assert recording_memory.writes == ["dontRepeat"]
    before = recording_memory.snapshot()

    rs.should_emit("hello", "log")
    assert recording_memory.writes == ["dontRepeat"]
    assert recording_memory.snapshot() == before


def test_mangled_log_is_reset(memory, clock):
    memory.set("dontRepeat", {"time": 99, "logCurrent": "junk", "logPrevious": [1]})
    rs = RepeatSuppressor(memory, clock)
    assert rs.should_emit("hello", "log") is Decision.NEW
    assert memory.get("dontRepeat")["logPrevious"] == {}


def test_history_survives_process_restart(tmp_path):
    store = MemoryStore.default(root=tmp_path)
    store.load()
    RepeatSuppressor(store, TickClock(7)).should_emit("hello", "log")
    store.save()

    reloaded = MemoryStore.default(root=tmp_path)
    reloaded.load()
    rs = RepeatSuppressor(reloaded, TickClock(8))
    assert rs.should_emit("hello", "log") is Decision.DUPLICATE_PREVIOUS_TICK


def test_log_once_prints_new_messages(memory, clock, sink):
    log = LogOnce(RepeatSuppressor(memory, clock), sink)
    assert log.log_once("spawned creep") is Decision.NEW
    assert sink.lines == ["spawned creep"]


def test_log_once_warns_on_same_tick_reuse(memory, clock, sink):
    log = LogOnce(RepeatSuppressor(memory, clock), sink)
    log.log_once("spawned creep")
    assert log.log_once("spawned creep") is Decision.DUPLICATE_SAME_TICK
    assert sink.lines == [
        "spawned creep",
        'Warning: reusing message "spawned creep" in same round',
    ]
    # The warning itself is not deduplicated
    log.log_once("spawned creep")
    assert len(sink.lines) == 3


def test_log_once_warning_can_be_disabled(memory, clock, sink):
    log = LogOnce(RepeatSuppressor(memory, clock), sink)
    log.log_once("spawned creep")
    log.log_once("spawned creep", warn=False)
    assert sink.lines == ["spawned creep"]


def test_log_once_silent_on_previous_tick_duplicate(memory, clock, sink):
    log = LogOnce(RepeatSuppressor(memory, clock), sink)
    log.log_once("spawned creep")
    clock.advance()
    assert log.log_once("spawned creep") is Decision.DUPLICATE_PREVIOUS_TICK
    assert sink.lines == ["spawned creep"]


def test_console_sink_prints(memory, clock, capsys):
    log = LogOnce(RepeatSuppressor(memory, clock), ConsoleSink())
    log("to the console")
    assert capsys.readouterr().out == "to the console\n"
