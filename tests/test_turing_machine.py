import pytest

from bb_simulator.errors import UndeclaredState
from bb_simulator.transitions import HALT_STATE, MARK, mirror_table, parse_table
from bb_simulator.turing_machine import RunResult, TuringMachine

ONE_STATE = "1Rh 0Rh"
FOUR_STEPS = "1RB 0RB 1LA 1Rh"
BB2 = "1RB 1LB 1LA 1Rh"
BB3 = "1RB 1Rh 1LB 0RC 1LC 1LA"
BB4 = "1RB 1LB 1LA 0LC 1Rh 1LD 1RD 0RA"


def machine_for(text):
    return TuringMachine(parse_table(text))


def test_single_step_to_halt():
    machine = machine_for(ONE_STATE)
    assert machine.run() == (1, 1)
    assert machine.current_state == HALT_STATE
    assert machine.halted
    assert machine.tape.head == 1
    assert machine.tape.read(0) == MARK
    assert machine.tape.extent == (0, 2)


def test_four_step_fixture():
    machine = machine_for(FOUR_STEPS)
    assert machine.run() == RunResult(steps=4, non_blank=1)
    assert machine.tape.head == 2
    assert machine.tape.snapshot().tolist() == [0, 1, 0]


@pytest.mark.parametrize("text, steps, non_blank", [
    (BB2, 6, 4),
    (BB3, 21, 5),
    (BB4, 107, 13),
])
def test_busy_beaver_champions(text, steps, non_blank):
    machine = machine_for(text)
    assert machine.run() == (steps, non_blank)
    assert machine.num_states == len(text.split()) // 2


def test_allocation_tracks_furthest_visit():
    machine = machine_for(BB2)
    visited = [0]
    while not machine.halted:
        machine.step()
        visited.append(machine.tape.head)
    # head trajectory 0, 1, 0, -1, -2, -1, 0
    assert visited == [0, 1, 0, -1, -2, -1, 0]
    assert machine.tape.extent == (-min(visited), max(visited) + 1)


def test_step_reads_before_writing():
    machine = machine_for(BB2)
    machine.step()
    assert machine.current_state == 1
    assert machine.tape.read(0) == MARK
    assert machine.tape.head == 1
    assert machine.steps == 1


@pytest.mark.parametrize("text", [FOUR_STEPS, BB2, BB3])
def test_mirrored_table_mirrors_run(text):
    original = machine_for(text)
    mirrored = TuringMachine(mirror_table(parse_table(text)))

    assert original.run() == mirrored.run()
    assert mirrored.tape.head == -original.tape.head
    left, right = original.tape.extent
    for position in range(-left, right):
        assert original.tape.read(position) == mirrored.tape.read(-position)


def test_already_halted_machine_takes_no_steps():
    machine = TuringMachine(parse_table(BB2), final_state=0)
    assert machine.run() == (0, 0)


def test_empty_table_has_no_initial_state():
    machine = TuringMachine(())
    with pytest.raises(UndeclaredState) as excinfo:
        machine.run()
    assert excinfo.value.state == 0
    assert machine.steps == 0


def test_transition_to_undeclared_state():
    machine = machine_for("1RB 1Rh")
    with pytest.raises(UndeclaredState) as excinfo:
        machine.run()
    assert excinfo.value.state == 1
    assert "state number 1" in str(excinfo.value)
    assert machine.steps == 1


def test_progress_does_not_change_result():
    calls = []
    machine = machine_for(BB4)
    assert machine.run(progress=calls.append, progress_interval=10) == (107, 13)
    assert calls == list(range(10, 101, 10))


def test_visualize_marks_head():
    machine = machine_for(BB2)
    machine.run()
    lines = machine.visualize().splitlines()
    assert lines[0] == "1 1 1 1"
    assert lines[1] == "    ^"
    assert lines[2] == f"State: {HALT_STATE}, Halted: True"
