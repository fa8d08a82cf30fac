from typing import NamedTuple

from bb_simulator.transitions import parse_table
from bb_simulator.turing_machine import PROGRESS_INTERVAL, TuringMachine


class RunOutcome(NamedTuple):
    steps: int
    non_blank: int
    halted: bool


def run_bounded(machine, max_steps=None, progress=None, progress_interval=PROGRESS_INTERVAL):
    """
    Run `machine` until it halts or `max_steps` steps have executed.

    With no budget this is the machine's own unbounded run. Running out of
    budget is reported with halted=False and the marks present at that point.
    """
    if max_steps is None:
        steps, non_blank = machine.run(progress=progress, progress_interval=progress_interval)
        return RunOutcome(steps, non_blank, True)

    while not machine.halted and machine.steps < max_steps:
        machine.step()
        if progress is not None and machine.steps % progress_interval == 0:
            progress(machine.steps)

    steps, non_blank = machine.result()
    return RunOutcome(steps, non_blank, machine.halted)


def simulate_text(text, max_steps=None, progress=None, progress_interval=PROGRESS_INTERVAL):
    """Parse a table from text and run it. Returns (machine, outcome)."""
    machine = TuringMachine(parse_table(text))
    outcome = run_bounded(machine, max_steps=max_steps, progress=progress, progress_interval=progress_interval)
    return machine, outcome
