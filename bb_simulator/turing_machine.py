from typing import NamedTuple

from bb_simulator.errors import UndeclaredState
from bb_simulator.tape import Tape
from bb_simulator.transitions import HALT_STATE

PROGRESS_INTERVAL = 10_000_000


class RunResult(NamedTuple):
    steps: int
    non_blank: int


class TuringMachine:
    def __init__(self, transitions, final_state=HALT_STATE):
        self.transitions = tuple(transitions)
        self.final_state = final_state
        self.tape = Tape()
        self.current_state = 0
        self.steps = 0

    @property
    def num_states(self):
        return len(self.transitions)

    @property
    def halted(self):
        return self.current_state == self.final_state

    def lookup(self, state, symbol):
        if not 0 <= state < len(self.transitions):
            raise UndeclaredState(state)
        return self.transitions[state][symbol]

    def step(self):
        """Execute one transition. Must not be called once halted."""
        tape = self.tape
        transition = self.lookup(self.current_state, tape.read_current())
        tape.write(tape.head, transition.write_symbol)
        tape.move(transition.direction)
        self.current_state = transition.next_state
        self.steps += 1

    def run(self, progress=None, progress_interval=PROGRESS_INTERVAL):
        """
        Run until the final state is reached and return (steps, non_blank).

        There is no step limit: a table that never halts keeps this loop
        running. `progress`, if given, is called with the step count every
        `progress_interval` steps.
        """
        while not self.halted:
            self.step()
            if progress is not None and self.steps % progress_interval == 0:
                progress(self.steps)
        return self.result()

    def result(self):
        return RunResult(self.steps, self.tape.count_marks())

    def visualize(self, window=10):
        """The cells around the head, a caret under the head, then the state."""
        head = self.tape.head
        left, right = self.tape.extent
        start = max(-left, head - window)
        stop = min(right - 1, head + window)
        positions = range(start, stop + 1)
        tape_str = " ".join(str(self.tape.read(pos)) for pos in positions)
        head_str = " ".join("^" if pos == head else " " for pos in positions)
        return f"{tape_str}\n{head_str.rstrip()}\nState: {self.current_state}, Halted: {self.halted}"
