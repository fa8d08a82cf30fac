class TuringMachineError(Exception):
    """Base class for every fatal error of a simulation run."""


class MalformedTransitionCode(TuringMachineError):
    def __init__(self, code, field, character=None):
        self.code = code
        self.field = field
        self.character = character
        if character is None:
            reason = f"missing {field}"
        else:
            reason = f"invalid {field} {character!r}"
        super().__init__(f"Incorrect transition {code!r}: {reason}")


class OddTokenCount(TuringMachineError):
    def __init__(self, count):
        self.count = count
        super().__init__(
            f"Incorrect input. Number of transitions should be even "
            f"(2 transitions per state), got {count}"
        )


class UndeclaredState(TuringMachineError):
    def __init__(self, state):
        self.state = state
        super().__init__(
            f"All states should have declared transitions. "
            f"No transition for state number {state}"
        )
