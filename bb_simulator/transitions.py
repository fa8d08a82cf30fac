from enum import IntEnum
from typing import NamedTuple

from bb_simulator.errors import MalformedTransitionCode, OddTokenCount

BLANK, MARK = 0, 1

# Letters map to consecutive indices, so 'h' lands past every declarable state.
HALT_LETTER = "h"
HALT_STATE = ord(HALT_LETTER) - ord("A")
MAX_STATES = 26

SYMBOL_CHARS = {"0": BLANK, "1": MARK}


class Direction(IntEnum):
    LEFT = -1
    RIGHT = 1

    @property
    def letter(self):
        return "L" if self is Direction.LEFT else "R"


DIRECTION_CHARS = {"L": Direction.LEFT, "R": Direction.RIGHT}


class Transition(NamedTuple):
    write_symbol: int
    direction: Direction
    next_state: int


def state_letter(state):
    """Inverse of the letter convention: 0 -> 'A', ..., HALT_STATE -> 'h'."""
    if state == HALT_STATE:
        return HALT_LETTER
    if not 0 <= state < MAX_STATES:
        raise ValueError(f"State index {state} has no letter")
    return chr(ord("A") + state)


def parse_state(code, char):
    if char is None:
        raise MalformedTransitionCode(code, "next state")
    if char == HALT_LETTER or "A" <= char <= "Z":
        return ord(char) - ord("A")
    raise MalformedTransitionCode(code, "next state", char)


def parse_transition(code):
    """Decode one 3-character code such as '1RB' into a Transition."""
    chars = iter(code)
    symbol_char = next(chars, None)
    direction_char = next(chars, None)
    state_char = next(chars, None)

    if symbol_char is None:
        raise MalformedTransitionCode(code, "write symbol")
    if symbol_char not in SYMBOL_CHARS:
        raise MalformedTransitionCode(code, "write symbol", symbol_char)
    if direction_char is None:
        raise MalformedTransitionCode(code, "direction")
    if direction_char not in DIRECTION_CHARS:
        raise MalformedTransitionCode(code, "direction", direction_char)
    next_state = parse_state(code, state_char)
    if len(code) > 3:
        raise MalformedTransitionCode(code, "trailing character", code[3])

    return Transition(SYMBOL_CHARS[symbol_char], DIRECTION_CHARS[direction_char], next_state)


def parse_table(text):
    """
    Parse a whitespace separated stream of transition codes into a table.

    Codes are consumed in pairs, one pair per declared state: the transition
    taken on a blank cell first, then the one taken on a marked cell.
    Errors are raised in stream order.
    """
    tokens = text.split()
    table = []
    for i in range(0, len(tokens), 2):
        pair = tokens[i:i + 2]
        if len(pair) < 2:
            raise OddTokenCount(len(tokens))
        table.append((parse_transition(pair[0]), parse_transition(pair[1])))
    return tuple(table)


def format_transition(transition):
    write_symbol, direction, next_state = transition
    return f"{write_symbol}{Direction(direction).letter}{state_letter(next_state)}"


def format_table(table):
    """Render a table back into its input form, e.g. '1RB 1LB 1LA 1Rh'."""
    return " ".join(format_transition(t) for row in table for t in row)


def format_standard(table):
    """Underscore separated rows, e.g. '1RB1LB_1LA1Rh'."""
    return "_".join("".join(format_transition(t) for t in row) for row in table)


def mirror_table(table):
    """Swap Left and Right in every transition."""
    return tuple(
        tuple(t._replace(direction=Direction(-t.direction)) for t in row)
        for row in table
    )
