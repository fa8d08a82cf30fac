import argparse
import sys

from rich.console import Console
from rich.table import Table

from bb_simulator.transitions import (
    HALT_STATE,
    MAX_STATES,
    format_standard,
    format_transition,
    parse_table,
    state_letter,
)


def build_table_view(table):
    """One row per state, one column per symbol read, in Busy Beaver notation."""
    view = Table(title="Transition Table", show_header=True, header_style="bold magenta")
    view.add_column("State", justify="center")
    view.add_column("0", justify="center")
    view.add_column("1", justify="center")

    for state, (on_blank, on_mark) in enumerate(table):
        row = [state_letter(state) if state < MAX_STATES else str(state)]
        for transition in (on_blank, on_mark):
            action = format_transition(transition)
            if transition.next_state == HALT_STATE:
                action = f"[green]{action}[/green]"
            row.append(action)
        view.add_row(*row)
    return view


def pretty_print_ruleset(table, console=None):
    console = console or Console()
    console.print(build_table_view(table))
    console.print(f"States: {len(table)}")
    console.print(f"Standard form: {format_standard(table)}", markup=False)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Busy Beaver Transition Table Inspector")
    parser.add_argument("table", nargs="?", default="-", help="File with transition codes ('-' for stdin)")
    args = parser.parse_args(argv)

    if args.table == "-":
        text = sys.stdin.read()
    else:
        with open(args.table, "r", encoding="utf-8") as f:
            text = f.read()

    pretty_print_ruleset(parse_table(text))


if __name__ == "__main__":
    main()
