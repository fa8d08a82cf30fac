# app.py

import argparse
import sys

from rich.console import Console
from rich.markup import escape

from bb_config.config_loader import load_config
from bb_logger.logger import JSONLogger, run_entry
from bb_simulator.errors import TuringMachineError
from bb_simulator.runner import run_bounded
from bb_simulator.transitions import format_table, parse_table
from bb_simulator.turing_machine import TuringMachine
from bb_tools.ruleset_inspect import pretty_print_ruleset

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_BUDGET_EXHAUSTED = 2

console = Console()


# === Utilities ===
def read_table_text(source):
    """Read the whole transition stream before anything runs."""
    if source in (None, "-"):
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def report_progress(steps):
    console.print(f"Steps taken {steps:,}")


def report_result(machine, outcome, max_steps):
    if outcome.halted:
        console.print(f"Finished running busy beaver for {machine.num_states} states")
        console.print(f"Non blank symbols: {outcome.non_blank}")
        console.print(f"Steps taken: {outcome.steps}")
        return EXIT_OK

    console.print(f"[yellow]Step budget of {max_steps:,} exhausted before halting "
                  f"({machine.num_states} states)[/yellow]")
    console.print(f"Non blank symbols so far: {outcome.non_blank}")
    console.print(f"Steps taken: {outcome.steps}")
    return EXIT_BUDGET_EXHAUSTED


def apply_overrides(config, args):
    if args.max_steps is not None:
        config["max_steps"] = args.max_steps
    if args.progress_interval is not None:
        config["progress_interval"] = args.progress_interval
    if args.quiet:
        config["show_progress"] = False
    if args.log:
        config["log_results"] = True
    return config


def positive_int(value):
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(description="Busy Beaver Turing machine simulator")
    parser.add_argument("table", nargs="?", default="-",
                        help="File with whitespace separated transition codes ('-' for stdin)")
    parser.add_argument("--config", help="Path to a JSON runtime config")
    parser.add_argument("--max-steps", type=positive_int, help="Stop after this many steps if not halted")
    parser.add_argument("--progress-interval", type=positive_int, help="Steps between progress reports")
    parser.add_argument("--quiet", action="store_true", help="Do not print progress reports")
    parser.add_argument("--log", action="store_true", help="Append the run record to the JSON lines logs")
    parser.add_argument("--show-tape", action="store_true", help="Print the cells around the head at the end")
    parser.add_argument("--inspect", action="store_true", help="Print the parsed table and exit without running")
    return parser


def run(args):
    config = apply_overrides(load_config(args.config), args)
    table = parse_table(read_table_text(args.table))

    if args.inspect:
        pretty_print_ruleset(table, console=console)
        return EXIT_OK

    machine = TuringMachine(table)
    progress = report_progress if config["show_progress"] else None
    outcome = run_bounded(
        machine,
        max_steps=config["max_steps"],
        progress=progress,
        progress_interval=config["progress_interval"],
    )

    exit_code = report_result(machine, outcome, config["max_steps"])
    if args.show_tape:
        console.print(machine.visualize(), markup=False)

    if config["log_results"]:
        logger = JSONLogger(config["output_directory"], config["log_file_prefix"])
        logger.log_run(run_entry(format_table(table), machine.num_states, outcome, config["max_steps"]))

    return exit_code


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except (TuringMachineError, FileNotFoundError, ValueError, TypeError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False)
    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
