"""Step a state machine loaded from a JSON table.

Purpose:
  - Validate a transition table file and replay transitions against it.
Inputs:
  - --table JSON file, optional --initial state, repeated --transition names.
Outputs:
  - SUMMARY/step lines on stdout; exit status 2 on any table/machine error.
Example:
  - python -m statewise.cli.run_table --table auth.json --transition ATTEMPT_LOGIN
"""

from __future__ import annotations

import argparse

from statewise.cli._debug_utils import _fmt_bool, configure_cli_logging
from statewise.core.domain.errors import StateMachineError
from statewise.core.domain.transition_graph import registered_transitions
from statewise.core.engine.machine import create_machine
from statewise.infra.json_files import load_table_file


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate a state table and apply transitions to it")
    parser.add_argument("--table", required=True, help="State table JSON file")
    parser.add_argument("--initial", default=None, help="Initial state (default: first declared state)")
    parser.add_argument(
        "--transition",
        action="append",
        default=[],
        dest="transitions",
        help="Transition name to apply; repeat to apply several in order",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def _error(exc: Exception) -> None:
    print(f"SUMMARY status=ERROR error={type(exc).__name__} message={exc}")
    raise SystemExit(2)


def main() -> None:
    args = parse_args()
    configure_cli_logging(args)

    try:
        table = load_table_file(args.table)
        machine = create_machine(table, args.initial)
    except (StateMachineError, ValueError) as exc:
        _error(exc)

    print(f"SUMMARY states={len(table)} initial={machine()}")
    for i, name in enumerate(args.transitions, start=1):
        before = machine()
        after = machine(name)
        print(f"step={i} transition={name} from={before} to={after} changed={_fmt_bool(after != before)}")

    available = ",".join(registered_transitions(machine(), table))
    print(f"SUMMARY final_state={machine()} available={available}")


if __name__ == "__main__":
    main()
