import argparse
import logging
import sys
from pathlib import Path

from src.components.keypad import KEYPAD_ROWS, SequenceInput, run_sequence
from src.domain.entities import INITIAL_STATE
from src.rules.loader import load_rules_or_default, resolve_log_level, rules_path_from_env
from src.rules.models import Rules

logger = logging.getLogger("cli")

EXIT_BAD_CONFIG = 1
EXIT_UNKNOWN_LABEL = 2


def handle_press(rules: Rules, args: argparse.Namespace) -> int:
    result = run_sequence(
        SequenceInput(labels=tuple(args.labels)),
        state=INITIAL_STATE,
        config=rules.arithmetic.to_config(),
    )
    for error in result.errors:
        logger.error(error.message)

    print(result.display.old_input)
    print(result.display.current_input)
    return 0 if result.success else EXIT_UNKNOWN_LABEL


def handle_keys(rules: Rules, args: argparse.Namespace) -> int:
    for row in KEYPAD_ROWS:
        print(" ".join(f"{label:>2}" for label in row))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Calculator CLI")
    parser.add_argument(
        "--rules",
        type=Path,
        default=None,
        help="Path to rules YAML (default: $CALC_RULES_PATH or calculator_rules.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # press
    press_parser = subparsers.add_parser(
        "press", help="Replay button labels from a cleared calculator"
    )
    press_parser.add_argument("labels", nargs="+", help="Button labels, e.g. 7 + 3 =")

    # keys
    subparsers.add_parser("keys", help="Show the keypad layout")

    args = parser.parse_args(argv)

    try:
        rules = load_rules_or_default(args.rules or rules_path_from_env())
        level = resolve_log_level(rules)
    except ValueError as e:
        print(f"CRITICAL: {e}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "press":
        return handle_press(rules, args)
    return handle_keys(rules, args)


if __name__ == "__main__":
    sys.exit(main())
