# ───────────────────────────────────────────────────────────
from __future__ import annotations
import argparse
import logging
import sys
from dataclasses import replace
from typing import Callable, Optional, Sequence

from .config import RoadTripConfig
from .exceptions import RoadTripError
from .logging_config import configure
from .models import PathStep, QueryStatus
from .roadtrip import RoadTrip

log = logging.getLogger("roadtrip.cli")

PROMPT_FIRST = "Enter the name of the first country (type {exit} to quit): "
PROMPT_SECOND = "Enter the name of the second country (type {exit} to quit): "
INVALID = "Invalid input. Please enter valid country names."


def format_step(step: PathStep) -> str:
    return f"* {step.from_key} --> {step.to_key} ({step.km} km.)"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roadtrip",
        description="Shortest land route between two countries, by border length",
    )
    parser.add_argument(
        "datasets",
        nargs="*",
        metavar="FILE",
        help="borders.txt capdist.csv state_name.tsv (all three, in that order)",
    )
    parser.add_argument("--config", help="YAML/JSON config naming the three datasets")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Override ROADTRIP_LOG_LEVEL",
    )
    return parser


def _ask(read: Callable[[str], str], prompt: str, exit_word: str) -> Optional[str]:
    """Read one answer; None means the user wants out (exit word or EOF)."""
    try:
        answer = read(prompt)
    except EOFError:
        return None
    if answer.strip().upper() == exit_word.upper():
        return None
    return answer.strip()


def run_interactive(
    trip: RoadTrip,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    exit_word: str = "EXIT",
) -> None:
    first_prompt = PROMPT_FIRST.format(exit=exit_word)
    second_prompt = PROMPT_SECOND.format(exit=exit_word)

    while True:
        country1 = _ask(read, first_prompt, exit_word)
        if country1 is None:
            break
        if not trip.is_valid(country1):
            write(INVALID)
            continue

        country2 = _ask(read, second_prompt, exit_word)
        if country2 is None:
            break
        if not trip.is_valid(country2):
            write(INVALID)
            continue

        result = trip.query(country1, country2)
        if result.status is QueryStatus.SAME_COUNTRY:
            write(f"The distance from {country1} to {country2} is 0 km.")
        elif result.status is QueryStatus.NO_PATH:
            write("No path found.")
        else:
            write(f"Route from {country1} to {country2}:")
            for step in result.path:
                write(format_step(step))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # -- work out config ---------------------------------------------------
    try:
        config = RoadTripConfig.load_from_file(args.config) if args.config else None
    except (OSError, ValueError) as exc:
        print(f"Cannot read config: {exc}", file=sys.stderr)
        return 1

    if len(args.datasets) == 3:
        borders, capdist, state_names = args.datasets
        config = replace(
            config or RoadTripConfig(),
            borders_path=borders,
            capdist_path=capdist,
            state_name_path=state_names,
        )
    elif args.datasets or config is None:
        parser.print_usage(sys.stderr)
        print("roadtrip: expected <borders> <capdist> <state_names> or --config", file=sys.stderr)
        return 1

    configure(args.log_level or config.log_level)
    log.debug("Datasets → %s", ", ".join(map(str, config.dataset_paths)))

    # -- load tables -------------------------------------------------------
    try:
        trip = RoadTrip.from_config(config)
    except (RoadTripError, OSError) as exc:
        log.error("An error occurred initializing the road trip: %s", exc)
        return 1

    run_interactive(trip, exit_word=config.exit_word)
    return 0


if __name__ == "__main__":
    sys.exit(main())
