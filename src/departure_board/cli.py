"""CLI for managing a saved departure board."""

import argparse
import json
import sys
import time

from departure_board.adapters.config import AppConfig
from departure_board.adapters.display import BoardFormatter
from departure_board.adapters.persistence import JsonScheduleRepository
from departure_board.adapters.persistence.schemas import TrainRecord
from departure_board.application.schedule_store import ScheduleStore
from departure_board.domain.models.train import Train, TrainStatus
from departure_board.main import build_store


def resolve_train(store: ScheduleStore, reference: str) -> Train | None:
    """Find a train by id, falling back to the first train with that number."""
    train = store.get(reference)
    if train is not None:
        return train
    return next((t for t in store.trains if t.train_no == reference), None)


def board_as_json(store: ScheduleStore) -> dict:
    """Serialize the board for --json output."""
    return {
        "clock": store.clock_display,
        "numPlatforms": store.settings.num_platforms,
        "trains": [
            TrainRecord.from_train(t).model_dump(mode="json", by_alias=True) for t in store.trains
        ],
        "announcements": store.announcements,
    }


def print_board(store: ScheduleStore, status: TrainStatus | None = None) -> None:
    print(
        BoardFormatter().format_board(
            store.clock_display,
            store.trains,
            store.settings.num_platforms,
            store.announcements,
            status=status,
        )
    )


def _parse_bool(value: str) -> bool:
    lowered = value.lower()
    if lowered in ("on", "true", "yes", "1"):
        return True
    if lowered in ("off", "false", "no", "0"):
        return False
    raise argparse.ArgumentTypeError(f"expected on/off, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Departure Board Management",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Load the sample trains
  departure-board-admin seed

  # Add a train
  departure-board-admin add 12006 Central Valley 09:20 09:35 --platform 3

  # Delay train 12002 by 5 minutes
  departure-board-admin delay 12002 5

  # Advance the virtual clock by 21 minutes and show the board
  departure-board-admin advance 21
        """,
    )
    parser.add_argument("--state-file", help="JSON state file (default from config)")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    show_parser = subparsers.add_parser("show", help="Show the board")
    show_parser.add_argument(
        "--status", choices=[s.value for s in TrainStatus], help="Only show trains with status"
    )
    show_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("seed", help="Replace the schedule with sample trains")
    subparsers.add_parser("clear", help="Remove all trains and announcements")

    add_parser = subparsers.add_parser("add", help="Add a train")
    add_parser.add_argument("train_no", help="Train number")
    add_parser.add_argument("origin", help="Origin station")
    add_parser.add_argument("destination", help="Destination station")
    add_parser.add_argument("arrive", help="Arrival time (HH:MM)")
    add_parser.add_argument("depart", help="Departure time (HH:MM)")
    add_parser.add_argument("--delay", type=int, default=0, help="Delay in minutes")
    add_parser.add_argument("--platform", type=int, default=None, help="Requested platform")
    add_parser.add_argument(
        "--status", choices=[s.value for s in TrainStatus], default=None, help="Initial status"
    )

    update_parser = subparsers.add_parser("update", help="Edit a train")
    update_parser.add_argument("train", help="Train id or number")
    update_parser.add_argument("--train-no", dest="train_no")
    update_parser.add_argument("--from", dest="origin")
    update_parser.add_argument("--to", dest="destination")
    update_parser.add_argument("--arrive")
    update_parser.add_argument("--depart")
    update_parser.add_argument("--delay", dest="delay_min", type=int)
    update_parser.add_argument("--platform", help="Requested platform, 0 to unset")
    update_parser.add_argument("--status", choices=[s.value for s in TrainStatus])

    delay_parser = subparsers.add_parser("delay", help="Delay a train")
    delay_parser.add_argument("train", help="Train id or number")
    delay_parser.add_argument("minutes", type=int, nargs="?", default=5, help="Minutes of delay")

    cancel_parser = subparsers.add_parser("cancel", help="Cancel a train")
    cancel_parser.add_argument("train", help="Train id or number")

    platforms_parser = subparsers.add_parser("platforms", help="Set the number of platforms")
    platforms_parser.add_argument("count", type=int)

    speed_parser = subparsers.add_parser("speed", help="Set virtual minutes per real second")
    speed_parser.add_argument("speed", type=float)

    auto_parser = subparsers.add_parser("auto", help="Toggle automatic clock advance")
    auto_parser.add_argument("enabled", type=_parse_bool, help="on or off")

    time_parser = subparsers.add_parser("time", help="Set the virtual time")
    time_parser.add_argument("value", help="Virtual time (HH:MM)")

    advance_parser = subparsers.add_parser("advance", help="Advance the virtual clock")
    advance_parser.add_argument("minutes", type=float, help="Virtual minutes to advance")

    return parser


def run_command(args: argparse.Namespace, store: ScheduleStore) -> bool:
    """Apply a parsed command to the store.

    Returns:
        True if the store was modified and should be saved.
    """
    if args.command == "show":
        if args.json:
            print(json.dumps(board_as_json(store), indent=2, ensure_ascii=False))
        else:
            print_board(store, TrainStatus(args.status) if args.status else None)
        return False

    if args.command == "seed":
        store.seed()
    elif args.command == "clear":
        store.clear()
    elif args.command == "add":
        train = store.add(
            args.train_no,
            args.origin,
            args.destination,
            args.arrive,
            args.depart,
            delay=args.delay,
            status=args.status,
            platform=args.platform,
        )
        print(f"Added train {train.train_no} (id {train.id})")
    elif args.command in ("update", "delay", "cancel"):
        train = resolve_train(store, args.train)
        if train is None:
            print(f"Train {args.train} not found.", file=sys.stderr)
            sys.exit(1)
        if args.command == "update":
            fields = (
                "train_no", "origin", "destination", "arrive", "depart",
                "delay_min", "platform", "status",
            )  # fmt: skip
            updates = {f: getattr(args, f) for f in fields if getattr(args, f) is not None}
            store.update(train.id, **updates)
        elif args.command == "delay":
            store.delay(train.id, args.minutes)
        else:
            store.cancel(train.id)
    elif args.command == "platforms":
        store.set_num_platforms(args.count)
    elif args.command == "speed":
        store.set_speed(args.speed)
    elif args.command == "auto":
        store.set_auto_advance(args.enabled, time.monotonic())
    elif args.command == "time":
        store.set_virtual_time(args.value)
    elif args.command == "advance":
        for announcement in store.advance(args.minutes):
            print(announcement)

    print_board(store)
    return True


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig()
        config.apply_toml()
        repository = JsonScheduleRepository(args.state_file or config.state_file)
        store = build_store(config, repository, seed_when_empty=False)
        if run_command(args, store):
            repository.save(store.trains, store.settings, store.announcements)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    main()


if __name__ == "__main__":
    cli_main()
