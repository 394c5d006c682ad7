"""Main entry point for the departure board simulation."""

import argparse
import asyncio
import logging
import sys

from departure_board.adapters.config import AppConfig, TrainSeedLoader
from departure_board.adapters.display import ConsoleBoardBroadcaster
from departure_board.adapters.persistence import JsonScheduleRepository
from departure_board.adapters.pollers import ClockTicker
from departure_board.application.schedule_store import ScheduleStore
from departure_board.domain.models.board_settings import BoardSettings, SimulationSettings
from departure_board.domain.ports.schedule_repository import ScheduleRepository
from departure_board.domain.time_math import to_minutes

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def default_settings(config: AppConfig) -> BoardSettings:
    """Build board settings from configuration."""
    return BoardSettings(
        num_platforms=config.num_platforms,
        sim=SimulationSettings(
            virtual_minutes=to_minutes(config.start_time),
            auto_advance=config.auto_advance,
            speed=config.speed,
        ),
    )


def build_store(
    config: AppConfig,
    repository: ScheduleRepository | None = None,
    seed_when_empty: bool = True,
) -> ScheduleStore:
    """Create a schedule store, restoring saved state when available.

    Without saved state the store is seeded from the [[trains]] of the TOML
    config, or with the sample trains if none are configured and
    ``seed_when_empty`` is set.
    """
    restored = repository.load() if repository is not None else None
    settings = restored.settings if restored else default_settings(config)

    store = ScheduleStore(
        settings=settings,
        trains=restored.trains if restored else None,
        announcements=restored.announcements if restored else None,
        announcement_limit=config.announcement_limit,
        event_detection=config.event_detection,
        reserve_manual_platforms=config.reserve_manual_platforms,
        departed_grace_minutes=config.departed_grace_minutes,
    )
    if restored:
        return store

    seeds = TrainSeedLoader.load(config)
    for seed in seeds:
        try:
            store.add(
                seed.train_no,
                seed.origin,
                seed.destination,
                seed.arrive,
                seed.depart,
                delay=seed.delay,
                status=seed.status,
                platform=seed.platform,
            )
        except ValueError as e:
            logger.warning(f"Skipping seed train {seed.train_no}: {e}")
    if not seeds and seed_when_empty:
        store.seed()
    return store


async def run(config: AppConfig, duration: float | None = None, save: bool = True) -> None:
    """Run the live board until interrupted or for ``duration`` seconds."""
    repository = JsonScheduleRepository(config.state_file) if save else None
    store = build_store(config, repository)
    logger.info(
        f"Board ready: {len(store.trains)} train(s), {store.settings.num_platforms} platform(s), "
        f"virtual time {store.clock_display}"
    )

    ticker = ClockTicker(
        store,
        ConsoleBoardBroadcaster(),
        repository=repository,
        tick_interval_seconds=config.tick_interval_seconds,
    )
    await ticker.start()
    try:
        if duration is None:
            await asyncio.Event().wait()
        else:
            await asyncio.sleep(duration)
    finally:
        await ticker.stop()
        if repository is not None:
            repository.save(store.trains, store.settings, store.announcements)


async def main(argv: list[str] | None = None) -> None:
    """Main application entry point."""
    parser = argparse.ArgumentParser(description="Train station departure board simulation")
    parser.add_argument(
        "--duration", type=float, default=None, help="Stop after this many real seconds"
    )
    parser.add_argument("--no-save", action="store_true", help="Do not read or write state file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    config = AppConfig()
    try:
        config.apply_toml()
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    await run(config, duration=args.duration, save=not args.no_save)


def cli_main() -> None:
    """Synchronous entry point for the board command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    cli_main()
