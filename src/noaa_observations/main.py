"""Main entry point for the NOAA observations service."""

import argparse
import asyncio
import logging
import signal
import sys
from typing import NoReturn

from .config import PositionConfig, Settings, get_settings
from .outputs import OutputManager
from .position import StaticPositionSource
from .producer import ObservationProducer
from .scheduler import PollScheduler

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Reduce noise from httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def build_producer(settings: Settings) -> ObservationProducer:
    """Wire the producer from settings."""
    return ObservationProducer(
        position_source=StaticPositionSource(settings.position),
        bus=OutputManager(jsonl_config=settings.jsonl, kafka_config=settings.kafka),
        nws_config=settings.nws,
    )


async def run_service(
    producer: ObservationProducer,
    settings: Settings,
    shutdown_event: asyncio.Event,
    run_once: bool = False,
) -> None:
    """Run the producer until shutdown.

    Args:
        producer: The producer to run.
        settings: Application settings.
        shutdown_event: Event to signal shutdown.
        run_once: If True, run one cycle and exit instead of polling.
    """
    try:
        if run_once:
            logger.info("Running a single check")
            await producer.run_once()
            return

        scheduler = PollScheduler(
            producer.run_once,
            interval_seconds=settings.nws.check_interval_minutes * 60,
            initial_delay_seconds=settings.nws.initial_delay_seconds,
        )
        scheduler.start()
        try:
            await shutdown_event.wait()
        finally:
            await scheduler.stop()
    finally:
        logger.info("Shutting down")
        await producer.close()


async def run(settings: Settings, run_once: bool = False) -> None:
    """Build the producer, install signal handlers and run."""
    shutdown_event = asyncio.Event()

    def handle_shutdown(sig: signal.Signals) -> None:
        logger.info("Received %s, initiating shutdown...", sig.name)
        shutdown_event.set()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, handle_shutdown, sig)

    await run_service(build_producer(settings), settings, shutdown_event, run_once)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Publish NOAA observations of nearby weather stations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Poll stations around a fixed position every 15 minutes
  noaa-observations --latitude 42.35 --longitude -71.05

  # Run once and exit (useful for testing or cron)
  noaa-observations --once --latitude 42.35 --longitude -71.05

Environment Variables:
  NWS_USER_AGENT               User-Agent sent to api.weather.gov
  NWS_RADIUS_NM                Station search radius (default: 100)
  NWS_CHECK_INTERVAL_MINUTES   Minutes between checks (default: 15)
  POSITION_LATITUDE            Fixed latitude
  POSITION_LONGITUDE           Fixed longitude
  KAFKA_ENABLED                Publish to Kafka (default: false)
  JSONL_PATH                   JSON-lines output file
        """,
    )

    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single check and exit",
    )

    parser.add_argument("--latitude", type=float, help="Fixed latitude (overrides env)")
    parser.add_argument("--longitude", type=float, help="Fixed longitude (overrides env)")

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    args = parser.parse_args()
    if (args.latitude is None) != (args.longitude is None):
        parser.error("--latitude and --longitude must be given together")
    return args


def main() -> NoReturn:
    """Main entry point."""
    args = parse_args()

    settings = get_settings()
    if args.latitude is not None and args.longitude is not None:
        settings.position = PositionConfig(latitude=args.latitude, longitude=args.longitude)

    setup_logging(args.log_level or settings.log_level)

    logger.info("NOAA observations starting")
    logger.info("User-Agent: %s", settings.nws.user_agent)

    try:
        asyncio.run(run(settings, run_once=args.once))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")

    logger.info("Shutdown complete")
    sys.exit(0)


if __name__ == "__main__":
    main()
