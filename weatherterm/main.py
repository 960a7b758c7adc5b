"""Main entry point for the application."""

import argparse
import sys
from pathlib import Path

from weatherterm.api.openweather import OpenWeatherClient
from weatherterm.config import settings
from weatherterm.data.cities import CityDirectory
from weatherterm.data.models import FALLBACK_MESSAGE, get_unit
from weatherterm.errors import WeatherTermError
from weatherterm.service.install import install_service
from weatherterm.service.scheduler import ReportScheduler
from weatherterm.service.sink import make_sink
from weatherterm.utils.logger import setup_logger

logger = setup_logger(__name__)


def positive_int(value: str) -> int:
    """argparse type for a whole number of seconds greater than zero."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero: {number}")
    return number


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Flags shared by the run and install commands."""
    parser.add_argument(
        "--country",
        default=settings.country,
        help="a country code eg: CA or US",
    )
    parser.add_argument(
        "--city",
        default=settings.city,
        help="a city name",
    )
    parser.add_argument(
        "--key",
        default=settings.api_key,
        help="openweathermap.com api key",
    )
    parser.add_argument(
        "--unit",
        default=settings.unit,
        help="metric or imperial unit (default: %(default)s)",
    )
    parser.add_argument(
        "--sleep",
        type=positive_int,
        default=settings.sleep_seconds,
        help="number of seconds to wait before updating weather (default: %(default)s)",
    )
    parser.add_argument(
        "--file",
        default=settings.output_file,
        help="file to write weather to, if empty writes to stdout (default: %(default)s)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weatherterm", description="A weather application for the terminal"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run the weatherterm application")
    add_common_arguments(run_parser)
    run_parser.set_defaults(func=run)

    install_parser = subparsers.add_parser("install", help="Install the weatherterm service")
    add_common_arguments(install_parser)
    install_parser.set_defaults(func=install)

    return parser


def run(args: argparse.Namespace) -> None:
    """Resolve the city and report its weather until interrupted."""
    sink = make_sink(args.file)

    try:
        unit = get_unit(args.unit)
        city = CityDirectory.load().get_city(args.country, args.city)
    except WeatherTermError:
        sink.write(FALLBACK_MESSAGE)
        raise

    with OpenWeatherClient(api_key=args.key) as client:
        scheduler = ReportScheduler(
            provider=client,
            sink=sink,
            city=city,
            unit=unit,
            interval=args.sleep,
        )
        scheduler.install_signal_handlers()
        scheduler.run()


def install(args: argparse.Namespace) -> None:
    """Install the launchd agent for the given flags."""
    install_service(
        Path.home(),
        args.country,
        args.city,
        args.key or "",
        args.unit,
        args.sleep,
        args.file,
    )
    logger.info("WeatherTerm service installed successfully")


def main(argv=None) -> int:
    """Main function."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        args.func(args)
    except WeatherTermError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("interrupted before the report loop started, exiting...")
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
