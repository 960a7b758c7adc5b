"""Periodic weather report loop."""

import signal
import threading
from typing import Iterable, Optional, Protocol

from weatherterm.data.models import FALLBACK_MESSAGE, City, Unit, Weather
from weatherterm.data.report import format_report
from weatherterm.errors import WeatherUnavailable
from weatherterm.utils.logger import setup_logger

logger = setup_logger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class WeatherProvider(Protocol):
    def report(self, city: City, unit: Unit) -> Weather:
        ...


class ReportSink(Protocol):
    def write(self, message: str) -> None:
        ...


class ReportScheduler:
    """Fetch, format and emit a weather report every interval until stopped."""

    def __init__(
        self,
        provider: WeatherProvider,
        sink: ReportSink,
        city: City,
        unit: Unit,
        interval: float = 300,
        shutdown: Optional[threading.Event] = None,
    ):
        """
        Initialize report scheduler.

        Args:
            provider: Source of current weather
            sink: Destination for reports
            city: City to report on
            unit: Unit system for temperature
            interval: Seconds between reports
            shutdown: Event that stops the loop when set
        """
        if not interval > 0:
            raise ValueError(f"Invalid interval: {interval}")

        self.provider = provider
        self.sink = sink
        self.city = city
        self.unit = unit
        self.interval = interval
        self.shutdown = shutdown or threading.Event()
        self.cycles = 0

    def run_once(self) -> None:
        """
        Run one fetch, format and emit cycle.

        Raises:
            WeatherUnavailable: After emitting the fallback message
            WriteFailure: If the sink cannot be written
        """
        self.cycles += 1
        try:
            weather = self.provider.report(self.city, self.unit)
        except WeatherUnavailable:
            self.sink.write(FALLBACK_MESSAGE)
            raise

        report = format_report(weather)
        self.sink.write(report)
        logger.info(f"Reported weather for {self.city.name}: {report}")

    def run(self) -> None:
        """
        Report immediately, then once per interval until shutdown is requested.

        Returns cleanly on shutdown; any cycle error ends the loop.
        """
        logger.info(
            f"Reporting weather for {self.city.name}, {self.city.country} "
            f"every {self.interval}s"
        )
        self.run_once()

        while not self.shutdown.wait(self.interval):
            self.run_once()

        logger.info("received shutdown signal, exiting...")

    def stop(self) -> None:
        """Request shutdown; observed at the next wait between cycles."""
        self.shutdown.set()

    def install_signal_handlers(self, signals: Iterable[int] = SHUTDOWN_SIGNALS) -> None:
        """Stop the loop on SIGINT and SIGTERM. Must be called from the main thread."""
        for sig in signals:
            signal.signal(sig, self._handle_signal)

    def _handle_signal(self, signum, frame) -> None:
        logger.debug(f"Received signal {signum}")
        self.stop()
