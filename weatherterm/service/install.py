"""launchd agent installation for running weatherterm at login."""

import plistlib
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from weatherterm.errors import WeatherTermError
from weatherterm.utils.logger import setup_logger

logger = setup_logger(__name__)

SERVICE_LABEL = "com.weatherterm"


def service_arguments(
    country: str,
    city: str,
    api_key: str,
    unit: str,
    sleep_seconds: int,
    output_file: str,
    python: Optional[str] = None,
) -> List[str]:
    """Command line launchd runs for the agent."""
    return [
        python or sys.executable,
        "-m",
        "weatherterm.main",
        "run",
        "--country",
        country,
        "--city",
        city,
        "--key",
        api_key,
        "--unit",
        unit,
        "--sleep",
        str(sleep_seconds),
        "--file",
        output_file,
    ]


def build_service(arguments: List[str], log_dir: Union[str, Path]) -> Dict[str, Any]:
    """Build the launchd property list for the agent."""
    log_dir = Path(log_dir)
    return {
        "Label": SERVICE_LABEL,
        "ProgramArguments": arguments,
        "RunAtLoad": True,
        "KeepAlive": True,
        "StandardOutPath": str(log_dir / "weatherterm.out.log"),
        "StandardErrorPath": str(log_dir / "weatherterm.err.log"),
    }


def install_service(
    home: Union[str, Path],
    country: str,
    city: str,
    api_key: str,
    unit: str,
    sleep_seconds: int,
    output_file: str,
) -> Path:
    """
    Write the launchd agent to ~/Library/LaunchAgents.

    Args:
        home: User home directory
        country: Country code passed to ``run``
        city: City name passed to ``run``
        api_key: OpenWeatherMap API key passed to ``run``
        unit: Unit passed to ``run``
        sleep_seconds: Interval passed to ``run``
        output_file: Report file passed to ``run``

    Returns:
        Path of the written plist
    """
    home = Path(home)
    launch_agents_dir = home / "Library" / "LaunchAgents"
    plist_path = launch_agents_dir / f"{SERVICE_LABEL}.plist"

    service = build_service(
        service_arguments(country, city, api_key, unit, sleep_seconds, output_file),
        log_dir=home / "Library" / "Logs",
    )

    try:
        launch_agents_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WeatherTermError(f"unable to create LaunchAgents directory: {e}") from e

    try:
        with open(plist_path, "wb") as f:
            plistlib.dump(service, f)
    except OSError as e:
        raise WeatherTermError(f"unable to write plist file: {e}") from e

    logger.debug(f"Wrote {plist_path}")
    return plist_path
