"""City directory backed by the OpenWeatherMap city list."""

from pathlib import Path
from typing import Optional, Union

import pandas as pd

from weatherterm.config import settings
from weatherterm.data.models import City
from weatherterm.errors import CityNotFound, WeatherTermError
from weatherterm.utils.logger import setup_logger

logger = setup_logger(__name__)

BUNDLED_CITY_LIST = Path(__file__).parent / "city.list.min.json"

CITY_COLUMNS = ["id", "name", "country"]


class CityDirectory:
    """Read-only list of cities searchable by country code and name."""

    def __init__(self, cities: pd.DataFrame):
        """
        Initialize city directory.

        Args:
            cities: DataFrame with id, name and country columns, in dataset order
        """
        self.cities = cities.reindex(columns=CITY_COLUMNS).reset_index(drop=True)
        self._names = self.cities["name"].fillna("").astype(str).str.casefold()
        self._countries = self.cities["country"].fillna("").astype(str).str.casefold()

    @classmethod
    def load(cls, path: Union[str, Path, None] = None) -> "CityDirectory":
        """
        Load the directory from a JSON city list.

        Args:
            path: City list file (default: configured path or the bundled list)

        Returns:
            City directory
        """
        path = Path(path or settings.city_list_path or BUNDLED_CITY_LIST)

        try:
            cities = pd.read_json(
                path,
                orient="records",
                dtype={"id": "int64", "name": "object", "country": "object"},
                convert_dates=False,
            )
        except (OSError, ValueError) as e:
            raise WeatherTermError(f"unable to load city list {path}: {e}") from e

        logger.debug(f"Loaded {len(cities)} cities from {path}")
        return cls(cities)

    @classmethod
    def from_records(cls, records) -> "CityDirectory":
        """Build a directory from an iterable of city dictionaries."""
        return cls(pd.DataFrame.from_records(list(records), columns=CITY_COLUMNS))

    def __len__(self) -> int:
        return len(self.cities)

    def resolve(self, country_code: str, city_name: str) -> Optional[City]:
        """
        Find the first city matching country code and name, ignoring case.

        Returns:
            Matching city or None
        """
        mask = (self._countries == country_code.casefold()) & (
            self._names == city_name.casefold()
        )
        matches = self.cities[mask]
        if matches.empty:
            return None

        row = matches.iloc[0]
        return City(id=int(row["id"]), name=str(row["name"]), country=str(row["country"]))

    def get_city(self, country_code: str, city_name: str) -> City:
        """Resolve a city, raising CityNotFound if it is absent."""
        city = self.resolve(country_code, city_name)
        if city is None:
            raise CityNotFound(country_code, city_name)
        return city
