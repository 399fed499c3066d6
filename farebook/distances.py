"""Static distance lookup between supported locations."""

import logging
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from farebook.exceptions import ValidationError
from farebook.models import Location

logger = logging.getLogger(__name__)

# Road distances between states. Same-state pairs are absent.
DEFAULT_DISTANCES: Dict[Location, Dict[Location, float]] = {
    Location.ALAGOAS: {
        Location.BAHIA: 875.0,
        Location.CEARA: 1037.0,
        Location.ESPIRITO_SANTO: 1630.0,
        Location.MARANHAO: 1648.0,
        Location.PARAIBA: 266.0,
        Location.PERNAMBUCO: 256.0,
        Location.PIAUI: 1004.0,
        Location.RIO_DE_JANEIRO: 1950.0,
        Location.RIO_GRANDE_DO_NORTE: 494.0,
        Location.SAO_PAULO: 2140.0,
        Location.SERGIPE: 285.0,
        Location.MINAS_GERAIS: 1620.0,
    },
    Location.BAHIA: {
        Location.ALAGOAS: 875.0,
        Location.CEARA: 1213.0,
        Location.ESPIRITO_SANTO: 1202.0,
        Location.MARANHAO: 1067.0,
        Location.PARAIBA: 1237.0,
        Location.PERNAMBUCO: 969.0,
        Location.PIAUI: 1135.0,
        Location.RIO_DE_JANEIRO: 1530.0,
        Location.RIO_GRANDE_DO_NORTE: 1347.0,
        Location.SAO_PAULO: 1942.0,
        Location.SERGIPE: 324.0,
        Location.MINAS_GERAIS: 1370.0,
    },
    Location.CEARA: {
        Location.ALAGOAS: 1037.0,
        Location.BAHIA: 1213.0,
        Location.ESPIRITO_SANTO: 1992.0,
        Location.MARANHAO: 690.0,
        Location.PARAIBA: 702.0,
        Location.PERNAMBUCO: 800.0,
        Location.PIAUI: 579.0,
        Location.RIO_DE_JANEIRO: 2688.0,
        Location.RIO_GRANDE_DO_NORTE: 553.0,
        Location.SAO_PAULO: 2760.0,
        Location.SERGIPE: 1070.0,
        Location.MINAS_GERAIS: 2230.0,
    },
    Location.ESPIRITO_SANTO: {
        Location.ALAGOAS: 1630.0,
        Location.BAHIA: 1202.0,
        Location.CEARA: 1992.0,
        Location.MARANHAO: 1868.0,
        Location.PARAIBA: 1876.0,
        Location.PERNAMBUCO: 1792.0,
        Location.PIAUI: 1941.0,
        Location.RIO_DE_JANEIRO: 521.0,
        Location.RIO_GRANDE_DO_NORTE: 2162.0,
        Location.SAO_PAULO: 883.0,
        Location.SERGIPE: 1407.0,
        Location.MINAS_GERAIS: 524.0,
    },
    Location.MARANHAO: {
        Location.ALAGOAS: 1648.0,
        Location.BAHIA: 1067.0,
        Location.CEARA: 690.0,
        Location.ESPIRITO_SANTO: 1868.0,
        Location.PARAIBA: 1327.0,
        Location.PERNAMBUCO: 1455.0,
        Location.PIAUI: 510.0,
        Location.RIO_DE_JANEIRO: 2262.0,
        Location.RIO_GRANDE_DO_NORTE: 1574.0,
        Location.SAO_PAULO: 2832.0,
        Location.SERGIPE: 1410.0,
        Location.MINAS_GERAIS: 2180.0,
    },
    Location.PARAIBA: {
        Location.ALAGOAS: 266.0,
        Location.BAHIA: 1237.0,
        Location.CEARA: 702.0,
        Location.ESPIRITO_SANTO: 1876.0,
        Location.MARANHAO: 1327.0,
        Location.PERNAMBUCO: 120.0,
        Location.PIAUI: 837.0,
        Location.RIO_DE_JANEIRO: 2394.0,
        Location.RIO_GRANDE_DO_NORTE: 188.0,
        Location.SAO_PAULO: 2786.0,
        Location.SERGIPE: 769.0,
        Location.MINAS_GERAIS: 2000.0,
    },
    Location.PERNAMBUCO: {
        Location.ALAGOAS: 256.0,
        Location.BAHIA: 969.0,
        Location.CEARA: 800.0,
        Location.ESPIRITO_SANTO: 1792.0,
        Location.MARANHAO: 1455.0,
        Location.PARAIBA: 120.0,
        Location.PIAUI: 1131.0,
        Location.RIO_DE_JANEIRO: 2408.0,
        Location.RIO_GRANDE_DO_NORTE: 296.0,
        Location.SAO_PAULO: 2786.0,
        Location.SERGIPE: 510.0,
        Location.MINAS_GERAIS: 1940.0,
    },
    Location.PIAUI: {
        Location.ALAGOAS: 1004.0,
        Location.BAHIA: 1135.0,
        Location.CEARA: 579.0,
        Location.ESPIRITO_SANTO: 1941.0,
        Location.MARANHAO: 510.0,
        Location.PARAIBA: 837.0,
        Location.PERNAMBUCO: 1131.0,
        Location.RIO_DE_JANEIRO: 2404.0,
        Location.RIO_GRANDE_DO_NORTE: 1114.0,
        Location.SAO_PAULO: 2818.0,
        Location.SERGIPE: 1218.0,
        Location.MINAS_GERAIS: 2060.0,
    },
    Location.RIO_DE_JANEIRO: {
        Location.ALAGOAS: 1950.0,
        Location.BAHIA: 1530.0,
        Location.CEARA: 2688.0,
        Location.ESPIRITO_SANTO: 521.0,
        Location.MARANHAO: 2262.0,
        Location.PARAIBA: 2394.0,
        Location.PERNAMBUCO: 2408.0,
        Location.PIAUI: 2404.0,
        Location.RIO_GRANDE_DO_NORTE: 2582.0,
        Location.SAO_PAULO: 429.0,
        Location.SERGIPE: 1736.0,
        Location.MINAS_GERAIS: 339.0,
    },
    Location.RIO_GRANDE_DO_NORTE: {
        Location.ALAGOAS: 494.0,
        Location.BAHIA: 1347.0,
        Location.CEARA: 553.0,
        Location.ESPIRITO_SANTO: 2162.0,
        Location.MARANHAO: 1574.0,
        Location.PARAIBA: 188.0,
        Location.PERNAMBUCO: 296.0,
        Location.PIAUI: 1114.0,
        Location.RIO_DE_JANEIRO: 2582.0,
        Location.SAO_PAULO: 2792.0,
        Location.SERGIPE: 995.0,
        Location.MINAS_GERAIS: 2190.0,
    },
    Location.SAO_PAULO: {
        Location.ALAGOAS: 2140.0,
        Location.BAHIA: 1942.0,
        Location.CEARA: 2760.0,
        Location.ESPIRITO_SANTO: 883.0,
        Location.MARANHAO: 2832.0,
        Location.PARAIBA: 2786.0,
        Location.PERNAMBUCO: 2786.0,
        Location.PIAUI: 2818.0,
        Location.RIO_DE_JANEIRO: 429.0,
        Location.RIO_GRANDE_DO_NORTE: 2792.0,
        Location.SERGIPE: 2134.0,
        Location.MINAS_GERAIS: 586.0,
    },
    Location.SERGIPE: {
        Location.ALAGOAS: 285.0,
        Location.BAHIA: 324.0,
        Location.CEARA: 1070.0,
        Location.ESPIRITO_SANTO: 1407.0,
        Location.MARANHAO: 1410.0,
        Location.PARAIBA: 769.0,
        Location.PERNAMBUCO: 510.0,
        Location.PIAUI: 1218.0,
        Location.RIO_DE_JANEIRO: 1736.0,
        Location.RIO_GRANDE_DO_NORTE: 995.0,
        Location.SAO_PAULO: 2134.0,
        Location.MINAS_GERAIS: 1190.0,
    },
    Location.MINAS_GERAIS: {
        Location.ALAGOAS: 1620.0,
        Location.BAHIA: 1370.0,
        Location.CEARA: 2230.0,
        Location.ESPIRITO_SANTO: 524.0,
        Location.MARANHAO: 2180.0,
        Location.PARAIBA: 2000.0,
        Location.PERNAMBUCO: 1940.0,
        Location.PIAUI: 2060.0,
        Location.RIO_DE_JANEIRO: 339.0,
        Location.RIO_GRANDE_DO_NORTE: 2190.0,
        Location.SAO_PAULO: 586.0,
        Location.SERGIPE: 1190.0,
    },
}


class DistanceTable:
    """
    Read-only lookup from an (origin, destination) pair to a distance.

    The table is not forced to be symmetric; a missing pair means no route
    is known and is a valid state.
    """

    def __init__(self, distances: Mapping[Location, Mapping[Location, float]]):
        """
        Build a table from a nested origin -> destination -> distance mapping.

        Raises:
            UnsupportedLocationError: If a key is not a known location
            ValidationError: If a distance is not positive
        """
        self._distances: Dict[Tuple[Location, Location], float] = {}
        for origin, row in distances.items():
            origin = Location.parse(origin)
            for destination, distance in row.items():
                destination = Location.parse(destination)
                if distance <= 0:
                    raise ValidationError(
                        f"Distance from {origin} to {destination} must be positive, got {distance}"
                    )
                self._distances[(origin, destination)] = float(distance)

    def lookup(self, origin, destination) -> Optional[float]:
        """
        Get the distance between two locations.

        Args:
            origin: Location or anything Location.parse accepts
            destination: Location or anything Location.parse accepts

        Returns:
            Distance, or None if no route is known
        """
        key = (Location.parse(origin), Location.parse(destination))
        distance = self._distances.get(key)
        if distance is None:
            logger.debug("No distance entry for %s -> %s", key[0], key[1])
        return distance

    def has_route(self, origin, destination) -> bool:
        return self.lookup(origin, destination) is not None

    def routes_from(self, origin) -> Dict[Location, float]:
        """All known destinations from origin with their distances."""
        origin = Location.parse(origin)
        return {
            destination: distance
            for (start, destination), distance in self._distances.items()
            if start == origin
        }

    def locations(self) -> List[Location]:
        """Locations that appear in at least one pair, in declaration order."""
        seen = {location for pair in self._distances for location in pair}
        return [location for location in Location if location in seen]

    def __len__(self) -> int:
        return len(self._distances)

    def __iter__(self) -> Iterator[Tuple[Location, Location]]:
        return iter(self._distances)


# Singleton instance for the compiled-in table
_default_table: Optional[DistanceTable] = None


def get_distance_table() -> DistanceTable:
    """Get the shared default distance table."""
    global _default_table
    if _default_table is None:
        _default_table = DistanceTable(DEFAULT_DISTANCES)
    return _default_table
