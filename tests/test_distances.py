"""Tests for the distance table."""

import pytest

from farebook.distances import DistanceTable, get_distance_table
from farebook.exceptions import UnsupportedLocationError, ValidationError
from farebook.models import Location


class TestDistanceTable:
    """Test distance lookups."""

    def setup_method(self):
        """Setup test fixtures."""
        self.table = get_distance_table()

    def test_default_table_size(self):
        """Test every state has a distance to every other state."""
        assert len(self.table) == 13 * 12
        assert self.table.locations() == list(Location)

    def test_known_distances(self):
        """Test a few entries of the default table."""
        assert self.table.lookup(Location.ALAGOAS, Location.SAO_PAULO) == 2140.0
        assert self.table.lookup(Location.SERGIPE, Location.RIO_DE_JANEIRO) == 1736.0
        assert self.table.lookup(Location.RIO_GRANDE_DO_NORTE, Location.MINAS_GERAIS) == 2190.0

    def test_same_location_has_no_route(self):
        """Test missing pairs return None instead of failing."""
        assert self.table.lookup(Location.BAHIA, Location.BAHIA) is None
        assert not self.table.has_route(Location.BAHIA, Location.BAHIA)

    def test_lookup_by_name(self):
        """Test lookups accept codes and display names."""
        assert self.table.lookup("alagoas", "SAO_PAULO") == 2140.0
        assert self.table.lookup("Alagoas", "Sao Paulo") == 2140.0

    def test_lookup_invalid_location(self):
        """Test unknown locations are rejected."""
        with pytest.raises(UnsupportedLocationError):
            self.table.lookup("Atlantis", Location.BAHIA)

    def test_routes_from(self):
        """Test listing every destination reachable from an origin."""
        routes = self.table.routes_from(Location.RIO_DE_JANEIRO)
        assert len(routes) == 12
        assert Location.RIO_DE_JANEIRO not in routes
        assert routes[Location.SAO_PAULO] == 429.0

    def test_shared_instance(self):
        """Test the default table is a singleton."""
        assert get_distance_table() is self.table


class TestCustomDistanceTable:
    """Test building tables from explicit data."""

    def test_asymmetric_data_is_kept(self):
        """Test symmetry is not enforced."""
        table = DistanceTable({Location.BAHIA: {Location.CEARA: 5.0}})
        assert table.lookup(Location.BAHIA, Location.CEARA) == 5.0
        assert table.lookup(Location.CEARA, Location.BAHIA) is None

    def test_string_keys(self):
        """Test keys are parsed into locations."""
        table = DistanceTable({"Bahia": {"Ceará": 5}})
        assert table.lookup(Location.BAHIA, Location.CEARA) == 5.0

    def test_non_positive_distance_rejected(self):
        """Test distances must be positive."""
        with pytest.raises(ValidationError):
            DistanceTable({Location.BAHIA: {Location.CEARA: 0.0}})

    def test_empty_table(self):
        """Test an empty table knows no routes."""
        table = DistanceTable({})
        assert len(table) == 0
        assert table.locations() == []
        assert table.lookup(Location.BAHIA, Location.CEARA) is None
