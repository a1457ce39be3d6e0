"""Tests for the CSV graph repository adapter."""

import pytest

from urban_network.adapters.graph import CSVGraphRepository
from urban_network.config import GraphConfig
from urban_network.domain.errors import GraphLoadError, UnknownNodeError
from urban_network.domain.models import TimeBucket

NODES_CSV = """id,name,category,x,y,population,is_facility
# districts
1,Maadi,Residential,31.25,29.96,250000,false
2,Nasr City,Mixed,31.34,30.06,500000,false

3,Downtown,Business,31.24,30.04,,
101,Airport,Airport,31.41,30.11,,true
"""

EXISTING_CSV = """from,to,distance,capacity,condition
1,3,8.5,3000,7
2,3,5.9,2800,8
3,101,9.0,4000,9
"""

POTENTIAL_CSV = """from,to,distance,capacity,cost
1,2,22.8,4000,450
"""

TRAFFIC_CSV = """road_id,morning,afternoon,evening,night
1-3,2800,1500,2600,800
3-2,2700,1400,2500,700
"""


class TestCSVGraphRepository:
    """Test suite for CSVGraphRepository."""

    @pytest.fixture
    def data_dir(self, tmp_path):
        (tmp_path / "nodes.csv").write_text(NODES_CSV, encoding="utf-8")
        (tmp_path / "existing_roads.csv").write_text(EXISTING_CSV, encoding="utf-8")
        (tmp_path / "potential_roads.csv").write_text(POTENTIAL_CSV, encoding="utf-8")
        (tmp_path / "traffic_data.csv").write_text(TRAFFIC_CSV, encoding="utf-8")
        return tmp_path

    @pytest.fixture
    def repository(self, data_dir):
        return CSVGraphRepository(GraphConfig(data_dir=data_dir))

    def test_load_builds_full_network(self, repository):
        graph = repository.load()

        assert graph.node_ids == (1, 2, 3, 101)
        assert graph.edge_count == 4
        assert [e.is_existing for e in graph.edges] == [True, True, True, False]
        assert graph.node(1).population == 250000
        assert graph.node(3).population == 0

    def test_facility_flag_and_id_fallback(self, repository):
        graph = repository.load()

        assert graph.node(101).is_facility is True
        assert graph.node(2).is_facility is False
        # Empty flag falls back to the id range rule.
        assert graph.node(3).is_facility is False

    def test_load_is_cached_until_cleared(self, repository):
        first = repository.load()

        assert repository.load() is first
        repository.clear_cache()
        assert repository.load() is not first

    def test_load_traffic(self, repository):
        graph = repository.load()
        traffic = repository.load_traffic()
        (road_2_3,) = [e for e in graph.edges if e.key == (2, 3)]

        assert len(traffic) == 2
        assert traffic.lookup(road_2_3, TimeBucket.NIGHT) == 700

    def test_optional_files_may_be_missing(self, data_dir):
        (data_dir / "potential_roads.csv").unlink()
        (data_dir / "traffic_data.csv").unlink()
        repository = CSVGraphRepository(GraphConfig(data_dir=data_dir))

        assert repository.load().edge_count == 3
        assert len(repository.load_traffic()) == 0

    def test_missing_nodes_file_raises(self, data_dir):
        (data_dir / "nodes.csv").unlink()
        repository = CSVGraphRepository(GraphConfig(data_dir=data_dir))

        with pytest.raises(GraphLoadError) as exc_info:
            repository.load()
        assert exc_info.value.file_path.endswith("nodes.csv")
        assert isinstance(exc_info.value.cause, OSError)

    def test_malformed_road_raises(self, data_dir):
        (data_dir / "existing_roads.csv").write_text(
            "from,to,distance,capacity,condition\n1,3,far,3000,7\n", encoding="utf-8"
        )
        repository = CSVGraphRepository(GraphConfig(data_dir=data_dir))

        with pytest.raises(GraphLoadError):
            repository.load()

    def test_road_to_unknown_node_raises(self, data_dir):
        (data_dir / "existing_roads.csv").write_text(
            "from,to,distance,capacity,condition\n1,77,2.0,3000,7\n", encoding="utf-8"
        )
        repository = CSVGraphRepository(GraphConfig(data_dir=data_dir))

        with pytest.raises(UnknownNodeError):
            repository.load()

    def test_malformed_traffic_raises(self, data_dir):
        (data_dir / "traffic_data.csv").write_text(
            "road_id,morning,afternoon,evening,night\n13,1,2,3,4\n", encoding="utf-8"
        )
        repository = CSVGraphRepository(GraphConfig(data_dir=data_dir))

        with pytest.raises(GraphLoadError):
            repository.load_traffic()
