"""Tests for S02: Plane clustering."""

from roomscan.core.contracts import ClusterType
from roomscan.steps.s01_classification.contracts import ClassificationInput
from roomscan.steps.s01_classification.step import ClassificationStep
from roomscan.steps.s02_clustering.contracts import ClusteringInput
from roomscan.steps.s02_clustering.step import ClusteringStep, cluster_planes


def _classify(planes):
    return ClassificationStep().execute(ClassificationInput(planes=planes)).classified


class TestClusterPlanes:
    def test_groups_by_role(self, valid_room_planes, make_plane):
        classified = _classify(valid_room_planes + [make_plane("horizontal", (0, 2.4, 0))])
        clusters = cluster_planes(classified)

        assert [c.type for c in clusters] == [ClusterType.FLOOR, ClusterType.WALL, ClusterType.CEILING]
        assert [len(c.planes) for c in clusters] == [1, 2, 1]

    def test_empty_clusters_omitted(self, make_plane):
        clusters = cluster_planes(_classify([make_plane("vertical", width=1.0, height=3.0)]))
        assert [c.type for c in clusters] == [ClusterType.WALL]

    def test_order_preserved(self, make_plane):
        walls = [
            make_plane("vertical", (float(i), 0, 0), width=1.0, height=2.5, identifier=f"w{i}")
            for i in range(4)
        ]
        clusters = cluster_planes(_classify(walls))
        assert [c.plane.identifier for c in clusters[0].planes] == ["w0", "w1", "w2", "w3"]


class TestClusteringStep:
    def test_non_structural_dropped(self, make_plane):
        classified = _classify([
            make_plane("horizontal", (0, 0, 0)),
            make_plane("horizontal", (0, 1.0, 0)),
            make_plane("vertical", width=0.5, height=0.5),
            make_plane("unknown"),
        ])
        output = ClusteringStep().execute(ClusteringInput(classified=classified))
        assert len(output.clusters) == 1
        assert output.num_dropped == 3

    def test_empty(self):
        output = ClusteringStep().execute(ClusteringInput())
        assert output.clusters == []
        assert output.num_dropped == 0
