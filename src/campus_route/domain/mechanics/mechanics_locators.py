import numpy as np

from campus_route.app.protocols import NodeLocator
from campus_route.domain.entities.geography import Coordinate, GraphSnapshot
from campus_route.errors import EmptyGraph


class EuclidLocator(NodeLocator):
    """
    Planar nearest node over raw (lat, lng) degrees. Campus extents are small
    enough that no geodesic correction is applied.
    """

    def nearest(self, snapshot: GraphSnapshot, at: Coordinate) -> str:
        if len(snapshot) == 0:
            raise EmptyGraph()
        pts = snapshot.coords
        d = np.hypot(pts[:, 0] - at.lat, pts[:, 1] - at.lng)
        # argmin returns the first minimum -> ties go to snapshot order
        return snapshot.node_ids[int(np.argmin(d))]


def nearest_node(snapshot: GraphSnapshot, at: Coordinate) -> str:
    return EuclidLocator().nearest(snapshot, at)
