"""Tests for geometry primitives and input models."""
import pytest

from penetration.models import (
    CircularSection, Conduit, ConduitKind, Point3D, RectangularSection,
    Vector3D, direction_from_points, point_along,
)

from conftest import make_duct, make_wall


class TestVector3D:

    def test_length_and_normalized(self):
        v = Vector3D(x=3.0, y=4.0, z=0.0)
        assert v.length() == pytest.approx(5.0)
        n = v.normalized()
        assert n.length() == pytest.approx(1.0)
        assert n.x == pytest.approx(0.6)
        assert n.y == pytest.approx(0.8)

    def test_zero_vector_normalizes_to_zero(self):
        v = Vector3D(x=0.0, y=0.0, z=0.0)
        assert v.is_zero()
        assert v.normalized().as_tuple() == (0.0, 0.0, 0.0)

    def test_dot_measures_distance_along_ray(self):
        # Proximity of a point is its offset dotted with the unit direction
        offset = Point3D(x=4.0, y=2.0, z=1.0) - Point3D(x=0.0, y=0.0, z=0.0)
        assert offset.dot(Vector3D(x=1.0, y=0.0, z=0.0)) == pytest.approx(4.0)
        assert Vector3D(x=1.0, y=0.0, z=0.0).dot(Vector3D(x=0.0, y=1.0, z=0.0)) == 0.0


class TestRayParameterisation:

    def test_point_along(self):
        p = point_along(
            Point3D(x=1.0, y=2.0, z=3.0), Vector3D(x=0.0, y=0.0, z=-1.0), 2.5,
        )
        assert p.as_tuple() == pytest.approx((1.0, 2.0, 0.5))

    def test_direction_from_points(self):
        d = direction_from_points(Point3D(x=1.0, y=1.0, z=0.0), Point3D(x=4.0, y=5.0, z=0.0))
        assert d.as_tuple() == (3.0, 4.0, 0.0)


class TestConduit:

    def test_from_endpoints_duct(self):
        c = Conduit.from_endpoints(
            "D1",
            Point3D(x=0.0, y=0.0, z=3.0),
            Point3D(x=0.0, y=6.0, z=3.0),
            RectangularSection(width=0.4, height=0.2),
        )
        assert c.kind == ConduitKind.DUCT
        assert c.length == pytest.approx(6.0)
        assert c.direction.as_tuple() == pytest.approx((0.0, 1.0, 0.0))
        assert c.end.as_tuple() == pytest.approx((0.0, 6.0, 3.0))

    def test_from_endpoints_pipe_kind_inferred(self):
        c = Conduit.from_endpoints(
            "P1",
            Point3D(x=0.0, y=0.0, z=0.0),
            Point3D(x=2.0, y=0.0, z=0.0),
            CircularSection(diameter=0.1),
        )
        assert c.kind == ConduitKind.PIPE

    def test_degenerate_conduits(self):
        assert make_duct(length=0.0).is_degenerate()
        assert make_duct(direction=(0.0, 0.0, 0.0)).is_degenerate()
        assert not make_duct().is_degenerate()

    def test_section_discriminator_from_dict(self):
        c = Conduit.model_validate({
            "id": "P9",
            "kind": "pipe",
            "start": {"x": 0, "y": 0, "z": 0},
            "direction": {"x": 1, "y": 0, "z": 0},
            "length": 3,
            "section": {"shape": "circular", "diameter": 0.15},
        })
        assert isinstance(c.section, CircularSection)


class TestWall:

    def test_length_is_plan_length(self):
        w = make_wall(y_range=(0.0, 8.0))
        assert w.length == pytest.approx(8.0)
        assert w.base_elevation == pytest.approx(-1.0)

    def test_degenerate_walls(self):
        assert make_wall(y_range=(1.0, 1.0)).is_degenerate()
        assert make_wall(thickness=0.0).is_degenerate()
        assert make_wall(height=0.0).is_degenerate()
        assert not make_wall().is_degenerate()
