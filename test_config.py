"""
Test Geometry Configuration
===========================

YAML loading, validation and shape construction.

Usage:
    source .venv/bin/activate && pytest test_config.py
"""

import json
import logging

import pytest

from shapekit import (
    CircleShape,
    ConfigurationError,
    DegenerateGeometryError,
    ErrorKind,
    GeometryConfig,
    Point,
    RectangleShape,
    SegmentedShape,
    ShapeConfig,
    ShapeKind,
    SquareShape,
    TriangleShape,
    EllipseShape,
    get_tolerance,
)

CONFIG_YAML = """
tolerance: 0.05

shapes:
  - shape_id: "plot"
    shape_type: "polygon"
    params:
      points: [[0, 50], [100, 100], [50, 0], [0, 0]]

  - shape_id: "lot"
    shape_type: "rectangle"
    params:
      top_left: [0, 20]
      bottom_right: [30, 0]

  - shape_id: "tile"
    shape_type: "square"
    params:
      top_left: [0, 10]
      side: 10

  - shape_id: "wedge"
    shape_type: "triangle"
    params:
      a: [0, 0]
      b: [10, 10]
      c: [20, 5]

  - shape_id: "track"
    shape_type: "ellipse"
    params:
      center: [0, 0]
      a: 1
      b: 20

  - shape_id: "pond"
    shape_type: "circle"
    params:
      center: [0, 0]
      radius: 10
"""


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "geometry.yaml"
    path.write_text(CONFIG_YAML)
    return path


def test_from_yaml_builds_every_shape(config_path):
    config = GeometryConfig.from_yaml(config_path)

    assert config.tolerance == 0.05
    assert [s.shape_id for s in config.shapes] == ["plot", "lot", "tile", "wedge", "track", "pond"]

    shapes = config.build_shapes()

    assert type(shapes["plot"]) is SegmentedShape
    assert type(shapes["lot"]) is RectangleShape
    assert type(shapes["tile"]) is SquareShape
    assert type(shapes["wedge"]) is TriangleShape
    assert type(shapes["track"]) is EllipseShape
    assert type(shapes["pond"]) is CircleShape

    assert shapes["lot"].area == 600
    assert shapes["tile"].side == 10
    assert shapes["wedge"].area == 75
    assert shapes["pond"].diameter == 20
    assert shapes["plot"].point_at(1) == Point(100, 100)


def test_apply_sets_tolerance(config_path):
    config = GeometryConfig.from_yaml(config_path)

    config.apply()

    assert get_tolerance() == 0.05


def test_from_yaml_logs_load(config_path, caplog):
    caplog.set_level(logging.INFO, logger="shapekit.config")

    GeometryConfig.from_yaml(config_path)

    entries = [json.loads(r.getMessage()) for r in caplog.records if r.name == "shapekit.config"]
    assert entries[-1]['event'] == "config.loaded"
    assert entries[-1]['metadata']['tolerance'] == 0.05


def test_defaults_for_empty_document(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    config = GeometryConfig.from_yaml(path)

    assert config.tolerance == 0.01
    assert config.shapes == []
    assert config.build_shapes() == {}


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        GeometryConfig.from_yaml(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("shapes: [unclosed")

    with pytest.raises(ConfigurationError) as exc_info:
        GeometryConfig.from_yaml(path)
    assert exc_info.value.kind is ErrorKind.INVALID_CONFIGURATION


@pytest.mark.parametrize("tolerance", [0, -1, "tight", True, float("inf")])
def test_invalid_tolerance(tolerance):
    with pytest.raises(ConfigurationError):
        GeometryConfig(tolerance=tolerance)


def test_duplicate_shape_ids():
    shapes = [
        ShapeConfig("pond", "circle", {"center": [0, 0], "radius": 1}),
        ShapeConfig("pond", "circle", {"center": [5, 5], "radius": 2}),
    ]

    with pytest.raises(ConfigurationError, match="Duplicate"):
        GeometryConfig(shapes=shapes)


def test_unknown_shape_type():
    with pytest.raises(ConfigurationError, match="Invalid shape_type"):
        ShapeConfig("blob", "hexagon", {})


def test_missing_params():
    with pytest.raises(ConfigurationError, match="radius"):
        ShapeConfig("pond", "circle", {"center": [0, 0]})


def test_missing_shape_fields():
    with pytest.raises(ConfigurationError, match="shape_type"):
        GeometryConfig.from_dict({"shapes": [{"shape_id": "pond"}]})


def test_malformed_point_param():
    config = ShapeConfig("lot", "rectangle", {"top_left": [0, 20, 5], "bottom_right": [30, 0]})

    with pytest.raises(ConfigurationError, match="top_left"):
        config.build()


def test_degenerate_shape_surfaces_geometry_error():
    polygon = ShapeConfig("sliver", "polygon", {"points": [[0, 0], [1, 1]]})
    circle = ShapeConfig("dot", "circle", {"center": [0, 0], "radius": 0})

    with pytest.raises(DegenerateGeometryError):
        polygon.build()
    with pytest.raises(DegenerateGeometryError):
        circle.build()


def test_shape_config_kind():
    config = ShapeConfig("wedge", "triangle", {"a": [0, 0], "b": [1, 0], "c": [0, 1]})

    assert config.kind is ShapeKind.TRIANGLE
    assert config.build().area == pytest.approx(0.5)


@pytest.mark.parametrize("params", ["ab", [[1, 2, 3]], 42])
def test_params_must_be_a_mapping(params):
    data = {"shapes": [{"shape_id": "pond", "shape_type": "circle", "params": params}]}

    with pytest.raises(ConfigurationError, match="params") as exc_info:
        GeometryConfig.from_dict(data)
    assert exc_info.value.kind is ErrorKind.INVALID_CONFIGURATION


def test_shape_entry_must_be_a_mapping():
    with pytest.raises(ConfigurationError, match="mapping"):
        GeometryConfig.from_dict({"shapes": ["pond"]})


def test_from_yaml_logs_malformed_params(tmp_path, caplog):
    caplog.set_level(logging.ERROR, logger="shapekit.config")
    path = tmp_path / "bad_params.yaml"
    path.write_text(
        "shapes:\n"
        "  - shape_id: pond\n"
        "    shape_type: circle\n"
        "    params: ab\n"
    )

    with pytest.raises(ConfigurationError):
        GeometryConfig.from_yaml(path)

    entries = [json.loads(r.getMessage()) for r in caplog.records if r.name == "shapekit.config"]
    assert entries[-1]['event'] == "error.configuration"
    assert entries[-1]['exception']['type'] == "ConfigurationError"
