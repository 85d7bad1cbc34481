"""
Configuration schema for shapekit.

Defines the default boundary tolerance and an optional list of named shape
declarations, loadable from YAML.
"""

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

import yaml

from shapekit.errors import ConfigurationError
from shapekit.geometry import (
    CircleShape,
    EllipseShape,
    Point,
    RectangleShape,
    SegmentedShape,
    Shape,
    ShapeKind,
    SquareShape,
    TriangleShape,
)
from shapekit.logging import LogEvent, create_logger
from shapekit.tolerance import DEFAULT_TOLERANCE, set_tolerance

logger = create_logger("config")

# Required params per shape type
SHAPE_PARAMS: Dict[ShapeKind, Sequence[str]] = {
    ShapeKind.POLYGON: ("points",),
    ShapeKind.RECTANGLE: ("top_left", "bottom_right"),
    ShapeKind.SQUARE: ("top_left", "side"),
    ShapeKind.TRIANGLE: ("a", "b", "c"),
    ShapeKind.ELLIPSE: ("center", "a", "b"),
    ShapeKind.CIRCLE: ("center", "radius"),
}


def _point(shape_id: str, name: str, value: Any) -> Point:
    try:
        return Point.from_tuple(value)
    except (TypeError, ValueError, KeyError) as e:
        raise ConfigurationError(
            f"Shape '{shape_id}': '{name}' must be an [x, y] pair, got {value!r}"
        ) from e


def _number(shape_id: str, name: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"Shape '{shape_id}': '{name}' must be a number, got {value!r}"
        ) from e


@dataclass(frozen=True)
class ShapeConfig:
    """
    Named shape declaration.

    Example YAML entry:
        - shape_id: "lot"
          shape_type: "rectangle"
          params:
            top_left: [0, 20]
            bottom_right: [30, 0]
    """

    shape_id: str
    shape_type: str
    params: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate shape declaration."""
        if not self.shape_id:
            raise ConfigurationError("shape_id cannot be empty")

        valid_types = {kind.value for kind in ShapeKind}
        if self.shape_type not in valid_types:
            raise ConfigurationError(
                f"Invalid shape_type for '{self.shape_id}': {self.shape_type}. "
                f"Must be one of {sorted(valid_types)}"
            )

        missing = [
            name for name in SHAPE_PARAMS[ShapeKind(self.shape_type)]
            if name not in self.params
        ]
        if missing:
            raise ConfigurationError(
                f"Shape '{self.shape_id}' ({self.shape_type}) missing params: {missing}"
            )

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind(self.shape_type)

    def build(self) -> Shape:
        """
        Construct the declared shape.

        Raises:
            ConfigurationError: If a param has the wrong form
            DegenerateGeometryError: If the params describe no closed shape
        """
        sid, p = self.shape_id, self.params
        kind = self.kind

        if kind is ShapeKind.POLYGON:
            points = p["points"]
            if not isinstance(points, (list, tuple)):
                raise ConfigurationError(
                    f"Shape '{sid}': 'points' must be a list of [x, y] pairs"
                )
            return SegmentedShape([_point(sid, "points", xy) for xy in points])

        if kind is ShapeKind.RECTANGLE:
            return RectangleShape(
                _point(sid, "top_left", p["top_left"]),
                _point(sid, "bottom_right", p["bottom_right"]),
            )

        if kind is ShapeKind.SQUARE:
            return SquareShape(
                _point(sid, "top_left", p["top_left"]),
                _number(sid, "side", p["side"]),
            )

        if kind is ShapeKind.TRIANGLE:
            return TriangleShape(
                _point(sid, "a", p["a"]),
                _point(sid, "b", p["b"]),
                _point(sid, "c", p["c"]),
            )

        if kind is ShapeKind.ELLIPSE:
            return EllipseShape(
                _point(sid, "center", p["center"]),
                _number(sid, "a", p["a"]),
                _number(sid, "b", p["b"]),
            )

        # circle
        return CircleShape(
            _point(sid, "center", p["center"]),
            _number(sid, "radius", p["radius"]),
        )


@dataclass(frozen=True)
class GeometryConfig:
    """
    Top-level geometry configuration.

    Immutable after construction (frozen dataclass). Call apply() to make
    `tolerance` the default for the current context.
    """

    tolerance: float = DEFAULT_TOLERANCE
    shapes: List[ShapeConfig] = field(default_factory=list)

    def __post_init__(self):
        """Validate geometry configuration."""
        if isinstance(self.tolerance, bool) or not isinstance(self.tolerance, (int, float)):
            raise ConfigurationError(
                f"tolerance must be a number, got {self.tolerance!r}"
            )
        if not math.isfinite(self.tolerance) or self.tolerance <= 0:
            raise ConfigurationError(
                f"tolerance must be finite and > 0, got {self.tolerance}"
            )

        seen = set()
        for shape in self.shapes:
            if shape.shape_id in seen:
                raise ConfigurationError(f"Duplicate shape_id: {shape.shape_id}")
            seen.add(shape.shape_id)

    def apply(self) -> None:
        """Set `tolerance` as the default boundary tolerance."""
        set_tolerance(self.tolerance)

    def build_shapes(self) -> Dict[str, Shape]:
        """Construct every declared shape, keyed by shape_id."""
        return {shape.shape_id: shape.build() for shape in self.shapes}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeometryConfig":
        """
        Build configuration from a parsed mapping.

        Raises:
            ConfigurationError: If required keys are missing or malformed
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Geometry config must be a mapping, got {type(data).__name__}"
            )

        shapes_data = data.get("shapes") or []
        if not isinstance(shapes_data, list):
            raise ConfigurationError("'shapes' must be a list")

        shapes = []
        for s in shapes_data:
            if not isinstance(s, dict):
                raise ConfigurationError(
                    f"Invalid shape entry: expected a mapping, got {type(s).__name__}"
                )
            params = s.get("params") or {}
            if not isinstance(params, dict):
                raise ConfigurationError(
                    f"Shape '{s.get('shape_id')}': 'params' must be a mapping, "
                    f"got {type(params).__name__}"
                )
            try:
                shapes.append(ShapeConfig(
                    shape_id=s["shape_id"],
                    shape_type=s["shape_type"],
                    params=dict(params),
                ))
            except KeyError as e:
                raise ConfigurationError(f"Missing required shape field: {e}")
            except TypeError as e:
                raise ConfigurationError(f"Invalid shape entry: {e}")

        return cls(
            tolerance=data.get("tolerance", DEFAULT_TOLERANCE),
            shapes=shapes,
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "GeometryConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            tolerance: 0.01

            shapes:
              - shape_id: "plot"
                shape_type: "polygon"
                params:
                  points: [[0, 0], [10, 10], [20, 5]]

              - shape_id: "pond"
                shape_type: "circle"
                params:
                  center: [0, 0]
                  radius: 10

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigurationError: If YAML is invalid or fails validation
        """
        path = Path(yaml_path)

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            config = cls.from_dict(data)
        except yaml.YAMLError as e:
            error = ConfigurationError(f"Invalid YAML in {path}: {e}")
            logger.error(
                event=LogEvent.CONFIGURATION_ERROR,
                message="Failed to parse geometry config",
                metadata={'path': str(path)},
                exc_info=error
            )
            raise error from e
        except ConfigurationError as e:
            logger.error(
                event=LogEvent.CONFIGURATION_ERROR,
                message="Invalid geometry config",
                metadata={'path': str(path)},
                exc_info=e
            )
            raise

        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message=f"Loaded geometry config with {len(config.shapes)} shapes",
            metadata={'path': str(path), 'tolerance': config.tolerance}
        )
        return config
