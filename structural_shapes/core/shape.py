from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields, replace
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple, Union

from shapely.geometry.base import BaseGeometry

from structural_shapes.core.errors import InvalidGeometryError

if TYPE_CHECKING:
    from structural_shapes.core.composite import CompositeShape


def mom_of_int_steiner(area: float, distance: float) -> float:
    r"""Steiner term of the parallel axis theorem.

    Parameters
    ----------
    area : :any:`float`
        Area of the section.
    distance : :any:`float`
        Perpendicular distance between the centroidal axis and the parallel
        axis of interest.

    Returns
    -------
    :any:`float`
        :math:`A \cdot d^2`, the amount by which the second moment of area
        grows when the reference axis is moved by :math:`d`.

    Notes
    -----
    .. math::
        I = I_c + A \cdot d^2
    """
    return area * distance ** 2


def validate_coordinate(coord) -> Tuple[float, float]:
    """Return ``coord`` as a tuple of two numbers or raise a ValueError."""
    if not isinstance(coord, (tuple, list)) or len(coord) != 2:
        raise ValueError(
            f"Center of gravity must be a tuple of two numeric values "
            f"(x, y), got {coord!r}."
        )
    if not all(isinstance(c, (int, float)) for c in coord):
        raise ValueError(
            f"Center of gravity coordinates must be numeric: {coord!r}"
        )
    return coord[0], coord[1]


@dataclass(frozen=True, eq=False)
class Shape(ABC):
    r"""Base class of the primitive cross-section shapes.

    A shape is described by immutable dimensions and a mutable centroid, the
    :py:attr:`center_of_gravity`, expressed in a reference frame shared with
    other shapes. All second moments of area returned by a shape refer to
    the axes through the origin of that frame, i.e. the parallel axis term
    for the stored centroid is already included.

    Parameters
    ----------
    center_of_gravity : tuple of float, optional
        Keyword only. Location :math:`(x, y)` of the local centroid.
        Default is the origin.

    Raises
    ------
    InvalidGeometryError
        If a dimension is not a non-negative number or the shape would have
        a non-positive area.
    ValueError
        If ``center_of_gravity`` is not a pair of numbers.
    """

    center_of_gravity: Tuple[float, float] = field(
        default=(0.0, 0.0), kw_only=True
    )

    def __post_init__(self):
        object.__setattr__(
            self, 'center_of_gravity',
            validate_coordinate(self.center_of_gravity)
        )
        for name, value in self.dimensions.items():
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                self._invalid(f"{name} must be a number.")
            if value < 0:
                self._invalid(f"{name} must not be negative.")
        self._validate()
        if not self.area > 0:
            self._invalid(f"area must be greater than zero, got {self.area}.")

    @abstractmethod
    def _validate(self):
        """Check the shape specific relations between the dimensions."""

    @abstractmethod
    def _rotated(self) -> Union['Shape', 'CompositeShape']:
        """Return the section turned by a quarter turn, so that x and y
        swap roles."""

    @abstractmethod
    def outline(self, quad_segs: int = 64) -> BaseGeometry:
        """Return the boundary of the section as a shapely geometry."""

    def _decomposition(self) -> Optional['CompositeShape']:
        """Signed combination of solid shapes this shape is made of, or
        None for solid shapes."""
        return None

    def _closed_form(self, name: str) -> float:
        """Evaluate a closed-form formula of a solid shape.

        Solid shapes implement ``_area`` and ``_moi_x_closed_form`` (the
        moment about their own centroidal x-axis); compound shapes implement
        ``_decomposition`` instead.
        """
        formula = getattr(self, name, None)
        if formula is None:
            raise NotImplementedError(
                f"{type(self).__name__} must implement either "
                f"_decomposition or {name}."
            )
        return formula()

    def _invalid(self, reason: str):
        raise InvalidGeometryError(type(self).__name__, self.dimensions,
                                   reason)

    @property
    def dimensions(self) -> Dict[str, Any]:
        """The geometric dimensions in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)
                if f.name != 'center_of_gravity'}

    def set_cog(self, coord: Tuple[float, float]) -> None:
        """Move the centroid of the shape to ``coord``.

        Parameters
        ----------
        coord : tuple of float
            New centroid :math:`(x, y)` in the shared reference frame.
        """
        object.__setattr__(self, 'center_of_gravity',
                           validate_coordinate(coord))

    def at_origin(self) -> 'Shape':
        """Return a copy of the shape with its centroid at the origin."""
        return replace(self, center_of_gravity=(0.0, 0.0))

    @property
    def area(self) -> float:
        decomposition = self._decomposition()
        if decomposition is not None:
            return decomposition.area
        return self._closed_form('_area')

    @property
    def moi_x(self) -> float:
        r"""Second moment of area about the global x-axis.

        Returns
        -------
        :any:`float`
            :math:`I_x = I_{x,c} + A \cdot y_c^2`, where :math:`y_c` is the
            y-coordinate of :py:attr:`center_of_gravity`.

        Notes
        -----
        Hollow and compound shapes delegate to a
        :class:`CompositeShape` of solid shapes placed at their centroid,
        which already contains the parallel axis terms.
        """
        decomposition = self._decomposition()
        if decomposition is not None:
            return decomposition.moi_x
        return (self._closed_form('_moi_x_closed_form') +
                mom_of_int_steiner(self.area, self.center_of_gravity[1]))

    @property
    def moi_y(self) -> float:
        r"""Second moment of area about the global y-axis.

        Returns
        -------
        :any:`float`
            :math:`I_y = I_{y,c} + A \cdot x_c^2`.

        Notes
        -----
        Evaluated as :py:attr:`moi_x` of the section turned by a quarter
        turn, so both axes share one formula.
        """
        return self._rotated().moi_x

    @property
    def polar_moi(self) -> float:
        r"""Polar moment of inertia :math:`J = I_x + I_y` about the origin."""
        return self.moi_x + self.moi_y

    @property
    def centroidal_moi_x(self) -> float:
        """Second moment of area about the shape's own centroidal x-axis."""
        return self.at_origin().moi_x

    @property
    def centroidal_moi_y(self) -> float:
        """Second moment of area about the shape's own centroidal y-axis."""
        return self.at_origin().moi_y

    def moi_x_about(self, offset: float) -> float:
        r"""Second moment of area about an x-parallel axis at ``offset``
        from the centroid: :math:`I_{x,c} + A \cdot d^2`."""
        return self.centroidal_moi_x + mom_of_int_steiner(self.area, offset)

    def moi_y_about(self, offset: float) -> float:
        r"""Second moment of area about a y-parallel axis at ``offset``
        from the centroid: :math:`I_{y,c} + A \cdot d^2`."""
        return self.centroidal_moi_y + mom_of_int_steiner(self.area, offset)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Extents ``(min_x, min_y, max_x, max_y)`` of the section."""
        width, height = self._extent()
        x, y = self.center_of_gravity
        return (x - width / 2, y - height / 2, x + width / 2, y + height / 2)

    @abstractmethod
    def _extent(self) -> Tuple[float, float]:
        """Overall width and height of the section."""
