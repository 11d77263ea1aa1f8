from copy import copy
from typing import Iterable, Iterator, List, Optional, Tuple

from shapely.geometry import GeometryCollection
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from structural_shapes.core.errors import DegenerateCompositeError
from structural_shapes.core.logger_mixin import LoggerMixin, table_members
from structural_shapes.core.shape import Shape, mom_of_int_steiner

# net areas below this fraction of the gross area count as zero
DEGENERATE_AREA_RTOL = 1e-12


class CompositeShape(LoggerMixin):
    r"""
    A cross-section assembled by signed superposition of primitive shapes.

    Members are stored as ``(sign, shape)`` pairs in insertion order, where
    ``sign`` is ``+1`` for added and ``-1`` for subtracted material. Area,
    first and second moments of area are the signed sums of the member
    values. Every member carries its own centroid, so the parallel axis
    terms are part of the member contributions.

    Parameters
    ----------
    members : iterable of tuple(int, Shape), optional
        Initial ``(sign, shape)`` pairs. A positive sign adds the shape, a
        negative sign subtracts it.
    debug : bool, optional
        Enables debug-level logging output if True. Default is False.

    Raises
    ------
    TypeError
        If a member is not a :class:`Shape`.

    Notes
    -----
    Shapes are copied into the composite. Moving the centroid of the shape
    passed to :py:meth:`add` afterwards does not affect the composite, and
    :py:meth:`update_cog` never touches the caller's objects.

    Examples
    --------
    A hollow square tube built from two squares:

    >>> from structural_shapes import CompositeShape, Rectangle
    >>> tube = (CompositeShape()
    ...         .add(Rectangle(3, 3, center_of_gravity=(2.0, 1.5)))
    ...         .sub(Rectangle(1, 1, center_of_gravity=(2.0, 1.5))))
    >>> tube.area
    8.0
    >>> tube.calculate_cog()
    (2.0, 1.5)
    """

    # noinspection PyMissingConstructor
    def __init__(
            self,
            members: Optional[Iterable[Tuple[int, Shape]]] = None,
            debug: bool = False
    ):
        _ = debug  # handled by LoggerMixin
        self._members: List[Tuple[int, Shape]] = []
        for sign, shape in members or ():
            self._append(sign, shape)

    def _append(self, sign: int, shape: Shape) -> 'CompositeShape':
        if not isinstance(shape, Shape):
            self.logger.error(
                "Rejected member of type %s.", type(shape).__name__
            )
            raise TypeError(
                f"Members of a composite shape must be Shape instances, got "
                f"{type(shape).__name__}."
            )
        if sign not in (1, -1):
            self.logger.error("Rejected member sign %r.", sign)
            raise ValueError(f"sign must be +1 or -1, got {sign!r}.")
        self._members.append((int(sign), copy(shape)))
        self.logger.debug(
            "%s %r at %s (%d members).", "Added" if sign > 0 else "Subtracted",
            shape, shape.center_of_gravity, len(self._members)
        )
        return self

    def add(self, shape: Shape) -> 'CompositeShape':
        """Add the material of ``shape`` and return the composite."""
        return self._append(1, shape)

    def sub(self, shape: Shape) -> 'CompositeShape':
        """Remove the material of ``shape`` and return the composite."""
        return self._append(-1, shape)

    @property
    def members(self) -> Tuple[Tuple[int, Shape], ...]:
        """The ``(sign, shape)`` pairs in insertion order."""
        return tuple(self._members)

    def __iter__(self) -> Iterator[Tuple[int, Shape]]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        terms = ' '.join(
            f"{'+' if sign > 0 else '-'} {shape!r}"
            for sign, shape in self._members
        )
        return f"CompositeShape({terms})"

    @property
    def area(self) -> float:
        r"""Net area :math:`A = \sum s_i A_i`; zero for an empty composite."""
        return sum(sign * shape.area for sign, shape in self._members)

    @property
    def gross_area(self) -> float:
        """Sum of the member areas regardless of their sign."""
        return sum(shape.area for _, shape in self._members)

    @property
    def moi_x(self) -> float:
        r"""Second moment of area about the global x-axis,
        :math:`\sum s_i I_{x,i}`."""
        return sum(sign * shape.moi_x for sign, shape in self._members)

    @property
    def moi_y(self) -> float:
        r"""Second moment of area about the global y-axis,
        :math:`\sum s_i I_{y,i}`."""
        return sum(sign * shape.moi_y for sign, shape in self._members)

    @property
    def polar_moi(self) -> float:
        """Polar moment of inertia about the origin."""
        return self.moi_x + self.moi_y

    @property
    def static_moment(self) -> Tuple[float, float]:
        r"""
        First moments of area about the global axes.

        Returns
        -------
        tuple of float
            :math:`(S_x, S_y)` with

            .. math::
                S_x = \sum s_i A_i y_i, \quad S_y = \sum s_i A_i x_i

            where :math:`(x_i, y_i)` is the stored centroid of member
            :math:`i`.
        """
        s_x, s_y = 0.0, 0.0
        for sign, shape in self._members:
            x, y = shape.center_of_gravity
            weighted = sign * shape.area
            s_x += weighted * y
            s_y += weighted * x
        return s_x, s_y

    def calculate_cog(self) -> Tuple[float, float]:
        r"""
        Computes the centroid of the composite.

        Returns
        -------
        tuple of float
            The signed-area-weighted centroid

            .. math::
                x_c = \frac{\sum s_i A_i x_i}{\sum s_i A_i}, \quad
                y_c = \frac{\sum s_i A_i y_i}{\sum s_i A_i}

        Raises
        ------
        DegenerateCompositeError
            If the net area is zero, e.g. for an empty composite or when a
            shape is added and subtracted again.
        """
        area = self.area
        gross = self.gross_area
        if gross == 0 or abs(area) <= DEGENERATE_AREA_RTOL * gross:
            self.logger.error(
                "Centroid undefined: net area %s, gross area %s.", area, gross
            )
            raise DegenerateCompositeError(area, gross)
        s_x, s_y = self.static_moment
        cog = (s_y / area, s_x / area)
        self.logger.debug("Centroid of %d members: %s", len(self), cog)
        return cog

    def update_cog(self) -> Tuple[float, float]:
        """
        Re-expresses every member relative to the centroid of the composite.

        The centroid returned by :py:meth:`calculate_cog` is subtracted from
        the stored centroid of each direct member, so that the composite's
        centroid moves to the origin. Afterwards :py:attr:`moi_x` and
        :py:attr:`moi_y` refer to the centroidal axes of the composite.

        Returns
        -------
        tuple of float
            The centroid the members were shifted by.

        Raises
        ------
        DegenerateCompositeError
            If the net area is zero. Members are left untouched.
        """
        c_x, c_y = self.calculate_cog()
        for _, shape in self._members:
            x, y = shape.center_of_gravity
            shape.set_cog((x - c_x, y - c_y))
        self.logger.info(
            "Shifted %d members by (%s, %s).", len(self), -c_x, -c_y
        )
        return c_x, c_y

    @property
    def centroidal_moi_x(self) -> float:
        """Second moment of area about the composite's own centroidal x-axis.
        Members are not moved."""
        _, c_y = self.calculate_cog()
        return self.moi_x - mom_of_int_steiner(self.area, c_y)

    @property
    def centroidal_moi_y(self) -> float:
        """Second moment of area about the composite's own centroidal y-axis.
        Members are not moved."""
        c_x, _ = self.calculate_cog()
        return self.moi_y - mom_of_int_steiner(self.area, c_x)

    def outline(self, quad_segs: int = 64) -> BaseGeometry:
        """
        Boundary of the composite as a shapely geometry.

        Parameters
        ----------
        quad_segs : int, default=64
            Segments per quarter circle for round members.

        Returns
        -------
        shapely.geometry.base.BaseGeometry
            Union of the added outlines minus the union of the subtracted
            outlines. Empty for an empty composite.
        """
        positive = [s.outline(quad_segs) for sign, s in self._members
                    if sign > 0]
        negative = [s.outline(quad_segs) for sign, s in self._members
                    if sign < 0]
        if not positive:
            return GeometryCollection()
        outline = unary_union(positive)
        if negative:
            outline = outline.difference(unary_union(negative))
        return outline

    def summary(self, decimals: int = 6) -> str:
        """
        Member-wise table of the section properties.

        Parameters
        ----------
        decimals : int, default=6
            Decimals printed for floating point values.

        Returns
        -------
        str
            A grid with one row per member and a closing "Sum" row holding
            the signed totals.
        """
        header = ["Nr.", "Sign", "Shape", "x_c", "y_c", "A", "I_x", "I_y"]
        rows = []
        for i, (sign, shape) in enumerate(self._members, start=1):
            x, y = shape.center_of_gravity
            rows.append([i, "+" if sign > 0 else "-", type(shape).__name__,
                         x, y, shape.area, shape.moi_x, shape.moi_y])
        total = [None, "", "", "", "", self.area, self.moi_x, self.moi_y]
        return table_members(rows, header, total, decimals)
