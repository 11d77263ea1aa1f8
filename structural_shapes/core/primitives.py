from dataclasses import dataclass
from typing import Tuple

import numpy as np
from shapely.geometry import Point, box
from shapely.geometry.base import BaseGeometry

from structural_shapes.core.composite import CompositeShape
from structural_shapes.core.shape import Shape


def _swap(coord: Tuple[float, float]) -> Tuple[float, float]:
    return coord[1], coord[0]


@dataclass(frozen=True, eq=False)
class Rod(Shape):
    r"""Solid circular section.

    Parameters
    ----------
    radius : :any:`float`
        Radius :math:`r` of the rod, greater than zero.

    Notes
    -----
    .. math::
        A = \pi r^2, \quad I_{x,c} = I_{y,c} = \frac{\pi r^4}{4}

    Examples
    --------
    >>> from structural_shapes import Rod
    >>> Rod(1.0).moi_x  # pi / 4
    0.7853981633974483
    """

    radius: float

    def _validate(self):
        pass

    def _area(self) -> float:
        return np.pi * self.radius ** 2

    def _moi_x_closed_form(self) -> float:
        return np.pi * self.radius ** 4 / 4

    def _rotated(self) -> 'Rod':
        return Rod(self.radius,
                   center_of_gravity=_swap(self.center_of_gravity))

    def _extent(self) -> Tuple[float, float]:
        return 2 * self.radius, 2 * self.radius

    def outline(self, quad_segs: int = 64) -> BaseGeometry:
        return Point(self.center_of_gravity).buffer(
            self.radius, quad_segs=quad_segs
        )


@dataclass(frozen=True, eq=False)
class Rectangle(Shape):
    r"""Solid rectangular section.

    Parameters
    ----------
    width : :any:`float`
        Extent :math:`b` along the x-axis.
    height : :any:`float`
        Extent :math:`h` along the y-axis.

    Notes
    -----
    .. math::
        A = b h, \quad I_{x,c} = \frac{b h^3}{12}

    The moment about the y-axis is the moment about the x-axis of the
    rectangle with width and height swapped.
    """

    width: float
    height: float

    def _validate(self):
        pass

    def _area(self) -> float:
        return self.width * self.height

    def _moi_x_closed_form(self) -> float:
        return self.width * self.height ** 3 / 12

    def _rotated(self) -> 'Rectangle':
        return Rectangle(self.height, self.width,
                         center_of_gravity=_swap(self.center_of_gravity))

    def _extent(self) -> Tuple[float, float]:
        return self.width, self.height

    def outline(self, quad_segs: int = 64) -> BaseGeometry:
        return box(*self.bounds)


@dataclass(frozen=True, eq=False)
class Pipe(Shape):
    r"""Hollow circular section.

    Parameters
    ----------
    outer_radius : :any:`float`
        Outer radius :math:`R`.
    thickness : :any:`float`
        Wall thickness :math:`t`, at most :math:`R`. A thickness equal to
        the outer radius describes a solid rod.

    Notes
    -----
    Evaluated as ``Rod(R) - Rod(R - t)``:

    .. math::
        A = \pi (R^2 - (R - t)^2), \quad
        I_{x,c} = \frac{\pi}{4} (R^4 - (R - t)^4)
    """

    outer_radius: float
    thickness: float

    def _validate(self):
        if self.thickness > self.outer_radius:
            self._invalid("thickness must not exceed outer_radius.")

    @property
    def inner_radius(self) -> float:
        return self.outer_radius - self.thickness

    def _decomposition(self) -> CompositeShape:
        composite = CompositeShape().add(
            Rod(self.outer_radius, center_of_gravity=self.center_of_gravity)
        )
        if self.inner_radius > 0:
            composite.sub(Rod(self.inner_radius,
                              center_of_gravity=self.center_of_gravity))
        return composite

    def _rotated(self) -> 'Pipe':
        return Pipe(self.outer_radius, self.thickness,
                    center_of_gravity=_swap(self.center_of_gravity))

    def _extent(self) -> Tuple[float, float]:
        return 2 * self.outer_radius, 2 * self.outer_radius

    def outline(self, quad_segs: int = 64) -> BaseGeometry:
        return self._decomposition().outline(quad_segs)


@dataclass(frozen=True, eq=False)
class BoxBeam(Shape):
    r"""Hollow rectangular section with a constant wall thickness.

    Parameters
    ----------
    width : :any:`float`
        Outer extent :math:`b` along the x-axis.
    height : :any:`float`
        Outer extent :math:`h` along the y-axis.
    thickness : :any:`float`
        Wall thickness :math:`t`; :math:`2t` must not exceed the width or
        the height.

    Notes
    -----
    Evaluated as ``Rectangle(b, h) - Rectangle(b - 2t, h - 2t)``:

    .. math::
        A = b h - (b - 2t)(h - 2t)
    """

    width: float
    height: float
    thickness: float

    def _validate(self):
        if 2 * self.thickness > min(self.width, self.height):
            self._invalid(
                "twice the thickness must not exceed width or height."
            )

    def _decomposition(self) -> CompositeShape:
        composite = CompositeShape().add(
            Rectangle(self.width, self.height,
                      center_of_gravity=self.center_of_gravity)
        )
        inner_w = self.width - 2 * self.thickness
        inner_h = self.height - 2 * self.thickness
        if inner_w > 0 and inner_h > 0:
            composite.sub(Rectangle(inner_w, inner_h,
                                    center_of_gravity=self.center_of_gravity))
        return composite

    def _rotated(self) -> 'BoxBeam':
        return BoxBeam(self.height, self.width, self.thickness,
                       center_of_gravity=_swap(self.center_of_gravity))

    def _extent(self) -> Tuple[float, float]:
        return self.width, self.height

    def outline(self, quad_segs: int = 64) -> BaseGeometry:
        return self._decomposition().outline(quad_segs)


@dataclass(frozen=True, eq=False)
class IBeam(Shape):
    r"""Doubly symmetric I-section.

    Parameters
    ----------
    width : :any:`float`
        Flange width :math:`b` along the x-axis.
    height : :any:`float`
        Overall height :math:`h` along the y-axis.
    web_thickness : :any:`float`
        Thickness :math:`t_w` of the web, at most :math:`b`.
    flange_thickness : :any:`float`
        Thickness :math:`t_f` of each flange; :math:`2 t_f` must not exceed
        :math:`h`.

    Notes
    -----
    Evaluated as the full rectangle minus the two voids beside the web:

    .. math::
        A = b h - (h - 2 t_f)(b - t_w)

    The moment about the y-axis is the moment about the x-axis of the same
    decomposition turned by a quarter turn. Flanges filling the whole height
    leave a solid rectangle.

    Examples
    --------
    >>> from structural_shapes import IBeam
    >>> beam = IBeam(width=0.5, height=0.25, web_thickness=0.025,
    ...              flange_thickness=0.05)
    >>> round(beam.area, 6)
    0.05375
    """

    width: float
    height: float
    web_thickness: float
    flange_thickness: float

    def _validate(self):
        if self.web_thickness > self.width:
            self._invalid("web_thickness must not exceed width.")
        if 2 * self.flange_thickness > self.height:
            self._invalid(
                "twice the flange_thickness must not exceed height."
            )

    def _decomposition(self, rotated: bool = False) -> CompositeShape:
        void_w = (self.width - self.web_thickness) / 2
        void_h = self.height - 2 * self.flange_thickness
        # void centroids sit left and right of the web
        shift = (self.width + self.web_thickness) / 4
        x, y = self.center_of_gravity
        if rotated:
            composite = CompositeShape().add(
                Rectangle(self.height, self.width, center_of_gravity=(y, x))
            )
        else:
            composite = CompositeShape().add(
                Rectangle(self.width, self.height, center_of_gravity=(x, y))
            )
        # flanges filling the height or a web filling the width leave no void
        if void_w <= 0 or void_h <= 0:
            return composite
        for side in (-1, 1):
            if rotated:
                void = Rectangle(void_h, void_w,
                                 center_of_gravity=(y, x + side * shift))
            else:
                void = Rectangle(void_w, void_h,
                                 center_of_gravity=(x + side * shift, y))
            composite.sub(void)
        return composite

    def _rotated(self) -> CompositeShape:
        return self._decomposition(rotated=True)

    def _extent(self) -> Tuple[float, float]:
        return self.width, self.height

    def outline(self, quad_segs: int = 64) -> BaseGeometry:
        return self._decomposition().outline(quad_segs)
