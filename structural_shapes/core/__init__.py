from structural_shapes.core.composite import CompositeShape
from structural_shapes.core.errors import (
    DegenerateCompositeError, InvalidGeometryError
)
from structural_shapes.core.logger_mixin import LoggerMixin
from structural_shapes.core.primitives import (
    BoxBeam, IBeam, Pipe, Rectangle, Rod
)
from structural_shapes.core.shape import Shape, mom_of_int_steiner

__all__ = [
    'BoxBeam',
    'CompositeShape',
    'DegenerateCompositeError',
    'IBeam',
    'InvalidGeometryError',
    'LoggerMixin',
    'Pipe',
    'Rectangle',
    'Rod',
    'Shape',
    'mom_of_int_steiner',
]
