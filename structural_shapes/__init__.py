from structural_shapes.core import (
    BoxBeam, CompositeShape, DegenerateCompositeError, IBeam,
    InvalidGeometryError, LoggerMixin, Pipe, Rectangle, Rod, Shape,
    mom_of_int_steiner
)

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
