from typing import Any, Dict, Optional


class InvalidGeometryError(ValueError):
    r"""Raised when the dimensions of a shape do not describe a physically
    meaningful cross-section.

    Parameters
    ----------
    shape : :any:`str`
        Name of the shape class that rejected its dimensions.
    parameters : :any:`dict`
        The dimensions the shape was constructed with.
    reason : :any:`str`
        Human readable description of the violated condition.

    Notes
    -----
    The message contains the shape name and all of its dimensions so that a
    rejected section can be reconstructed from the traceback alone.

    Examples
    --------
    >>> from structural_shapes import BoxBeam
    >>> BoxBeam(width=2.0, height=1.0, thickness=0.6)
    Traceback (most recent call last):
    ...
    InvalidGeometryError: BoxBeam(width=2.0, height=1.0, thickness=0.6): ...
    """

    def __init__(self, shape: str, parameters: Dict[str, Any], reason: str):
        self.shape = shape
        self.parameters = dict(parameters)
        self.reason = reason
        args = ', '.join(f'{k}={v!r}' for k, v in self.parameters.items())
        super().__init__(f'{shape}({args}): {reason}')


class DegenerateCompositeError(ZeroDivisionError):
    r"""Raised when the centroid of a composite shape is requested although
    its signed net area vanishes.

    Parameters
    ----------
    net_area : :any:`float`
        Signed sum of the member areas.
    gross_area : :any:`float`
        Sum of the absolute member areas.
    message : :any:`str`, optional
        Overrides the default message.
    """

    def __init__(self, net_area: float, gross_area: float,
                 message: Optional[str] = None):
        self.net_area = net_area
        self.gross_area = gross_area
        if message is None:
            message = (
                f'The centroid of a composite shape with a net area of '
                f'{net_area} (gross area {gross_area}) is undefined.'
            )
        super().__init__(message)
