import logging
from typing import Any, Iterable, Sequence

from tabulate import tabulate


class LoggerMixin:
    """
    A mixin class providing a class-specific logger to operation classes.

    Every subclass gets a logger named ``<module>.<class>``. By default the
    logger is silent (a :class:`logging.NullHandler` at ``WARNING`` level).
    Passing ``debug=True`` to the constructor of a subclass attaches a
    formatted stream handler and lowers the level to ``DEBUG``.

    Parameters
    ----------
    *args : Any
        Positional arguments passed to the parent class (if any).
    debug : bool, optional
        Enables debug-level logging output if True. Default is False.
    **kwargs : Any
        Additional keyword arguments passed to the parent class (if any).

    Attributes
    ----------
    logger : logging.Logger
        A logger instance configured for the specific subclass.

    Notes
    -----
    Subclasses do not have to call ``LoggerMixin.__init__`` themselves: the
    subclass hook wraps their ``__init__`` so that the logger exists before
    the first line of the subclass constructor runs.
    """

    _formatter = logging.Formatter(
        fmt=(
            "%(asctime)s [%(levelname)s] %(name)s.%(funcName)s():%(lineno)d "
            "- %(message)s"
        ),
        datefmt="%H:%M:%S",
    )

    def __init__(self, *args: Any, debug: bool = False, **kwargs: Any):
        self._logger = self._configure_logger(
            f"{self.__class__.__module__}.{self.__class__.__name__}", debug
        )
        self._logger.debug(
            "Instantiated %s(debug=%s)", self.__class__.__name__, debug
        )

    @classmethod
    def _configure_logger(cls, name: str, debug: bool) -> logging.Logger:
        """Return the named logger, attaching handlers on first use."""
        logger = logging.getLogger(name)
        logger.propagate = False

        if not logger.handlers:
            logger.addHandler(logging.NullHandler())

        if debug:
            # one stream handler per logger, shared by all instances
            if not any(isinstance(h, logging.StreamHandler)
                       for h in logger.handlers):
                sh = logging.StreamHandler()
                sh.setFormatter(cls._formatter)
                logger.addHandler(sh)
            logger.setLevel(logging.DEBUG)
        else:
            logger.setLevel(logging.WARNING)
        return logger

    @property
    def logger(self) -> logging.Logger:
        """
        Returns the logger instance associated with this object.

        Returns
        -------
        logging.Logger
            The configured logger.
        """
        if not hasattr(self, "_logger"):
            LoggerMixin.__init__(self)
        return self._logger

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        orig_init = getattr(cls, "__init__", None)
        if orig_init is LoggerMixin.__init__:
            return

        def wrapped_init(self, *a, **k):
            LoggerMixin.__init__(self, debug=k.get("debug", False))
            if orig_init is not None:
                return orig_init(self, *a, **k)

        cls.__init__ = wrapped_init


def table_members(rows: Iterable[Sequence[Any]], header: Sequence[str],
                  total: Sequence[Any] = None, decimals: int = 6) -> str:
    r"""Render member-wise section properties as a text grid.

    Parameters
    ----------
    rows : iterable of sequence
        One row per member, matching ``header``.
    header : sequence of str
        Column titles.
    total : sequence, optional
        Values of the closing row. Its first cell is replaced by ``"Sum"``.
    decimals : int, default=6
        Number of decimals printed for floating point values.

    Returns
    -------
    str
        The table in ``tabulate``'s ``grid`` format.
    """
    data = [list(row) for row in rows]
    if total is not None:
        data.append(["Sum"] + list(total)[1:])
    return tabulate(data, headers=list(header), tablefmt="grid",
                    floatfmt=f".{decimals}f")
