import logging
import sys

_HANDLER_NAME = "todo-console"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure a console handler on the root logger.

    Safe to call more than once: the handler is only installed the first time,
    later calls just adjust the level.
    """
    root = logging.getLogger()
    if not isinstance(logging.getLevelName(str(level).upper()), int):
        level = "INFO"
    root.setLevel(str(level).upper())

    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(fmt)
    root.addHandler(handler)

    # SQL statements are only wanted when the engine is created with echo=True,
    # which sets its own level on sqlalchemy.engine.Engine
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
