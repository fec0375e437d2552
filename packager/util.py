import logging
import os


LOG_FORMAT = "%(name)s.%(module)s.%(funcName)s: %(message)s"


def enable_logging():
    logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)


# Allow from-the-start debugging (vs toggled by Invoke's --debug flag, which
# configures the root logger) via shell env var.
if os.environ.get("PACKAGER_DEBUG"):
    enable_logging()

# Add top level logger functions to global namespace. Meh.
log = logging.getLogger("packager")
for x in ("debug",):
    globals()[x] = getattr(log, x)


def flatten(items):
    """
    Yield members of ``items``, expanding any nested non-string iterables.

    Used to turn prerequisite lists such as ``[task, "README", filelist]``
    into a flat stream of tasks and paths.
    """
    for item in items:
        if isinstance(item, (str, bytes, os.PathLike)):
            yield item
        elif hasattr(item, "__iter__"):
            yield from flatten(item)
        else:
            yield item
