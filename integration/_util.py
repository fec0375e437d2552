from functools import wraps
import shutil

from pytest import skip


def requires(*programs):
    """
    Decorator causing tests to skip if any of ``programs`` isn't on $PATH.
    """

    def decorator(f):
        @wraps(f)
        def inner(*args, **kwargs):
            missing = [x for x in programs if shutil.which(x) is None]
            if missing:
                skip("Missing {}".format(", ".join(missing)))
            return f(*args, **kwargs)

        return inner

    return decorator
