import logging
import os

import pytest


# pytest seems to tweak logging such that our debug logs go to stderr, which
# is then hella spammy if one is using --capture=no. So, we explicitly turn
# default logging back down.
logging.basicConfig(level=logging.INFO)


@pytest.fixture
def workdir(tmp_path):
    """
    Run the test inside a fresh temporary directory, restoring cwd after.
    """
    cwd = os.getcwd()
    os.chdir(tmp_path)
    yield tmp_path
    os.chdir(cwd)


@pytest.fixture
def project(workdir):
    """
    A small project tree to package, relative to the working directory.
    """
    for path, content in (
        ("README", "read me\n"),
        ("lib/demo.py", "print('demo')\n"),
        ("lib/demo/util.py", "x = 1\n"),
        ("doc/index.txt", "docs\n"),
    ):
        full = workdir / path
        full.parent.mkdir(parents=True, exist_ok=True)
        full.write_text(content)
    return workdir
