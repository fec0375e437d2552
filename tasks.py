from typing import TYPE_CHECKING, Optional

from invocations import checks
from invocations.pytest import coverage as coverage_
from invocations.pytest import test as test_

from invoke import Collection, task

from packager import PackageTask
from packager._version import __version__

if TYPE_CHECKING:
    from invoke import Context


@task
def test(
    c: "Context",
    verbose: bool = False,
    color: bool = True,
    capture: str = "sys",
    module: Optional[str] = None,
    k: Optional[str] = None,
    x: bool = False,
    opts: str = "",
) -> None:
    """
    Run pytest. See `invocations.pytest.test` for details.
    """
    test_(
        c,
        verbose=verbose,
        color=color,
        capture=capture,
        module=module,
        k=k,
        x=x,
        opts=opts,
    )


@task(help=test.help)  # type: ignore
def integration(c: "Context", opts: Optional[str] = None) -> None:
    """
    Run the integration test suite; needs real tar & zip binaries.
    """
    opts = opts or ""
    opts += " integration/"
    test(c, opts=opts)


@task
def coverage(
    c: "Context", report: str = "term", opts: str = "", codecov: bool = False
) -> None:
    """
    Run pytest in coverage mode. See `invocations.pytest.coverage` for details.
    """
    # Use our own test() instead of theirs, and always hit both suites.
    coverage_(
        c,
        report=report,
        opts=opts,
        tester=test,
        additional_testers=[integration],
        codecov=codecov,
    )


ns = Collection(test, coverage, integration, checks.blacken, checks)
ns.configure(
    {
        "blacken": {
            # Skip build dirs when blackening.
            r"find_opts": "-and -not \\( -path './build*' -or -path './pkg*' \\)"  # noqa
        },
    }
)

# Dogfood: 'inv package' builds our own source tarball & zipfile.
PackageTask(
    "invoke-packager",
    __version__,
    need_tar=True,
    need_zip=True,
    package_files=[
        "README.rst",
        "setup.py",
        "packager/*.py",
        "tests/*.py",
        "integration/*.py",
    ],
    collection=ns,
)
