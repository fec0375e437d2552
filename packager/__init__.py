__all__ = (
    "DirectoryTask",
    "FileList",
    "FileOps",
    "FileTask",
    "GemSpec",
    "MissingPrerequisite",
    "PackageTask",
    "__version__",
    "__version_info__",
    "directory",
    "file_task",
    "when_writing",
)


from ._version import __version__, __version_info__
from .exceptions import MissingPrerequisite
from .filelist import FileList
from .fileutils import FileOps
from .gem import GemSpec
from .package import PackageTask
from .tasks import DirectoryTask, FileTask, directory, file_task, when_writing
