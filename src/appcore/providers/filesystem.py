"""Directory-backed resource providers.

Resources are plain files under a root directory. A name without an
extension also matches ``<name>.html``, so ``lib_ClientCore`` and
``lib_ClientCore.html`` locate the same file.
"""

from dataclasses import dataclass
from pathlib import Path

# Built-in resources shipped inside the package
SYSTEM_DIR = Path(__file__).resolve().parent.parent / "templates"

_DEFAULT_SUFFIX = ".html"


@dataclass(frozen=True, slots=True)
class FileHandle:
    """A resource file located on disk. Read on demand."""

    path: Path

    def get_raw_content(self) -> str:
        return self.path.read_text(encoding="utf-8")


class DirectoryProvider:
    """Provider that serves files from a directory.

    Security: resolves symlinks and verifies the final path is within the
    configured directory to prevent path traversal.

    Usage::

        provider = DirectoryProvider("./app")
        provider.create_template("index").get_raw_content()
    """

    __slots__ = ("_directory",)

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory).resolve()

    @property
    def directory(self) -> Path:
        return self._directory

    def create_template(self, file_name: str) -> FileHandle:
        """Locate *file_name* under the directory.

        Raises:
            ValueError: If the name escapes the directory.
            FileNotFoundError: If no matching regular file exists.
        """
        relative = file_name.lstrip("/")
        if not relative:
            msg = "Resource name must not be empty"
            raise FileNotFoundError(msg)

        candidate = (self._directory / relative).resolve()
        if not candidate.is_relative_to(self._directory):
            msg = f"Resource {file_name!r} is outside {self._directory}"
            raise ValueError(msg)

        if candidate.is_file():
            return FileHandle(candidate)

        if not candidate.suffix:
            with_suffix = candidate.with_name(candidate.name + _DEFAULT_SUFFIX)
            if with_suffix.is_file():
                return FileHandle(with_suffix)

        msg = f"No resource named {file_name!r} in {self._directory}"
        raise FileNotFoundError(msg)

    def __repr__(self) -> str:
        return f"DirectoryProvider({str(self._directory)!r})"


def system_provider() -> DirectoryProvider:
    """Provider for the resources bundled with appcore itself."""
    return DirectoryProvider(SYSTEM_DIR)
