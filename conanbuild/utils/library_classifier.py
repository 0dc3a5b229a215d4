import enum
import os
import re

from ..errors import BuildInfoIOError
from ..cli_logger import logger


class LinkKind(enum.Enum):
    STATIC = "static"
    SHARED = "shared"


# libfoo.so, libfoo.so.1, libfoo.so.1.2.3
SHARED_OBJECT_RE = re.compile(r"^(?P<stem>.+?)\.so(?:\.\d+)*$")
DYLIB_RE = re.compile(r"^(?P<stem>.+?)\.dylib$")
STATIC_ARCHIVE_RE = re.compile(r"^(?P<stem>.+?)\.a$")

IMPORT_LIB_EXT = ".lib"
DLL_EXT = ".dll"


def _strip_lib_prefix(name):
    if name.startswith("lib"):
        return name[3:]
    return name


def _dll_for_import_lib(directory, name):
    """``<lib dir>/../bin/<name>.dll``, where conan packages put the runtime half of an import lib."""
    return os.path.join(os.path.dirname(os.path.abspath(directory)), "bin", name + DLL_EXT)


def classify_library_file(directory, filename):
    """Return ``(name, LinkKind)`` for a library artifact, or None if ``filename`` isn't one.

    Windows import libraries keep their full stem (``libfoo.lib`` links as
    ``libfoo``) and are shared only when the matching dll is installed.
    Unix artifacts lose their ``lib`` prefix and extension, version suffix
    included.
    """
    if filename.endswith(IMPORT_LIB_EXT):
        name = filename[:-len(IMPORT_LIB_EXT)]
        if os.path.exists(_dll_for_import_lib(directory, name)):
            return name, LinkKind.SHARED
        return name, LinkKind.STATIC

    for pattern, kind in (
        (SHARED_OBJECT_RE, LinkKind.SHARED),
        (DYLIB_RE, LinkKind.SHARED),
        (STATIC_ARCHIVE_RE, LinkKind.STATIC),
    ):
        match = pattern.match(filename)
        if match:
            return _strip_lib_prefix(match.group("stem")), kind
    return None


def classify_directory(directory):
    try:
        entries = sorted(os.listdir(directory))
    except OSError as e:
        raise BuildInfoIOError(directory, e) from e

    for filename in entries:
        classified = classify_library_file(directory, filename)
        if classified is not None:
            yield classified


def find_all_libs(lib_dirs):
    """Build a library name -> LinkKind map from every directory in ``lib_dirs``.

    The same name seen twice keeps the last classification. Directories are
    taken in the given order but each one's entries are sorted by filename,
    so ``libfoo.a`` and ``libfoo.so`` side by side always end up shared
    whatever order the filesystem lists them in.
    """
    result = {}
    for directory in lib_dirs:
        for name, kind in classify_directory(directory):
            previous = result.get(name)
            if previous is not None and previous != kind:
                logger.debug(f"{name}: {previous.value} overridden by {kind.value} from {directory}")
            result[name] = kind
    return result
