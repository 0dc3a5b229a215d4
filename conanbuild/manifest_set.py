import os

from .cli_logger import logger
from .errors import BuildInfoIOError, ConfigurationError, ManifestParseError, TargetNotFoundError
from .manifest import BUILD_INFO, BuildInfo

ENV_SUFFIX = "_CONANBUILDINFO"
ENV_NAME = "CONANBUILDINFO"


def _ancestors(start_dir):
    """``start_dir`` and every parent up to the filesystem root, root first."""
    current = os.path.abspath(start_dir)
    chain = [current]
    while True:
        parent = os.path.dirname(current)
        if parent == current:
            break
        chain.append(parent)
        current = parent
    return list(reversed(chain))


def _keep_last(paths):
    """Drop every occurrence of a path but the last one, keeping the order of the rest."""
    last = {}
    paths = list(paths)
    for index, path in enumerate(paths):
        last[os.path.abspath(path)] = index
    return [path for index, path in enumerate(paths) if last[os.path.abspath(path)] == index]


def _filesystem_candidates(start_dir, filename):
    for directory in _ancestors(start_dir):
        try:
            entries = sorted(os.listdir(directory))
        except OSError as e:
            logger.debug(f"Skipping subdirectories of {directory}: {e}")
            entries = []
        for entry in entries:
            subdirectory = os.path.join(directory, entry)
            if os.path.isdir(subdirectory):
                yield os.path.join(subdirectory, filename)
        yield os.path.join(directory, filename)


def paths_from_filesystem(start_dir, filename=BUILD_INFO):
    """Candidate manifest paths around ``start_dir``, in the order they are applied.

    For each ancestor (root first) the manifests of its immediate
    subdirectories come before its own, so ``build/conanbuildinfo.json`` is
    overridden by a ``conanbuildinfo.json`` sitting next to ``build/``.
    An ancestor's own manifest is also a subdirectory manifest of its
    parent; only its last position is kept.
    """
    return _keep_last(_filesystem_candidates(start_dir, filename))


def paths_from_env(environ):
    """``CONANBUILDINFO`` and ``<TARGET>_CONANBUILDINFO`` variables, sorted by name."""
    for key in sorted(environ):
        if key == ENV_NAME or (key.endswith(ENV_SUFFIX) and len(key) > len(ENV_SUFFIX)):
            yield environ[key]


class BuildInfoSet:
    """Every conanbuildinfo.json that could be found, indexed by target triple."""

    def __init__(self, info=None):
        self.info = dict(info or {})

    @classmethod
    def find_all(cls, start_dir, environ, filename=BUILD_INFO):
        """Read every manifest reachable from ``start_dir`` and ``environ``.

        Later candidates replace earlier ones with the same target:
        filesystem candidates (outermost directory first) then environment
        variables. Unreadable or malformed candidates, and candidates
        whose settings name no supported target, are skipped with a warning.
        """
        build_info_set = cls()
        candidates = list(paths_from_filesystem(start_dir, filename))
        candidates.extend(paths_from_env(environ))
        for path in _keep_last(candidates):
            if not os.path.exists(path):
                continue
            try:
                info = BuildInfo.read(path)
                target = info.target()
            except (ManifestParseError, BuildInfoIOError, ConfigurationError) as e:
                logger.warning(f"Error opening {path}: {e}")
                continue
            build_info_set.insert(info, target)
        return build_info_set

    def insert(self, info, target=None):
        if target is None:
            target = info.target()
        previous = self.info.get(target)
        if previous is not None and previous.path != info.path:
            logger.debug(f"{target}: {info.path} replaces {previous.path}")
        self.info[target] = info

    def get_current_target(self, host):
        info = self.info.get(host)
        if info is None:
            raise TargetNotFoundError(host, self.info.keys())
        return info

    def all_targets(self, host):
        for target in sorted(self.info):
            yield target == host, self.info[target]

    def targets_and_paths(self):
        for target in sorted(self.info):
            yield target, self.info[target].path

    def __len__(self):
        return len(self.info)

    def __contains__(self, target):
        return target in self.info
