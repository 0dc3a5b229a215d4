import enum
import os

from . import config as config_module
from . import directives
from . import resolver
from .cli_logger import logger
from .env_script import generate_env_source
from .errors import ConfigurationError
from .manifest_set import BuildInfoSet


class RerunState(enum.Enum):
    NOT_TRIGGERED = "not-triggered"
    TRIGGERED = "triggered"


class Conan:
    """Link a build script against the packages conan installed for its target.

    Typical use from a build script::

        conan = Conan.from_env()
        conan.depends_on(["zeromq"])
        conan.depends_on_optional(["libsodium"])
        conan.depends_on_libcxx()
    """

    def __init__(self, build_info_set, host, emit=directives.default_emit, env_dir=".", host_prefix=True):
        self.build_info_set = build_info_set
        self.host = host
        self.emit = emit
        self.env_dir = env_dir
        self.host_prefix = host_prefix
        self.rerun_state = RerunState.NOT_TRIGGERED

        logger.info("Targets:")
        for target, path in build_info_set.targets_and_paths():
            logger.step_info(f"{target}: {path}", indent=4)

    @classmethod
    def from_env(cls, environ=None, start_dir=None, target=None, conf=None, emit=directives.default_emit):
        """Discover manifests from ``start_dir`` (cwd) and ``environ`` (os.environ).

        The host is ``target``, else ``$TARGET``, else ``target`` from
        conanbuild.toml.
        """
        environ = os.environ if environ is None else environ
        start_dir = os.getcwd() if start_dir is None else start_dir
        if conf is None:
            conf = config_module.load_config(path=start_dir)
        conf = config_module.settings(conf)

        host = target or environ.get("TARGET") or conf["target"]
        if not host:
            raise ConfigurationError("TARGET variable must be set")

        build_info_set = BuildInfoSet.find_all(start_dir, environ, filename=conf["manifest"])
        return cls(
            build_info_set,
            host,
            emit=emit,
            env_dir=conf["env_dir"] or start_dir,
            host_prefix=conf["host_prefix"],
        )

    def build_info(self):
        return self.build_info_set.get_current_target(self.host)

    def mark_rerun_if_changed(self):
        if self.rerun_state is RerunState.TRIGGERED:
            return
        path = self.build_info().path
        self.rerun_state = RerunState.TRIGGERED
        self.emit(directives.rerun_if_changed(path))

    def depends_on(self, packages):
        self.mark_rerun_if_changed()
        depends_on = resolver.get_depends_on(self.build_info(), packages)
        depends_on.apply(self.emit)
        return depends_on

    def depends_on_optional(self, packages):
        self.mark_rerun_if_changed()
        depends_on = resolver.get_depends_on_optional(self.build_info(), packages)
        depends_on.apply(self.emit)
        return depends_on

    def depends_on_libcxx(self):
        self.mark_rerun_if_changed()
        depends_on = resolver.get_libcxx(self.build_info())
        depends_on.apply(self.emit)
        return depends_on

    def generate_env_source(self, out_dir=None):
        out_dir = self.env_dir if out_dir is None else out_dir
        return generate_env_source(self.build_info_set, self.host, out_dir, host_prefix=self.host_prefix)

    @staticmethod
    def package_is_shared(options, package):
        """Read ``<package>:shared`` from conan options; None when the option isn't set."""
        value = options.get(f"{package}:shared")
        if value is None:
            return None
        normalized = str(value).strip().lower()
        if normalized == "true":
            return True
        if normalized == "false":
            return False
        raise ConfigurationError(f"Option {package}:shared must be True or False, got {value!r}")
