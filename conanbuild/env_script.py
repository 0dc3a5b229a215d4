import os
import shlex

from .errors import BuildInfoIOError
from .target import env_prefix

SH_FILE = "env.sh"
PS1_FILE = "env.ps1"

OPENSSL_PACKAGE = "openssl"


def _variable_prefix(target, is_host, host_prefix):
    if is_host and not host_prefix:
        return ""
    return env_prefix(target) + "_"


class _Script:
    """An output stream that reports write failures against its own file."""

    def __init__(self, stream, default_name):
        self.stream = stream
        self.name = getattr(stream, "name", default_name)

    def write(self, line):
        try:
            self.stream.write(line + "\n")
        except OSError as e:
            raise BuildInfoIOError(self.name, e) from e

    def flush(self):
        try:
            self.stream.flush()
        except OSError as e:
            raise BuildInfoIOError(self.name, e) from e


def write_env_source(info, is_host, sh, ps1, host_prefix=True):
    """Write the variables of one target to the ``sh`` and ``ps1`` streams.

    The host target also gets the runtime search paths (``LD_LIBRARY_PATH``
    and ``PATH``) of every dependency that ships at least one shared library.
    """
    target = info.target()
    prefix = _variable_prefix(target, is_host, host_prefix)
    sh = _Script(sh, SH_FILE)
    ps1 = _Script(ps1, PS1_FILE)

    sh.write(f"export {prefix}CONANBUILDINFO={shlex.quote(info.path)}")
    ps1.write(f"$env:{prefix}CONANBUILDINFO=\"{info.path}\"")

    if is_host:
        shared_deps = [package for package in info.all_deps() if info.has_shared_libs(package)]

        libdirs = ":".join(
            libdir for package in shared_deps for libdir in info.libdir_for(package)
        )
        if libdirs:
            sh.write(f"export LD_LIBRARY_PATH={shlex.quote(libdirs)}")

        bindirs = ";".join(
            bindir for package in shared_deps for bindir in info.bindir_for(package)
        ).replace("\\", "\\\\")
        if bindirs:
            ps1.write(f"$env:PATH=\"{bindirs};$env:PATH\"")

    openssl = info.try_package(OPENSSL_PACKAGE)
    if openssl is not None and openssl.rootpath:
        openssl_dir = openssl.rootpath
        target_prefix = env_prefix(target)
        sh.write(f"export {target_prefix}_OPENSSL_DIR={shlex.quote(openssl_dir)}")
        ps1.write(f"$env:{target_prefix}_OPENSSL_DIR=\"{openssl_dir}\"")
        if is_host:
            sh.write(f"export OPENSSL_DIR={shlex.quote(openssl_dir)}")
            ps1.write(f"$env:OPENSSL_DIR=\"{openssl_dir}\"")

    sh.flush()
    ps1.flush()


def generate_env_source(build_info_set, host, out_dir=".", host_prefix=True):
    """Write ``env.sh`` and ``env.ps1`` for every known target into ``out_dir``, creating it if needed."""
    sh_path = os.path.join(out_dir, SH_FILE)
    ps1_path = os.path.join(out_dir, PS1_FILE)
    try:
        os.makedirs(out_dir, exist_ok=True)
        with open(sh_path, "w", newline="\n") as sh, open(ps1_path, "w", newline="\n") as ps1:
            for is_host, info in build_info_set.all_targets(host):
                write_env_source(info, is_host, sh, ps1, host_prefix=host_prefix)
    except OSError as e:
        raise BuildInfoIOError(out_dir, e) from e
    return sh_path, ps1_path
