import json
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import BuildInfoIOError, ConfigurationError, ManifestParseError, MissingDependencyError
from .directives import Lib
from .target import target_from_arch_and_os
from .utils.library_classifier import LinkKind, find_all_libs

BUILD_INFO = "conanbuildinfo.json"
LIBCXX_SETTING = "compiler.libcxx"


@dataclass(frozen=True)
class PackageDescriptor:
    name: str
    libs: Tuple[str, ...] = ()
    lib_paths: Tuple[str, ...] = ()
    include_paths: Tuple[str, ...] = ()
    bin_paths: Tuple[str, ...] = ()
    rootpath: Optional[str] = None

    @classmethod
    def from_json(cls, path, entry):
        if not isinstance(entry, dict):
            raise ManifestParseError(path, f"dependency entry is not an object: {entry!r}")
        name = entry.get("name")
        if not isinstance(name, str):
            raise ManifestParseError(path, f"dependency without a name: {entry!r}")

        def string_list(key):
            value = entry.get(key, [])
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ManifestParseError(path, f"{name}.{key} must be a list of strings")
            return tuple(value)

        rootpath = entry.get("rootpath")
        if rootpath is not None and not isinstance(rootpath, str):
            raise ManifestParseError(path, f"{name}.rootpath must be a string")

        return cls(
            name=name,
            libs=string_list("libs"),
            lib_paths=string_list("lib_paths"),
            include_paths=string_list("include_paths"),
            bin_paths=string_list("bin_paths"),
            rootpath=rootpath,
        )


class BuildInfo:
    """One ``conanbuildinfo.json``: the dependencies conan installed for a single target."""

    def __init__(self, path, packages, settings, libs):
        self.path = path
        self.packages = packages
        self.settings = settings
        self.libs = libs

    @classmethod
    def read(cls, path):
        path = os.path.abspath(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise ManifestParseError(path, f"not UTF-8 text: {e}") from e
        except OSError as e:
            raise BuildInfoIOError(path, e) from e
        return cls.parse(path, text)

    @classmethod
    def parse(cls, path, text):
        try:
            document = json.loads(text)
        except ValueError as e:
            raise ManifestParseError(path, f"invalid JSON: {e}") from e

        if not isinstance(document, dict):
            raise ManifestParseError(path, "top level is not an object")
        settings = document.get("settings")
        if not isinstance(settings, dict):
            raise ManifestParseError(path, "missing 'settings' object")
        dependencies = document.get("dependencies")
        if not isinstance(dependencies, list):
            raise ManifestParseError(path, "missing 'dependencies' array")
        libcxx = settings.get(LIBCXX_SETTING)
        if libcxx is not None and not isinstance(libcxx, str):
            raise ManifestParseError(path, f"{LIBCXX_SETTING} must be a string")

        packages = {}
        for entry in dependencies:
            descriptor = PackageDescriptor.from_json(path, entry)
            packages[descriptor.name] = descriptor

        libs = find_all_libs(
            lib_dir
            for descriptor in packages.values()
            for lib_dir in descriptor.lib_paths
        )
        return cls(path, packages, settings, libs)

    def target(self):
        arch = self.settings.get("arch")
        os_name = self.settings.get("os")
        if not isinstance(arch, str) or not isinstance(os_name, str) or not arch or not os_name:
            raise ConfigurationError(f"{self.path}: settings must define both 'arch' and 'os'")
        return target_from_arch_and_os(arch, os_name)

    platform_triple = target

    def all_deps(self):
        return list(self.packages)

    def package(self, name):
        descriptor = self.try_package(name)
        if descriptor is None:
            raise MissingDependencyError(name)
        return descriptor

    def try_package(self, name):
        return self.packages.get(name)

    def libs_for(self, name):
        return list(self.package(name).libs)

    def libdir_for(self, name):
        return list(self.package(name).lib_paths)

    def includes_for(self, name):
        return list(self.package(name).include_paths)

    def bindir_for(self, name):
        return list(self.package(name).bin_paths)

    def rootpath_for(self, name):
        return self.package(name).rootpath

    def link_kind(self, lib):
        # Libraries we never found on disk (header-only packages still listing
        # a lib, missing artifacts) are linked as shared.
        return self.libs.get(lib, LinkKind.SHARED)

    def is_shared(self, lib):
        return self.link_kind(lib) is LinkKind.SHARED

    def has_shared_libs(self, name):
        return any(self.is_shared(lib) for lib in self.libs_for(name))

    def libcxx_name(self):
        libcxx = self.settings.get(LIBCXX_SETTING)
        if libcxx is None:
            return None
        if libcxx.startswith("libstdc++"):
            return "stdc++"
        if libcxx.startswith("lib"):
            return libcxx[3:]
        return libcxx

    def libcxx(self):
        name = self.libcxx_name()
        if name is None:
            return None
        return Lib(name=name, is_static=False)

    def __repr__(self):
        return f"BuildInfo({self.path!r})"
