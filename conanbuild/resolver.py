from .directives import DependsOn, Lib, LibDir


def get_depends_on_package(info, package):
    """Link request for one package of ``info``; raises MissingDependencyError if absent."""
    descriptor = info.package(package)
    libs = [Lib(name=lib, is_static=not info.is_shared(lib)) for lib in descriptor.libs]
    libdirs = [LibDir(path) for path in descriptor.lib_paths]
    return DependsOn(libs=libs, libdirs=libdirs)


def get_depends_on(info, packages):
    return DependsOn.extend_all(get_depends_on_package(info, package) for package in packages)


def get_depends_on_optional(info, packages):
    """Like get_depends_on, but packages missing from ``info`` are left out."""
    return DependsOn.extend_all(
        get_depends_on_package(info, package)
        for package in packages
        if info.try_package(package) is not None
    )


def get_libcxx(info):
    lib = info.libcxx()
    if lib is None:
        return DependsOn()
    return DependsOn(libs=[lib])
