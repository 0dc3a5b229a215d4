class ConanBuildError(Exception):
    """Base class for every error raised by conanbuild."""


class ConfigurationError(ConanBuildError):
    """The build environment is missing something we cannot guess (TARGET, arch/os...)."""


class UnsupportedTargetError(ConfigurationError):
    pass


class ManifestParseError(ConanBuildError):
    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid build info {self.path!r}: {reason}")


class BuildInfoIOError(ConanBuildError):
    def __init__(self, path, error):
        self.path = str(path)
        self.error = error
        super().__init__(f"Failure reading {self.path!r}: {error}")


class MissingDependencyError(ConanBuildError):
    def __init__(self, package):
        self.package = package
        super().__init__(f"No dependency {package!r} in conan info")


class TargetNotFoundError(ConanBuildError):
    def __init__(self, host, available):
        self.host = host
        self.available = sorted(available)
        super().__init__(
            f"Could not find build info for {host!r}, available are: {self.available}"
        )
