from .conan import Conan, RerunState
from .directives import DependsOn, Lib, LibDir
from .errors import (
    BuildInfoIOError,
    ConanBuildError,
    ConfigurationError,
    ManifestParseError,
    MissingDependencyError,
    TargetNotFoundError,
    UnsupportedTargetError,
)
from .manifest import BuildInfo, PackageDescriptor
from .manifest_set import BuildInfoSet
from .utils.library_classifier import LinkKind
