from .errors import UnsupportedTargetError

# conan settings.os -> settings.arch -> target triple
TARGET_TRIPLES = {
    "Linux": {
        "x86_64": "x86_64-unknown-linux-gnu",
        "x86": "i686-unknown-linux-gnu",
        "armv8": "aarch64-unknown-linux-gnu",
        "armv7": "armv7-unknown-linux-gnueabihf",
    },
    "Windows": {
        "x86_64": "x86_64-pc-windows-msvc",
        "x86": "i686-pc-windows-msvc",
        "armv8": "aarch64-pc-windows-msvc",
    },
    "Macos": {
        "armv8": "aarch64-apple-darwin",
        "x86_64": "x86_64-apple-darwin",
    },
    "iOS": {
        "armv8": "aarch64-apple-ios",
        "x86_64": "x86_64-apple-ios",
    },
    "Android": {
        "armv8": "aarch64-linux-android",
        "armv7": "armv7-linux-androideabi",
        "x86": "i686-linux-android",
        "x86_64": "x86_64-linux-android",
    },
}


def target_from_arch_and_os(arch, os_name):
    """Map conan's ``arch``/``os`` settings to a target triple."""
    archs = TARGET_TRIPLES.get(os_name)
    if archs is None:
        raise UnsupportedTargetError(f"Unsupported OS {os_name!r}")
    triple = archs.get(arch)
    if triple is None:
        raise UnsupportedTargetError(f"Unsupported architecture {arch!r}/{os_name!r}")
    return triple


def env_prefix(triple):
    return triple.replace("-", "_")


def supported_targets():
    """Yield ``(os, arch, triple)`` for every known combination."""
    for os_name, archs in TARGET_TRIPLES.items():
        for arch, triple in archs.items():
            yield os_name, arch, triple
