"""Cargo build-script directives.

Every line printed on stdout that starts with ``cargo:`` is an instruction
to cargo; everything else the build script wants to say goes to stderr.
"""
from dataclasses import dataclass, field
from typing import List

import click

DIRECTIVE_PREFIX = "cargo:"


def rerun_if_changed(path):
    return f"{DIRECTIVE_PREFIX}rerun-if-changed={path}"


def link_lib(name, is_static):
    kind = "static=" if is_static else ""
    return f"{DIRECTIVE_PREFIX}rustc-link-lib={kind}{name}"


def link_search(directory):
    return f"{DIRECTIVE_PREFIX}rustc-link-search={directory}"


def default_emit(line):
    click.echo(line)


@dataclass(frozen=True)
class Lib:
    name: str
    is_static: bool

    def directives(self):
        yield link_lib(self.name, self.is_static)

    def apply(self, emit=default_emit):
        for line in self.directives():
            emit(line)


@dataclass(frozen=True)
class LibDir:
    path: str

    def directives(self):
        yield link_search(self.path)

    def apply(self, emit=default_emit):
        for line in self.directives():
            emit(line)


@dataclass
class DependsOn:
    """Libraries and search directories to hand to the linker, in request order."""

    libs: List[Lib] = field(default_factory=list)
    libdirs: List[LibDir] = field(default_factory=list)

    def extend(self, other):
        self.libs.extend(other.libs)
        self.libdirs.extend(other.libdirs)
        return self

    @classmethod
    def extend_all(cls, items):
        result = cls()
        for item in items:
            result.extend(item)
        return result

    def is_empty(self):
        return not self.libs and not self.libdirs

    def directives(self):
        for lib in self.libs:
            yield from lib.directives()
        for libdir in self.libdirs:
            yield from libdir.directives()

    def apply(self, emit=default_emit):
        for line in self.directives():
            emit(line)
