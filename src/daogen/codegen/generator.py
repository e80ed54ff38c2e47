"""
Base template generator and output layout.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import ClassVar

from daogen.core.emitter import Emitter
from daogen.core.naming import capitalize
from daogen.core.types import SchemaModel, TableDescriptor


@dataclass(frozen=True)
class PackageLayout:
    """
    Maps the configured base package onto generated names and directories.

    ``generator.basepackage`` doubles as package root (lower-cased) and as
    the prefix of the shared class names. For a dotted value only the last
    segment is used as the prefix: ``com.acme.Shop`` gives package root
    ``com.acme.shop`` and prefix ``Shop``.
    """

    base_package: str

    @property
    def package_root(self) -> str:
        return self.base_package.lower()

    @property
    def class_prefix(self) -> str:
        return capitalize(self.base_package.rsplit(".", 1)[-1])

    def package(self, *parts: str) -> str:
        """Fully qualified package for a sub-package, e.g. ``shop.dao.impl``."""
        return ".".join((self.package_root, *parts))

    def directory(self, *parts: str) -> PurePath:
        """Directory for a sub-package: the package with dots as path separators."""
        return PurePath(*self.package(*parts).split("."))


@dataclass(frozen=True)
class OutputFile:
    """One file a generator will write, with the tables rendered into it."""

    path: PurePath
    tables: tuple[TableDescriptor, ...]


@dataclass
class GeneratedFile:
    """A file written by a generation run."""

    path: Path
    artifact: str
    tables: list[str] = field(default_factory=list)


@dataclass
class GenerationResult:
    """Result of a generation run."""

    files: list[GeneratedFile] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def paths(self) -> list[Path]:
        return [f.path for f in self.files]


class TemplateGenerator(ABC):
    """
    Abstract base class for artifact generators.

    A generator decides which files it produces for a schema (``plan``) and
    renders the tables assigned to one file through an emitter
    (``generate``). Generators never mutate the descriptor model.
    """

    artifact: ClassVar[str]
    file_extension: ClassVar[str] = ""

    def __init__(self, layout: PackageLayout) -> None:
        self.layout = layout

    @abstractmethod
    def plan(self, schema: SchemaModel) -> list[OutputFile]:
        """Files to write for a schema, each with the tables rendered into it."""
        ...

    @abstractmethod
    def generate(self, emitter: Emitter, tables: Sequence[TableDescriptor]) -> None:
        """Write the artifact for the given tables through the emitter."""
        ...


class SharedFileGenerator(TemplateGenerator):
    """A generator writing one file that covers every table."""

    def plan(self, schema: SchemaModel) -> list[OutputFile]:
        return [OutputFile(path=self.shared_path(), tables=schema.tables)]

    @abstractmethod
    def shared_path(self) -> PurePath:
        """Path of the shared file, relative to the output directory."""
        ...


class TemplateFamily(ABC):
    """
    A bundle of the four artifact generators for one target framework.

    Only introspection results flow into a family; swapping the family
    changes the generated text without touching introspection, naming or
    emission.
    """

    name: ClassVar[str]

    def __init__(self, layout: PackageLayout) -> None:
        self.layout = layout

    @abstractmethod
    def generators(self) -> list[TemplateGenerator]:
        """Generators in the order they run."""
        ...
