"""Data models for documentation extraction."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class DocComment:
    """One located doc comment and the declaration it annotates."""

    body: str  # Interior text between /** and */
    name: str  # Declaration name, "" for anonymous wrappers
    start: int
    end: int


@dataclass
class Param:
    name: str  # Optionality brackets already stripped
    type: str
    description: str = ""
    optional: bool = False  # Written as [name]


@dataclass
class Returns:
    type: str
    description: str = ""


@dataclass
class DeclarationDoc:
    """Tags extracted from one doc comment."""

    name: str
    description: str = ""  # Untagged lines, or the @desc tag
    params: list[Param] = field(default_factory=list)
    returns: Returns | None = None
    is_private: bool = False
    is_public: bool = False
    example: str | None = None


@dataclass
class ClassDoc:
    """A class-based source file: the class comment plus its methods."""

    doc: DeclarationDoc
    module: str
    base: str | None = None  # From Object.create(Base.prototype)
    methods: list[DeclarationDoc] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.doc.name


@dataclass
class ModuleDoc:
    """A flat source file: one entry per anonymous action wrapper."""

    module: str
    name: str  # File base name, used as the action name
    actions: list[DeclarationDoc] = field(default_factory=list)


@dataclass
class ValidationResult:
    """Results from documentation validation."""

    errors: list[str] = field(default_factory=list)  # Build fails if non-empty
    warnings: list[str] = field(default_factory=list)  # Printed but allowed


@dataclass
class GenerationResult:
    """Everything produced by one documentation run."""

    written: list[Path] = field(default_factory=list)
    class_docs: list[ClassDoc] = field(default_factory=list)
    module_docs: list[ModuleDoc] = field(default_factory=list)
    toc: Path | None = None
