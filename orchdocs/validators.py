"""Documentation validation and quality checks."""

from __future__ import annotations

from typing import Iterator

from .models import ClassDoc, DeclarationDoc, ModuleDoc, ValidationResult


def _class_declarations(
    class_docs: list[ClassDoc],
) -> Iterator[tuple[str, DeclarationDoc]]:
    for cls in class_docs:
        yield cls.name, cls.doc
        for method in cls.methods:
            yield f"{cls.name}.{method.name}", method


def _action_declarations(
    module_docs: list[ModuleDoc],
) -> Iterator[tuple[str, DeclarationDoc]]:
    for module_doc in module_docs:
        for action in module_doc.actions:
            yield f"{module_doc.module}/{module_doc.name}", action


def validate_docs(
    class_docs: list[ClassDoc],
    module_docs: list[ModuleDoc],
    strict: bool = False,
) -> ValidationResult:
    """Validate extracted documentation.

    Checks:
    1. Declarations should have a description (warning in normal mode, error in strict)
    2. Documented parameters should have a description (warning)

    Args:
        class_docs: Records extracted from class-based files
        module_docs: Records extracted from flat files
        strict: If True, missing descriptions are errors instead of warnings

    Returns:
        ValidationResult with errors and warnings
    """
    result = ValidationResult()

    declarations = list(_class_declarations(class_docs))
    declarations.extend(_action_declarations(module_docs))

    for label, doc in declarations:
        if not doc.description.strip():
            msg = f"{label}: missing description (undocumented)"
            if strict:
                result.errors.append(msg)
            else:
                result.warnings.append(msg)
            continue

        for param in doc.params:
            if not param.description:
                result.warnings.append(
                    f"{label}: parameter '{param.name}' has no description"
                )

    return result


def compute_coverage(
    class_docs: list[ClassDoc],
    module_docs: list[ModuleDoc],
) -> dict[str, float]:
    """Compute documentation coverage by authoring style.

    Returns:
        Dict with 'class' and 'action' coverage (0.0 - 1.0)
    """
    class_decls = [doc for _, doc in _class_declarations(class_docs)]
    action_decls = [doc for _, doc in _action_declarations(module_docs)]

    class_documented = sum(1 for d in class_decls if d.description.strip())
    action_documented = sum(1 for d in action_decls if d.description.strip())

    return {
        "class": class_documented / len(class_decls) if class_decls else 1.0,
        "action": action_documented / len(action_decls) if action_decls else 1.0,
    }
