"""Markdown generators for extracted documentation."""

from __future__ import annotations

from .config import Config
from .extractors import (
    UNKNOWN_MODULE,
    extract_actions,
    extract_class,
    is_class_based,
    normalize_newlines,
)
from .models import ClassDoc, DeclarationDoc, ModuleDoc, Param


def _escape_cell(text: str) -> str:
    """Escape pipes so text stays inside one table cell."""
    return text.replace("|", "\\|")


def _params_table(params: list[Param]) -> list[str]:
    lines = [
        "**Parameters:**",
        "",
        "| Name | Type | Description |",
        "|------|------|-------------|",
    ]
    for p in params:
        lines.append(
            f"| {_escape_cell(p.name)} | `{_escape_cell(p.type)}` "
            f"| {_escape_cell(p.description)} |"
        )
    lines.append("")
    return lines


def generate_declaration_markdown(
    doc: DeclarationDoc, language: str = Config.CODE_LANGUAGE
) -> str:
    """Render one function or method block, ending in a horizontal rule."""
    marker = ""
    if doc.is_private:
        marker = "*private* "
    elif doc.is_public:
        marker = "*public* "

    lines = [f"### {marker}`{doc.name}()`", ""]

    description = doc.description.strip()
    if description:
        lines.extend([description, ""])

    if doc.params:
        lines.extend(_params_table(doc.params))

    if doc.example:
        lines.extend(["**Example:**", "", f"```{language}", doc.example, "```", ""])

    if doc.returns:
        returns = f"**Returns:** `{doc.returns.type}`"
        if doc.returns.description:
            returns += f" — {doc.returns.description}"
        lines.extend([returns, ""])

    lines.extend(["---", ""])
    return "\n".join(lines)


def generate_class_markdown(cls: ClassDoc, language: str = Config.CODE_LANGUAGE) -> str:
    """Generate the page for a class-based file.

    Methods keep the order they were located in: every prototype method,
    then every inline method.
    """
    lines = [
        f"# Class `{cls.name}`",
        "",
        f"Module: `{cls.module}`",
        "",
    ]

    if cls.base:
        lines.extend([f"Extends `{cls.base}`", ""])

    description = cls.doc.description.strip()
    if description:
        lines.extend([description, ""])

    if cls.doc.params:
        lines.extend(_params_table(cls.doc.params))

    lines.extend(["## Methods", ""])

    for method in cls.methods:
        lines.append(generate_declaration_markdown(method, language))

    return "\n".join(lines).strip()


def generate_actions_markdown(
    module_doc: ModuleDoc, language: str = Config.CODE_LANGUAGE
) -> str:
    """Generate the action blocks of one flat file, without a header."""
    blocks = [generate_declaration_markdown(a, language) for a in module_doc.actions]
    return "\n".join(blocks).strip()


def generate_module_markdown(
    module_docs: list[ModuleDoc], language: str = Config.CODE_LANGUAGE
) -> str:
    """Merge the flat files of one directory into a single page.

    Only the first file contributes the module heading and the
    ``## Actions`` heading.
    """
    chunks = []
    for index, module_doc in enumerate(module_docs):
        chunk = generate_actions_markdown(module_doc, language)
        if index == 0:
            chunk = f"# Module: `{module_doc.module}`\n\n## Actions\n\n{chunk}".strip()
        if chunk:
            chunks.append(chunk)
    return "\n\n".join(chunks).strip()


def generate_toc_markdown(toc_lines: list[str]) -> str:
    return "# 📚 Table of Contents\n\n" + "\n".join(toc_lines) + "\n"


def render(
    text: str,
    name: str | None = None,
    module: str = UNKNOWN_MODULE,
    language: str = Config.CODE_LANGUAGE,
) -> str:
    """Render one source file to Markdown.

    Class-based text becomes a class page. Anything else is treated as a
    flat file and rendered as its action blocks, each labeled ``name``.
    """
    text = normalize_newlines(text)
    if is_class_based(text):
        return generate_class_markdown(extract_class(text, module), language)
    module_doc = extract_actions(text, name or "anonymous", module)
    return generate_actions_markdown(module_doc, language)
