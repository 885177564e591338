"""Doc-comment extraction for orchestrator action sources.

Two authoring styles are recognized:

- class-based files carry the ``@class`` marker and declare a named
  ``function Name(...)`` whose methods hang off ``Name.prototype`` or are
  assigned inline (``this.x = function`` / ``var x = function``);
- flat files hold one or more anonymous ``(function (...) {...})`` wrappers,
  each one an action named after the file.

Declarations are located by pattern, then each comment body is run through
a small line-oriented tag parser.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from .models import ClassDoc, DeclarationDoc, DocComment, ModuleDoc, Param, Returns

log = logging.getLogger(__name__)

CLASS_MARKER = "@class"
UNKNOWN_MODULE = "unknown"

COMMENT_OPEN = "/**"
COMMENT_CLOSE = "*/"

# Declaration shapes, anchored right after a comment's closing marker.
# Group 1, when present, is the declaration name.
CLASS_RE = re.compile(r"\s*function\s+([\w$]+)")
PROTOTYPE_METHOD_RE = re.compile(r"\s*[\w$]+(?:\.[\w$]+)*?\.prototype\.([\w$]+)")
INLINE_METHOD_RE = re.compile(r"\s*(?:this\.|var\s+)([\w$]+)\s*=\s*function\b")
ANON_WRAPPER_RE = re.compile(r"\s*\(\s*function\s*\([^)]*\)")
INHERITANCE_RE = re.compile(
    r"[\w$]+\.prototype\s*=\s*Object\.create\(\s*([\w$]+)\.prototype\s*\)"
)

_DECORATION_RE = re.compile(r"^\s*\*\s?")
_TAG_RE = re.compile(r"^@([\w-]*)\s*(.*)$")
_PARAM_RE = re.compile(r"^\{([^}]+)\}\s+(\[?[\w$.]+\]?)(?:\s*-\s*(.*))?")
_RETURNS_RE = re.compile(r"^\{([^}]+)\}\s*(?:-\s*)?(.*)$")

# Tags that end an @example even when indented
KNOWN_TAGS = frozenset(
    {"param", "returns", "return", "example", "private", "public", "desc", "description"}
)


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


# --- Tag extraction -------------------------------------------------------


def _parse_param(rest: str) -> Param | None:
    match = _PARAM_RE.match(rest)
    if not match:
        return None
    type_, raw_name, desc = match.groups()
    return Param(
        name=re.sub(r"^\[|\]$", "", raw_name),
        type=type_.strip(),
        description=(desc or "").strip(),
        optional=raw_name.startswith("["),
    )


def _parse_returns(rest: str) -> Returns | None:
    match = _RETURNS_RE.match(rest)
    if not match:
        return None
    return Returns(type=match.group(1).strip(), description=match.group(2).strip())


def _join_example(lines: list[str]) -> str | None:
    """Join example lines, dropping blank lines at either end only."""
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return "\n".join(lines[start:end]) or None


def parse_doc_comment(body: str, name: str) -> DeclarationDoc:
    """Parse the interior of one doc comment into a DeclarationDoc.

    Untagged lines before the first tag form the description. ``@param``,
    ``@returns``/``@return``, ``@example``, ``@private``, ``@public`` and
    ``@desc``/``@description`` are recognized; any other tag only ends the
    description. Malformed ``@param``/``@returns`` lines are dropped.

    Never raises: whatever the input, a record comes back.
    """
    doc = DeclarationDoc(name=name)
    capturing_description = True
    example: list[str] | None = None

    for raw in normalize_newlines(body).split("\n"):
        line = _DECORATION_RE.sub("", raw, count=1)
        clean = line.strip()
        tag = _TAG_RE.match(clean)

        if example is not None:
            # Indented "@" text that is not a known tag stays example code
            ends_example = line.startswith("@") or (
                tag is not None and tag.group(1) in KNOWN_TAGS
            )
            if not ends_example:
                example.append(line)
                continue
            doc.example = _join_example(example)
            example = None

        if tag is None:
            if capturing_description and clean:
                doc.description += clean + " "
            continue

        capturing_description = False
        tag_name, rest = tag.group(1), tag.group(2).strip()

        if tag_name == "param":
            param = _parse_param(rest)
            if param is None:
                log.debug(f"Dropping malformed @param in {name!r}: {clean}")
            else:
                doc.params.append(param)
        elif tag_name in ("returns", "return"):
            returns = _parse_returns(rest)
            if returns is None:
                log.debug(f"Dropping malformed @{tag_name} in {name!r}: {clean}")
            else:
                doc.returns = returns
        elif tag_name == "example":
            example = [rest]
        elif tag_name == "private":
            doc.is_private = True
        elif tag_name == "public":
            doc.is_public = True
        elif tag_name in ("desc", "description"):
            if rest:
                doc.description = rest

    if example is not None:
        doc.example = _join_example(example)

    return doc


# --- Declaration location -------------------------------------------------


def iter_doc_comments(
    shape: re.Pattern[str], text: str, default_name: str = ""
) -> Iterator[DocComment]:
    """Yield every doc comment directly followed by ``shape``, in source order.

    A comment runs from ``/**`` to the nearest ``*/``, so adjacent comments
    never merge. ``shape`` is matched at the closing marker only, and the
    cursor resumes after each yielded declaration, so every block is scanned
    once. Group 1 of ``shape``, when present, is the declaration name.
    """
    pos = 0
    while True:
        start = text.find(COMMENT_OPEN, pos)
        if start == -1:
            return
        close = text.find(COMMENT_CLOSE, start + len(COMMENT_OPEN))
        if close == -1:
            # No later opener can be closed either
            return

        match = shape.match(text, close + len(COMMENT_CLOSE))
        if match is None:
            # The "/" of "*/" may start the next opener
            pos = close + 1
            continue

        name = match.group(1) if shape.groups else default_name
        yield DocComment(
            body=text[start + len(COMMENT_OPEN) : close],
            name=name,
            start=start,
            end=match.end(),
        )
        pos = match.end()


def is_class_based(text: str) -> bool:
    """Whether a source file declares a tagged class."""
    text = normalize_newlines(text)
    if CLASS_MARKER not in text:
        return False
    return next(iter_doc_comments(CLASS_RE, text), None) is not None


def locate_class(text: str) -> DocComment | None:
    """The class comment: first documented named function, if marked."""
    if CLASS_MARKER not in text:
        return None
    return next(iter_doc_comments(CLASS_RE, text), None)


def locate_methods(text: str) -> Iterator[DocComment]:
    """Prototype methods first, then inline methods; not interleaved."""
    yield from iter_doc_comments(PROTOTYPE_METHOD_RE, text)
    yield from iter_doc_comments(INLINE_METHOD_RE, text)


def locate_actions(text: str, name: str) -> Iterator[DocComment]:
    return iter_doc_comments(ANON_WRAPPER_RE, text, default_name=name)


def find_base_class(text: str) -> str | None:
    match = INHERITANCE_RE.search(text)
    return match.group(1) if match else None


# --- File-level extraction ------------------------------------------------


def extract_class(text: str, module: str = UNKNOWN_MODULE) -> ClassDoc | None:
    """Extract the class and its methods, or None if the file has no class."""
    text = normalize_newlines(text)
    comment = locate_class(text)
    if comment is None:
        return None

    return ClassDoc(
        doc=parse_doc_comment(comment.body, comment.name),
        module=module,
        base=find_base_class(text),
        methods=[parse_doc_comment(c.body, c.name) for c in locate_methods(text)],
    )


def extract_actions(text: str, name: str, module: str = UNKNOWN_MODULE) -> ModuleDoc:
    """Extract every anonymous action of a flat file, all labeled ``name``."""
    text = normalize_newlines(text)
    return ModuleDoc(
        module=module,
        name=name,
        actions=[parse_doc_comment(c.body, c.name) for c in locate_actions(text, name)],
    )
