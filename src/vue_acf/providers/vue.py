"""Vue single-file component provider.

Reads the ``<script>`` blocks of a ``.vue`` file and extracts the component
name and its props. Supported declarations:

- options API: ``props: {...}`` or ``props: [...]`` inside ``export default``
  (optionally wrapped in ``defineComponent(...)``)
- ``defineProps({...})`` / ``defineProps([...])`` in ``<script setup>``
- type-only ``defineProps<{...}>()`` or ``defineProps<Props>()`` where
  ``Props`` is an interface or type alias in the same file

Only as much JavaScript is understood as is needed to find those
declarations: strings, comments and bracket nesting. Everything else in the
script is skipped.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from pydantic import ValidationError

from vue_acf.exceptions import MetadataParseError
from vue_acf.providers.base import MetadataProvider
from vue_acf.schema.component import ComponentMetadata, PrimitiveType, Prop

logger = logging.getLogger(__name__)

# Type reported for props declared without one (array form, missing ``type``).
ANY_TYPE = "any"

_SCRIPT_RE = re.compile(r"<script\b[^>]*>(.*?)</script\s*>", re.DOTALL | re.IGNORECASE)
_EXPORT_DEFAULT_RE = re.compile(r"\bexport\s+default\s+(?:[\w$.]+\s*\(\s*)?\{")
_DEFINE_OPTIONS_RE = re.compile(r"\bdefineOptions\s*\(\s*\{")
_DEFINE_PROPS_RE = re.compile(r"\bdefineProps\s*(?:<|\(\s*[\[{])")
_TYPE_NAME_RE = re.compile(r"\s*([A-Za-z_$][\w$]*)\s*>")
_TYPE_DECL_TEMPLATE = r"\b(?:interface\s+{name}\b[^{{]*|type\s+{name}\s*=\s*)\{{"
_AS_CAST_RE = re.compile(r"\s+as\s+.*$", re.DOTALL)
_ARRAY_ANNOTATION_RE = re.compile(r"^(?:(?:Readonly)?Array\s*<.*>|.*\[\]|\[.*\])$", re.DOTALL)
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][\w$]*$")
_PROP_NAME_RE = re.compile(r"^[A-Za-z_$][\w$-]*$")
_NUMBER_LITERAL_RE = re.compile(r"^-?\d+(?:\.\d+)?$")

_QUOTES = "'\"`"
_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_OPENERS.values())
# Characters and keywords after which a `/` starts a regex literal rather than a division.
_REGEX_PRECEDERS = frozenset("=(,:[!&|?{};+-*%<>~^")
_REGEX_KEYWORDS = frozenset({"return", "typeof", "case", "in", "of", "void", "delete", "throw", "yield", "await"})
_TRAILING_WORD_RE = re.compile(r"[\w$]+$")
# A line starting or ending with one of these continues a TypeScript member annotation.
_CONTINUATION_STARTS = "|&?"
_CONTINUATION_ENDS = ":|&="


# ---------------------------------------------------------------------------
# Scanning helpers
# ---------------------------------------------------------------------------


def _skip_string(text: str, start: int) -> int:
    """Return the index just past the string literal opening at *start*."""
    quote = text[start]
    i = start + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        if ch == "\n" and quote != "`":
            break
        i += 1
    raise MetadataParseError("Unterminated string literal in component script.")


def _strip_comments(source: str) -> str:
    out: list[str] = []
    i = 0
    n = len(source)
    while i < n:
        ch = source[i]
        if ch in _QUOTES:
            end = _skip_string(source, i)
            out.append(source[i:end])
            i = end
        elif source.startswith("//", i):
            end = source.find("\n", i)
            i = n if end == -1 else end
        elif source.startswith("/*", i):
            end = source.find("*/", i + 2)
            if end == -1:
                raise MetadataParseError("Unterminated block comment in component script.")
            out.append(" ")
            i = end + 2
        elif ch == "/" and _regex_allowed(out) and (end := _skip_regex(source, i)) is not None:
            out.append("null")
            i = end
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def _regex_allowed(out: list[str]) -> bool:
    """Whether a `/` following the text in *out* opens a regex literal."""
    before = "".join(out).rstrip()
    if not before or before[-1] in _REGEX_PRECEDERS:
        return True
    word = _TRAILING_WORD_RE.search(before)
    return word is not None and word.group() in _REGEX_KEYWORDS


def _skip_regex(text: str, start: int) -> int | None:
    """Return the index just past the regex literal (and flags) opening at *start*.

    Returns ``None`` when no closing slash is found on the same line.
    """
    in_class = False
    i = start + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "\n":
            return None
        if ch == "[":
            in_class = True
        elif ch == "]":
            in_class = False
        elif ch == "/" and not in_class:
            i += 1
            while i < len(text) and (text[i].isalnum() or text[i] in "_$"):
                i += 1
            return i
        i += 1
    return None


def _find_closing(text: str, start: int) -> int:
    """Return the index of the bracket matching the one at *start*."""
    stack = [_OPENERS[text[start]]]
    i = start + 1
    while i < len(text):
        ch = text[i]
        if ch in _QUOTES:
            i = _skip_string(text, i)
            continue
        if ch in _OPENERS:
            stack.append(_OPENERS[ch])
        elif ch in _CLOSERS:
            if ch != stack.pop():
                raise MetadataParseError(f"Unbalanced '{ch}' in component script.")
            if not stack:
                return i
        i += 1
    raise MetadataParseError("Unbalanced brackets in component script.")


def _split_top_level(body: str, separators: str = ",", angle_brackets: bool = False) -> list[str]:
    """Split *body* on *separators* that are not nested in brackets or strings.

    With *angle_brackets*, ``<...>`` counts as nesting (TypeScript generics);
    the ``>`` of an arrow ``=>`` does not.
    """
    parts: list[str] = []
    depth = 0
    start = 0
    i = 0
    while i < len(body):
        ch = body[i]
        if ch in _QUOTES:
            i = _skip_string(body, i)
            continue
        if ch in _OPENERS or (angle_brackets and ch == "<"):
            depth += 1
        elif ch in _CLOSERS or (angle_brackets and ch == ">" and body[i - 1] != "="):
            depth -= 1
        elif ch in separators and depth == 0 and not (ch == "\n" and _continues_line(body, start, i)):
            parts.append(body[start:i])
            start = i + 1
        i += 1
    parts.append(body[start:])
    return [p.strip() for p in parts if p.strip()]


def _continues_line(body: str, start: int, newline: int) -> bool:
    """Whether the line break at *newline* sits inside one multi-line annotation."""
    previous = body[start:newline].rstrip()
    following = body[newline + 1 :].lstrip()
    if not previous:
        return False
    return (
        previous[-1] in _CONTINUATION_ENDS
        or (following[:1] != "" and following[0] in _CONTINUATION_STARTS)
    )


def _unquote(token: str) -> str:
    if len(token) >= 2 and token[0] in _QUOTES and token[-1] == token[0]:
        return token[1:-1]
    return token


def _split_key_value(entry: str) -> tuple[str, str] | None:
    """Split an object member on its first top-level colon.

    Returns ``None`` for members without one (shorthand properties, methods,
    spreads).
    """
    depth = 0
    i = 0
    while i < len(entry):
        ch = entry[i]
        if ch in _QUOTES:
            i = _skip_string(entry, i)
            continue
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
        elif ch == ":" and depth == 0:
            return _unquote(entry[:i].strip()), entry[i + 1 :].strip()
        i += 1
    return None


def _object_entries(text: str, start: int) -> dict[str, str]:
    """Return the ``key -> value source`` members of the object literal at *start*."""
    body = text[start + 1 : _find_closing(text, start)]
    entries: dict[str, str] = {}
    for member in _split_top_level(body):
        pair = _split_key_value(member)
        if pair is not None:
            entries[pair[0]] = pair[1]
    return entries


def _string_literal(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return None


# ---------------------------------------------------------------------------
# Runtime declarations: props: {...} / defineProps({...})
# ---------------------------------------------------------------------------


def _runtime_type(value: str) -> str:
    """Return the declared type name of a runtime prop definition."""
    value = value.strip()
    if value.startswith("{"):
        declared = _object_entries(value, 0).get("type")
        return _runtime_type(declared) if declared is not None else ANY_TYPE
    if value.startswith("["):
        members = _split_top_level(value[1 : _find_closing(value, 0)])
        return "|".join(_runtime_type(m) for m in members) or ANY_TYPE
    value = _AS_CAST_RE.sub("", value)
    if _IDENTIFIER_RE.match(value) and value != "null":
        return value
    return ANY_TYPE


def _props_from_runtime(literal: str) -> list[Prop]:
    literal = literal.strip()
    if literal.startswith("["):
        names = _split_top_level(literal[1 : _find_closing(literal, 0)])
        return [Prop(name=_unquote(name), type=ANY_TYPE) for name in names]
    if literal.startswith("{"):
        return [Prop(name=name, type=_runtime_type(value)) for name, value in _object_entries(literal, 0).items()]
    raise MetadataParseError(f"Unsupported props declaration: {literal[:40]!r}")


# ---------------------------------------------------------------------------
# Type-only declarations: defineProps<{...}>()
# ---------------------------------------------------------------------------


def _annotation_type(annotation: str) -> str:
    """Reduce a TypeScript annotation to a primitive type name where possible."""
    members = [
        m for m in _split_top_level(annotation, separators="|", angle_brackets=True) if m not in ("undefined", "null")
    ]
    if not members:
        return ANY_TYPE
    if len(members) == 1:
        member = members[0]
        if _ARRAY_ANNOTATION_RE.match(member):
            return PrimitiveType.ARRAY.value
        return member
    if all(m[0] in _QUOTES for m in members):
        return PrimitiveType.STRING.value
    if all(_NUMBER_LITERAL_RE.match(m) for m in members):
        return PrimitiveType.NUMBER.value
    if set(members) <= {"true", "false", "boolean"}:
        return PrimitiveType.BOOLEAN.value
    return "|".join(members)


def _props_from_type_literal(text: str, start: int) -> list[Prop]:
    body = text[start + 1 : _find_closing(text, start)]
    props: list[Prop] = []
    for member in _split_top_level(body, separators=",;\n", angle_brackets=True):
        pair = _split_key_value(member)
        if pair is None:
            continue
        key, annotation = pair
        key = _unquote(key.removeprefix("readonly ").strip().rstrip("?"))
        if not _PROP_NAME_RE.match(key):
            continue
        props.append(Prop(name=key, type=_annotation_type(annotation)))
    return props


def _props_from_type_reference(script: str, type_name: str) -> list[Prop]:
    decl = re.search(_TYPE_DECL_TEMPLATE.format(name=re.escape(type_name)), script)
    if decl is None:
        raise MetadataParseError(f"Cannot resolve props type '{type_name}' in component script.")
    return _props_from_type_literal(script, decl.end() - 1)


def _props_from_define_props(script: str) -> list[Prop]:
    match = _DEFINE_PROPS_RE.search(script)
    if match is None:
        return []
    if not match.group().endswith("<"):
        return _props_from_runtime(script[match.end() - 1 :])

    rest = match.end()
    literal_start = script.find("{", rest)
    if literal_start != -1 and not script[rest:literal_start].strip():
        return _props_from_type_literal(script, literal_start)
    reference = _TYPE_NAME_RE.match(script, rest)
    if reference is None:
        raise MetadataParseError("Unsupported defineProps type argument.")
    return _props_from_type_reference(script, reference.group(1))


# ---------------------------------------------------------------------------
# Component
# ---------------------------------------------------------------------------


def _component_options(script: str) -> dict[str, str]:
    """Merge the members of ``export default {...}`` and ``defineOptions({...})``."""
    options: dict[str, str] = {}
    for pattern in (_EXPORT_DEFAULT_RE, _DEFINE_OPTIONS_RE):
        match = pattern.search(script)
        if match is not None:
            options.update(_object_entries(script, match.end() - 1))
    return options


def parse_component(source: str, fallback_name: str) -> ComponentMetadata:
    """Extract component metadata from the text of a ``.vue`` file.

    Args:
        source: Full SFC source.
        fallback_name: Name to use when the component declares none (the file stem).

    Raises:
        MetadataParseError: If the file has no script block or its declarations cannot be read.
    """
    blocks = _SCRIPT_RE.findall(source)
    if not blocks:
        raise MetadataParseError("No <script> block found in component.")
    script = _strip_comments("\n".join(blocks))

    options = _component_options(script)
    name = _string_literal(options.get("name")) or fallback_name
    if "props" in options:
        props = _props_from_runtime(options["props"])
    else:
        props = _props_from_define_props(script)
    return ComponentMetadata(name=name, props=props)


class VueSFCProvider(MetadataProvider):
    """Reads component metadata from Vue single-file components."""

    async def read(self, path: Path) -> ComponentMetadata:
        source = await self.read_source(path)
        try:
            metadata = parse_component(source, fallback_name=path.stem)
        except MetadataParseError as exc:
            raise MetadataParseError(f"Error parsing {path}: {exc.detail}", path=path, cause=exc) from exc
        except ValidationError as exc:
            raise MetadataParseError(
                f"Error parsing {path}: invalid component metadata ({exc.error_count()} error(s))",
                path=path,
                cause=exc,
            ) from exc

        logger.info("Read component %s with %d prop(s) from %s", metadata.name, len(metadata.props), path)
        return metadata
