"""Lightweight tokenizer and declaration extractor for PHP-style sources.

The scanner never builds a syntax tree. It tokenizes just enough of the
language to tell identifiers, namespace separators and member access apart
from strings and comments, then walks the token stream looking for
``namespace`` and class-like declaration keywords.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import NamedTuple

from classmap.constants.lexing import (
    ANONYMOUS_CLASS_PREFIX,
    BLOCK_COMMENT_PATTERN,
    CLOSE_TAG_PATTERN,
    DECLARATION_KEYWORDS,
    HEREDOC_START_PATTERN,
    IDENTIFIER_PATTERN,
    LINE_COMMENT_PATTERN,
    MEMBER_ACCESS_TOKENS,
    NAMESPACE_KEYWORD,
    NAMESPACE_SEPARATOR,
    NON_NAME_KEYWORDS,
    NUMBER_PATTERN,
    OBJECT_OPERATOR_PATTERN,
    OPEN_TAG_PATTERN,
    QUALIFIED_NAME_TOKENS,
    QUOTE_CHARACTERS,
    TOKEN_CLOSE_TAG,
    TOKEN_COMMENT,
    TOKEN_DOUBLE_COLON,
    TOKEN_HEREDOC,
    TOKEN_IDENTIFIER,
    TOKEN_INLINE_HTML,
    TOKEN_NS_SEPARATOR,
    TOKEN_NUMBER,
    TOKEN_OBJECT_OPERATOR,
    TOKEN_OPEN_TAG,
    TOKEN_PUNCTUATION,
    TOKEN_STRING,
    TOKEN_VARIABLE,
    TOKEN_WHITESPACE,
    TRIVIA_TOKENS,
    VARIABLE_PATTERN,
    WHITESPACE_PATTERN,
)


class Token(NamedTuple):
    """A single lexical token with its 1-based starting line."""

    kind: str
    text: str
    line: int


def normalize_type_name(name: str) -> str:
    """Return the canonical lookup key for a (possibly qualified) type name."""
    return name.strip().lstrip(NAMESPACE_SEPARATOR).lower()


def tokenize(source: str) -> Iterator[Token]:
    """Yield tokens for *source*; unterminated constructs run to end of text."""
    position = 0
    line = 1
    length = len(source)
    in_code = False

    while position < length:
        if not in_code:
            match = OPEN_TAG_PATTERN.search(source, position)
            end = match.start() if match else length
            if end > position:
                text = source[position:end]
                yield Token(TOKEN_INLINE_HTML, text, line)
                line += text.count("\n")
            if match is None:
                return
            yield Token(TOKEN_OPEN_TAG, match.group(), line)
            position = match.end()
            in_code = True
            continue

        kind, end = _scan_code_token(source, position)
        text = source[position:end]
        yield Token(kind, text, line)
        line += text.count("\n")
        position = end
        if kind == TOKEN_CLOSE_TAG:
            in_code = False


def _scan_code_token(source: str, position: int) -> tuple[str, int]:
    """Return the kind and end offset of the code token starting at *position*."""
    char = source[position]
    two = source[position : position + 2]

    if char.isspace():
        match = WHITESPACE_PATTERN.match(source, position)
        assert match is not None
        return TOKEN_WHITESPACE, match.end()
    if two == "?>":
        match = CLOSE_TAG_PATTERN.match(source, position)
        assert match is not None
        return TOKEN_CLOSE_TAG, match.end()
    if two == "/*":
        match = BLOCK_COMMENT_PATTERN.match(source, position)
        assert match is not None
        return TOKEN_COMMENT, match.end()
    match = LINE_COMMENT_PATTERN.match(source, position)
    if match is not None:
        return TOKEN_COMMENT, match.end()
    if char in QUOTE_CHARACTERS:
        return TOKEN_STRING, _quoted_string_end(source, position)
    if char == "<":
        match = HEREDOC_START_PATTERN.match(source, position)
        if match is not None:
            return TOKEN_HEREDOC, _heredoc_end(source, match)
    if char == "$":
        match = VARIABLE_PATTERN.match(source, position)
        if match is not None:
            return TOKEN_VARIABLE, match.end()
    if char == NAMESPACE_SEPARATOR:
        return TOKEN_NS_SEPARATOR, position + 1
    if two == "::":
        return TOKEN_DOUBLE_COLON, position + 2
    match = OBJECT_OPERATOR_PATTERN.match(source, position)
    if match is not None:
        return TOKEN_OBJECT_OPERATOR, match.end()
    match = IDENTIFIER_PATTERN.match(source, position)
    if match is not None:
        return TOKEN_IDENTIFIER, match.end()
    if char.isdigit():
        match = NUMBER_PATTERN.match(source, position)
        assert match is not None
        return TOKEN_NUMBER, match.end()
    return TOKEN_PUNCTUATION, position + 1


def _quoted_string_end(source: str, position: int) -> int:
    quote = source[position]
    index = position + 1
    length = len(source)
    while index < length:
        char = source[index]
        if char == "\\":
            index += 2
            continue
        if char == quote:
            return index + 1
        index += 1
    return length


def _heredoc_end(source: str, start: re.Match[str]) -> int:
    label = start.group(2)
    closing = re.compile(rf"^[ \t]*{re.escape(label)}\b", re.MULTILINE)
    match = closing.search(source, start.end())
    return match.end() if match else len(source)


def extract_declarations(source: str) -> Iterator[str]:
    """Yield normalized names of classes, interfaces, traits and enums declared in *source*.

    Names are qualified with the active namespace. A keyword reached through
    member access (``Foo::class``, ``$node->class``) or that is part of a
    qualified name (``Enum\\Enum``) is a reference and is skipped, as are
    anonymous classes.
    """
    tokens = [token for token in tokenize(source) if token.kind not in TRIVIA_TOKENS]
    namespace: str | None = None
    count = len(tokens)
    index = 0

    while index < count:
        token = tokens[index]
        if token.kind != TOKEN_IDENTIFIER:
            index += 1
            continue

        keyword = token.text.lower()
        previous_kind = tokens[index - 1].kind if index > 0 else None

        if keyword == NAMESPACE_KEYWORD and previous_kind not in MEMBER_ACCESS_TOKENS:
            following = tokens[index + 1] if index + 1 < count else None
            if following is not None and following.kind == TOKEN_NS_SEPARATOR:
                # namespace\Foo is a relative name, not a declaration
                index += 2
                continue
            namespace, index = _read_qualified_name(tokens, index + 1)
            continue

        if keyword in DECLARATION_KEYWORDS and not _is_reference(tokens, index):
            following = tokens[index + 1] if index + 1 < count else None
            if (
                following is not None
                and following.kind == TOKEN_IDENTIFIER
                and following.text.lower() not in NON_NAME_KEYWORDS
            ):
                if namespace:
                    yield normalize_type_name(namespace + NAMESPACE_SEPARATOR + following.text)
                else:
                    yield normalize_type_name(following.text)
                index += 2
                continue

        index += 1


def _is_reference(tokens: list[Token], index: int) -> bool:
    """Return True when the keyword at *index* is a name, member or anonymous class, not a declaration."""
    if index == 0:
        return False
    previous = tokens[index - 1]
    if previous.kind in QUALIFIED_NAME_TOKENS:
        return True
    return previous.kind == TOKEN_IDENTIFIER and previous.text.lower() == ANONYMOUS_CLASS_PREFIX


def _read_qualified_name(tokens: list[Token], index: int) -> tuple[str | None, int]:
    """Accumulate identifier and separator tokens starting at *index*."""
    parts: list[str] = []
    while index < len(tokens) and tokens[index].kind in (TOKEN_IDENTIFIER, TOKEN_NS_SEPARATOR):
        parts.append(tokens[index].text)
        index += 1
    return ("".join(parts) or None), index
