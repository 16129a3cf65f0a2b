"""Token kinds, keywords and patterns for the declaration scanner."""

from __future__ import annotations

import re

NAMESPACE_SEPARATOR: str = "\\"

TOKEN_INLINE_HTML: str = "inline_html"
TOKEN_OPEN_TAG: str = "open_tag"
TOKEN_CLOSE_TAG: str = "close_tag"
TOKEN_WHITESPACE: str = "whitespace"
TOKEN_COMMENT: str = "comment"
TOKEN_STRING: str = "string"
TOKEN_HEREDOC: str = "heredoc"
TOKEN_VARIABLE: str = "variable"
TOKEN_IDENTIFIER: str = "identifier"
TOKEN_NS_SEPARATOR: str = "ns_separator"
TOKEN_DOUBLE_COLON: str = "double_colon"
TOKEN_OBJECT_OPERATOR: str = "object_operator"
TOKEN_NUMBER: str = "number"
TOKEN_PUNCTUATION: str = "punctuation"

TRIVIA_TOKENS: frozenset[str] = frozenset({TOKEN_WHITESPACE, TOKEN_COMMENT})

NAMESPACE_KEYWORD: str = "namespace"
DECLARATION_KEYWORDS: frozenset[str] = frozenset({"class", "interface", "trait", "enum"})

# Member access that turns a following keyword into a reference, not a declaration.
MEMBER_ACCESS_TOKENS: frozenset[str] = frozenset({TOKEN_DOUBLE_COLON, TOKEN_OBJECT_OPERATOR})

# Tokens after which a declaration keyword is part of a qualified name.
QUALIFIED_NAME_TOKENS: frozenset[str] = MEMBER_ACCESS_TOKENS | {TOKEN_NS_SEPARATOR}

ANONYMOUS_CLASS_PREFIX: str = "new"

# Keywords that can follow a declaration keyword but never name a type.
NON_NAME_KEYWORDS: frozenset[str] = frozenset({"as", "extends", "implements"})

OPEN_TAG_PATTERN: re.Pattern[str] = re.compile(r"<\?(?:php(?=\s|\Z)|=|(?=\s))", re.IGNORECASE)
CLOSE_TAG_PATTERN: re.Pattern[str] = re.compile(r"\?>\n?")
WHITESPACE_PATTERN: re.Pattern[str] = re.compile(r"\s+")
LINE_COMMENT_PATTERN: re.Pattern[str] = re.compile(r"(?://|#(?!\[))[^\n]*?(?=\?>|\n|\Z)")
BLOCK_COMMENT_PATTERN: re.Pattern[str] = re.compile(r"/\*.*?(?:\*/|\Z)", re.DOTALL)
HEREDOC_START_PATTERN: re.Pattern[str] = re.compile(r"<<<[ \t]*(['\"]?)([A-Za-z_][A-Za-z0-9_]*)\1\r?\n")
VARIABLE_PATTERN: re.Pattern[str] = re.compile(r"\$+[^\W\d]\w*")
IDENTIFIER_PATTERN: re.Pattern[str] = re.compile(r"[^\W\d]\w*")
NUMBER_PATTERN: re.Pattern[str] = re.compile(r"\d[\w.]*")
OBJECT_OPERATOR_PATTERN: re.Pattern[str] = re.compile(r"\??->")

QUOTE_CHARACTERS: frozenset[str] = frozenset({"'", '"', "`"})
