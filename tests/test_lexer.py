"""Tests for tokenizing sources and extracting declared type names."""

from __future__ import annotations

import pytest

from classmap.constants.lexing import TOKEN_INLINE_HTML, TOKEN_OPEN_TAG, TOKEN_VARIABLE
from classmap.scanner import extract_declarations, normalize_type_name, tokenize


def _names(source: str) -> list[str]:
    return list(extract_declarations(source))


def test_namespace_qualifies_declared_class() -> None:
    assert _names("<?php namespace App; class Bar {}") == ["app\\bar"]


def test_all_class_like_keywords_are_extracted() -> None:
    source = """<?php
namespace App\\Models;

interface UserContract {}
trait HasName {}
abstract class Base {}
final class User extends Base implements UserContract { use HasName; }
enum Status: string { case Active = 'active'; }
"""

    assert _names(source) == [
        "app\\models\\usercontract",
        "app\\models\\hasname",
        "app\\models\\base",
        "app\\models\\user",
        "app\\models\\status",
    ]


def test_class_constant_reference_is_not_a_declaration() -> None:
    source = "<?php namespace App; $map = [Foo::class => Bar::class, static::class]; class Real {}"

    assert _names(source) == ["app\\real"]


def test_property_access_named_class_is_not_a_declaration() -> None:
    assert _names("<?php echo $node->class; echo $maybe?->class;") == []


def test_anonymous_classes_are_skipped() -> None:
    source = "<?php $a = new class {}; $b = new class($x) extends Base {};"

    assert _names(source) == []


def test_anonymous_class_with_parent_or_interface_is_skipped() -> None:
    source = """<?php
namespace App;

$a = new class extends Base {};
$b = new class implements Countable {};
return new class extends Migration {};
"""

    assert _names(source) == []


def test_aliased_import_of_keyword_named_type_is_not_a_declaration() -> None:
    source = "<?php namespace App; use MyCLabs\\Enum\\Enum as BaseEnum; class Status extends BaseEnum {}"

    assert _names(source) == ["app\\status"]


def test_fully_qualified_keyword_named_type_is_not_a_declaration() -> None:
    source = "<?php namespace App; $value = \\Enum::from('a'); $other = new Vendor\\Enum(); interface Real {}"

    assert _names(source) == ["app\\real"]


def test_comments_strings_and_heredocs_are_ignored() -> None:
    source = """<?php
// class LineComment {}
# interface HashComment {}
/* trait BlockComment {} */
$single = 'class Single {}';
$double = "class Double {} \\" class Escaped {}";
$heredoc = <<<EOT
class Heredoc {}
EOT;
$nowdoc = <<<'TXT'
    class Nowdoc {}
    TXT;
class Real {}
"""

    assert _names(source) == ["real"]


def test_global_code_has_no_namespace_prefix() -> None:
    assert _names("<?php class Global_Thing {}") == ["global_thing"]


def test_each_namespace_statement_resets_the_prefix() -> None:
    source = "<?php namespace A; class X {} namespace B\\C; class Y {} namespace { class Z {} }"

    assert _names(source) == ["a\\x", "b\\c\\y", "z"]


def test_relative_namespace_operator_keeps_current_namespace() -> None:
    source = "<?php namespace App; namespace\\helper(); class Kept {}"

    assert _names(source) == ["app\\kept"]


def test_keywords_match_case_insensitively() -> None:
    assert _names("<?php NAMESPACE Foo\\Bar; CLASS Baz {}") == ["foo\\bar\\baz"]


def test_inline_html_outside_php_tags_is_ignored() -> None:
    source = "<p>class NotCode {}</p><?php class InCode {} ?>\nclass AfterClose {}<?= 1 ?>"

    assert _names(source) == ["incode"]


def test_attribute_syntax_is_not_a_comment() -> None:
    assert _names("<?php #[Attribute]\nclass Marker {}") == ["marker"]


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("<?php namespace App; class Done {} /* class Lost", ["app\\done"]),
        ("<?php class", []),
        ("<?php namespace", []),
        ("<?php $s = 'class Open {}", []),
        ("", []),
        ("no php here", []),
    ],
)
def test_malformed_sources_yield_partial_results(source: str, expected: list[str]) -> None:
    assert _names(source) == expected


def test_tokenize_tracks_lines_and_modes() -> None:
    tokens = list(tokenize("<b>\n<?php\n$value\n"))

    assert tokens[0].kind == TOKEN_INLINE_HTML
    assert tokens[1].kind == TOKEN_OPEN_TAG
    variable = next(token for token in tokens if token.kind == TOKEN_VARIABLE)
    assert variable.text == "$value"
    assert variable.line == 3


def test_tokens_reassemble_the_source() -> None:
    source = "<?php namespace A\\B; /* c */ class D { const E = 'f'; } ?>tail"

    assert "".join(token.text for token in tokenize(source)) == source


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("App\\Models\\User", "app\\models\\user"),
        ("\\App\\Bar", "app\\bar"),
        ("  Foo  ", "foo"),
    ],
)
def test_normalize_type_name(raw: str, expected: str) -> None:
    assert normalize_type_name(raw) == expected
