"""GraphQL lexing and parsing rules for the online parser.

Parse rules are either a list of steps or a forking function that picks the
next rule from the upcoming token. A step is one of:

- a ``RuleKind`` naming a nested rule,
- a ``Terminal`` matching a single token,
- a ``RuleStep`` wrapping either of those as optional or repeated.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple, Union

if TYPE_CHECKING:
    from .character_stream import CharacterStream
    from .online_parser import ParserState


class RuleKind(Enum):
    """Syntactic constructs tracked by the parser state."""

    DOCUMENT = "Document"
    DEFINITION = "Definition"
    SHORT_QUERY = "ShortQuery"
    QUERY = "Query"
    MUTATION = "Mutation"
    SUBSCRIPTION = "Subscription"
    VARIABLE_DEFINITIONS = "VariableDefinitions"
    VARIABLE_DEFINITION = "VariableDefinition"
    VARIABLE = "Variable"
    DEFAULT_VALUE = "DefaultValue"
    SELECTION_SET = "SelectionSet"
    SELECTION = "Selection"
    ALIASED_FIELD = "AliasedField"
    FIELD = "Field"
    ARGUMENTS = "Arguments"
    ARGUMENT = "Argument"
    FRAGMENT_SPREAD = "FragmentSpread"
    INLINE_FRAGMENT = "InlineFragment"
    FRAGMENT_DEFINITION = "FragmentDefinition"
    TYPE_CONDITION = "TypeCondition"
    VALUE = "Value"
    NUMBER_VALUE = "NumberValue"
    STRING_VALUE = "StringValue"
    BOOLEAN_VALUE = "BooleanValue"
    NULL_VALUE = "NullValue"
    ENUM_VALUE = "EnumValue"
    LIST_VALUE = "ListValue"
    OBJECT_VALUE = "ObjectValue"
    OBJECT_FIELD = "ObjectField"
    TYPE = "Type"
    LIST_TYPE = "ListType"
    NON_NULL_TYPE = "NonNullType"
    NAMED_TYPE = "NamedType"
    DIRECTIVE = "Directive"
    # Schema definition language
    SCHEMA_DEF = "SchemaDef"
    OPERATION_TYPE_DEF = "OperationTypeDef"
    SCALAR_DEF = "ScalarDef"
    OBJECT_TYPE_DEF = "ObjectTypeDef"
    IMPLEMENTS = "Implements"
    FIELD_DEF = "FieldDef"
    ARGUMENTS_DEF = "ArgumentsDef"
    INPUT_VALUE_DEF = "InputValueDef"
    INTERFACE_DEF = "InterfaceDef"
    UNION_DEF = "UnionDef"
    UNION_MEMBER = "UnionMember"
    ENUM_DEF = "EnumDef"
    ENUM_VALUE_DEF = "EnumValueDef"
    INPUT_DEF = "InputDef"
    EXTEND_DEF = "ExtendDef"
    DIRECTIVE_DEF = "DirectiveDef"
    DIRECTIVE_LOCATION = "DirectiveLocation"
    # Special rules pushed by the parser itself
    INVALID = "Invalid"
    COMMENT = "Comment"


class TokenKind(Enum):
    NAME = "Name"
    PUNCTUATION = "Punctuation"
    NUMBER = "Number"
    STRING = "String"
    COMMENT = "Comment"


class Token(NamedTuple):
    """A lexed token."""

    kind: TokenKind
    value: str


@dataclass
class Terminal:
    """Matches a single token and tags it with a style."""

    style: str
    match: Callable[[Token], bool]
    update: Callable[[ParserState, Token], None] | None = None


@dataclass
class RuleStep:
    """An optional or repeated step wrapping a rule or terminal."""

    of_rule: RuleKind | Terminal
    is_list: bool = False
    separator: RuleStep | Terminal | None = None


Step = Union[RuleKind, Terminal, RuleStep]
ForkingRule = Callable[["Token", "CharacterStream"], "RuleKind | None"]
Rule = Union[list[Step], ForkingRule]


def is_ignored(ch: str) -> bool:
    """Whitespace, commas and the byte order mark carry no meaning."""
    return ch in (" ", "\t", ",", "\n", "\r", "\ufeff")


# Order matters: the first matching rule wins.
LEX_RULES: dict[TokenKind, re.Pattern[str]] = {
    TokenKind.NAME: re.compile(r"[_A-Za-z][_0-9A-Za-z]*"),
    TokenKind.PUNCTUATION: re.compile(r"(?:!|\$|\(|\)|\.\.\.|:|=|@|\[|]|\{|\||\})"),
    TokenKind.NUMBER: re.compile(r"-?(?:0|(?:[1-9][0-9]*))(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?"),
    # The closing quote is optional so unterminated strings still lex.
    TokenKind.STRING: re.compile(r'"(?:[^"\\]|\\(?:"|/|\\|b|f|n|r|t|u[0-9a-fA-F]{4}))*"?'),
    TokenKind.COMMENT: re.compile(r"#.*"),
}


# Rule helpers


def opt(of_rule: RuleKind | Terminal) -> RuleStep:
    return RuleStep(of_rule=of_rule)


def list_of(of_rule: RuleKind | Terminal, separator: RuleStep | Terminal | None = None) -> RuleStep:
    return RuleStep(of_rule=of_rule, is_list=True, separator=separator)


def but_not(rule: Terminal, exclusions: list[Terminal]) -> Terminal:
    """Narrow ``rule`` so it rejects tokens matched by any exclusion."""
    rule_match = rule.match

    def match(token: Token) -> bool:
        return rule_match(token) and all(not exclusion.match(token) for exclusion in exclusions)

    return Terminal(style=rule.style, match=match, update=rule.update)


def t(kind: TokenKind, style: str) -> Terminal:
    return Terminal(style=style, match=lambda token: token.kind == kind)


def p(value: str, style: str | None = None) -> Terminal:
    return Terminal(
        style=style or "punctuation",
        match=lambda token: token.kind == TokenKind.PUNCTUATION and token.value == value,
    )


def word(value: str) -> Terminal:
    return Terminal(
        style="keyword",
        match=lambda token: token.kind == TokenKind.NAME and token.value == value,
    )


def _set_name(state: ParserState, token: Token) -> None:
    state.name = token.value


def name(style: str) -> Terminal:
    return Terminal(style=style, match=lambda token: token.kind == TokenKind.NAME, update=_set_name)


def _set_type(state: ParserState, token: Token) -> None:
    # The named type is recorded on the construct two levels up, e.g. the
    # FragmentDefinition enclosing TypeCondition > NamedType.
    if state.prev_state is not None and state.prev_state.prev_state is not None:
        state.name = token.value
        state.prev_state.prev_state.type = token.value


def type_name(style: str) -> Terminal:
    return Terminal(style=style, match=lambda token: token.kind == TokenKind.NAME, update=_set_type)


# Forking rules

_DEFINITION_KEYWORDS = {
    "query": RuleKind.QUERY,
    "mutation": RuleKind.MUTATION,
    "subscription": RuleKind.SUBSCRIPTION,
    "fragment": RuleKind.FRAGMENT_DEFINITION,
    "schema": RuleKind.SCHEMA_DEF,
    "scalar": RuleKind.SCALAR_DEF,
    "type": RuleKind.OBJECT_TYPE_DEF,
    "interface": RuleKind.INTERFACE_DEF,
    "union": RuleKind.UNION_DEF,
    "enum": RuleKind.ENUM_DEF,
    "input": RuleKind.INPUT_DEF,
    "extend": RuleKind.EXTEND_DEF,
    "directive": RuleKind.DIRECTIVE_DEF,
}

_INLINE_FRAGMENT_AHEAD = re.compile(r"[\s,]*(on\b|@|\{)")
_ALIAS_AHEAD = re.compile(r"[\s,]*:")


def _definition(token: Token, stream: CharacterStream) -> RuleKind | None:
    if token.value == "{":
        return RuleKind.SHORT_QUERY
    return _DEFINITION_KEYWORDS.get(token.value)


def _selection(token: Token, stream: CharacterStream) -> RuleKind | None:
    if token.value == "...":
        if stream.match(_INLINE_FRAGMENT_AHEAD, consume=False) is not None:
            return RuleKind.INLINE_FRAGMENT
        return RuleKind.FRAGMENT_SPREAD
    if stream.match(_ALIAS_AHEAD, consume=False) is not None:
        return RuleKind.ALIASED_FIELD
    return RuleKind.FIELD


def _value(token: Token, stream: CharacterStream) -> RuleKind | None:
    if token.kind == TokenKind.NUMBER:
        return RuleKind.NUMBER_VALUE
    if token.kind == TokenKind.STRING:
        return RuleKind.STRING_VALUE
    if token.kind == TokenKind.PUNCTUATION:
        return {
            "[": RuleKind.LIST_VALUE,
            "{": RuleKind.OBJECT_VALUE,
            "$": RuleKind.VARIABLE,
        }.get(token.value)
    if token.kind == TokenKind.NAME:
        if token.value in ("true", "false"):
            return RuleKind.BOOLEAN_VALUE
        if token.value == "null":
            return RuleKind.NULL_VALUE
        return RuleKind.ENUM_VALUE
    return None


def _type(token: Token, stream: CharacterStream) -> RuleKind | None:
    return RuleKind.LIST_TYPE if token.value == "[" else RuleKind.NON_NULL_TYPE


PARSE_RULES: dict[RuleKind, Rule] = {
    RuleKind.DOCUMENT: [list_of(RuleKind.DEFINITION)],
    RuleKind.DEFINITION: _definition,
    RuleKind.SHORT_QUERY: [RuleKind.SELECTION_SET],
    RuleKind.QUERY: [
        word("query"),
        opt(name("def")),
        opt(RuleKind.VARIABLE_DEFINITIONS),
        list_of(RuleKind.DIRECTIVE),
        RuleKind.SELECTION_SET,
    ],
    RuleKind.MUTATION: [
        word("mutation"),
        opt(name("def")),
        opt(RuleKind.VARIABLE_DEFINITIONS),
        list_of(RuleKind.DIRECTIVE),
        RuleKind.SELECTION_SET,
    ],
    RuleKind.SUBSCRIPTION: [
        word("subscription"),
        opt(name("def")),
        opt(RuleKind.VARIABLE_DEFINITIONS),
        list_of(RuleKind.DIRECTIVE),
        RuleKind.SELECTION_SET,
    ],
    RuleKind.VARIABLE_DEFINITIONS: [p("("), list_of(RuleKind.VARIABLE_DEFINITION), p(")")],
    RuleKind.VARIABLE_DEFINITION: [RuleKind.VARIABLE, p(":"), RuleKind.TYPE, opt(RuleKind.DEFAULT_VALUE)],
    RuleKind.VARIABLE: [p("$", "variable"), name("variable")],
    RuleKind.DEFAULT_VALUE: [p("="), RuleKind.VALUE],
    RuleKind.SELECTION_SET: [p("{"), list_of(RuleKind.SELECTION), p("}")],
    RuleKind.SELECTION: _selection,
    # Aliases are folded into their own rule to keep the grammar LL(1).
    RuleKind.ALIASED_FIELD: [
        name("property"),
        p(":"),
        name("qualifier"),
        opt(RuleKind.ARGUMENTS),
        list_of(RuleKind.DIRECTIVE),
        opt(RuleKind.SELECTION_SET),
    ],
    RuleKind.FIELD: [
        name("property"),
        opt(RuleKind.ARGUMENTS),
        list_of(RuleKind.DIRECTIVE),
        opt(RuleKind.SELECTION_SET),
    ],
    RuleKind.ARGUMENTS: [p("("), list_of(RuleKind.ARGUMENT), p(")")],
    RuleKind.ARGUMENT: [name("attribute"), p(":"), RuleKind.VALUE],
    RuleKind.FRAGMENT_SPREAD: [p("..."), name("def"), list_of(RuleKind.DIRECTIVE)],
    RuleKind.INLINE_FRAGMENT: [
        p("..."),
        opt(RuleKind.TYPE_CONDITION),
        list_of(RuleKind.DIRECTIVE),
        RuleKind.SELECTION_SET,
    ],
    RuleKind.FRAGMENT_DEFINITION: [
        word("fragment"),
        opt(but_not(name("def"), [word("on")])),
        RuleKind.TYPE_CONDITION,
        list_of(RuleKind.DIRECTIVE),
        RuleKind.SELECTION_SET,
    ],
    RuleKind.TYPE_CONDITION: [word("on"), RuleKind.NAMED_TYPE],
    # Variables are accepted even where only constants are legal.
    RuleKind.VALUE: _value,
    RuleKind.NUMBER_VALUE: [t(TokenKind.NUMBER, "number")],
    RuleKind.STRING_VALUE: [t(TokenKind.STRING, "string")],
    RuleKind.BOOLEAN_VALUE: [t(TokenKind.NAME, "builtin")],
    RuleKind.NULL_VALUE: [t(TokenKind.NAME, "keyword")],
    RuleKind.ENUM_VALUE: [name("string-2")],
    RuleKind.LIST_VALUE: [p("["), list_of(RuleKind.VALUE), p("]")],
    RuleKind.OBJECT_VALUE: [p("{"), list_of(RuleKind.OBJECT_FIELD), p("}")],
    RuleKind.OBJECT_FIELD: [name("attribute"), p(":"), RuleKind.VALUE],
    RuleKind.TYPE: _type,
    # A trailing "!" is folded into ListType and NonNullType.
    RuleKind.LIST_TYPE: [p("["), RuleKind.TYPE, p("]"), opt(p("!"))],
    RuleKind.NON_NULL_TYPE: [RuleKind.NAMED_TYPE, opt(p("!"))],
    RuleKind.NAMED_TYPE: [type_name("atom")],
    RuleKind.DIRECTIVE: [p("@", "meta"), name("meta"), opt(RuleKind.ARGUMENTS)],
    RuleKind.SCHEMA_DEF: [
        word("schema"),
        list_of(RuleKind.DIRECTIVE),
        p("{"),
        list_of(RuleKind.OPERATION_TYPE_DEF),
        p("}"),
    ],
    RuleKind.OPERATION_TYPE_DEF: [name("keyword"), p(":"), name("atom")],
    RuleKind.SCALAR_DEF: [word("scalar"), name("atom"), list_of(RuleKind.DIRECTIVE)],
    RuleKind.OBJECT_TYPE_DEF: [
        word("type"),
        name("atom"),
        opt(RuleKind.IMPLEMENTS),
        list_of(RuleKind.DIRECTIVE),
        p("{"),
        list_of(RuleKind.FIELD_DEF),
        p("}"),
    ],
    RuleKind.IMPLEMENTS: [word("implements"), list_of(RuleKind.NAMED_TYPE)],
    RuleKind.FIELD_DEF: [
        name("property"),
        opt(RuleKind.ARGUMENTS_DEF),
        p(":"),
        RuleKind.TYPE,
        list_of(RuleKind.DIRECTIVE),
    ],
    RuleKind.ARGUMENTS_DEF: [p("("), list_of(RuleKind.INPUT_VALUE_DEF), p(")")],
    RuleKind.INPUT_VALUE_DEF: [
        name("attribute"),
        p(":"),
        RuleKind.TYPE,
        opt(RuleKind.DEFAULT_VALUE),
        list_of(RuleKind.DIRECTIVE),
    ],
    RuleKind.INTERFACE_DEF: [
        word("interface"),
        name("atom"),
        list_of(RuleKind.DIRECTIVE),
        p("{"),
        list_of(RuleKind.FIELD_DEF),
        p("}"),
    ],
    RuleKind.UNION_DEF: [
        word("union"),
        name("atom"),
        list_of(RuleKind.DIRECTIVE),
        p("="),
        list_of(RuleKind.UNION_MEMBER, p("|")),
    ],
    RuleKind.UNION_MEMBER: [RuleKind.NAMED_TYPE],
    RuleKind.ENUM_DEF: [
        word("enum"),
        name("atom"),
        list_of(RuleKind.DIRECTIVE),
        p("{"),
        list_of(RuleKind.ENUM_VALUE_DEF),
        p("}"),
    ],
    RuleKind.ENUM_VALUE_DEF: [name("string-2"), list_of(RuleKind.DIRECTIVE)],
    RuleKind.INPUT_DEF: [
        word("input"),
        name("atom"),
        list_of(RuleKind.DIRECTIVE),
        p("{"),
        list_of(RuleKind.INPUT_VALUE_DEF),
        p("}"),
    ],
    RuleKind.EXTEND_DEF: [word("extend"), RuleKind.OBJECT_TYPE_DEF],
    RuleKind.DIRECTIVE_DEF: [
        word("directive"),
        p("@", "meta"),
        name("meta"),
        opt(RuleKind.ARGUMENTS_DEF),
        word("on"),
        list_of(RuleKind.DIRECTIVE_LOCATION, p("|")),
    ],
    RuleKind.DIRECTIVE_LOCATION: [name("string-2")],
}

# Rules the parser pushes on its own: unparseable input and comments.
SPECIAL_PARSE_RULES: dict[RuleKind, Rule] = {
    RuleKind.INVALID: [],
    RuleKind.COMMENT: [],
}
