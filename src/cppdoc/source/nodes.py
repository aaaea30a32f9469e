"""Syntax node model consumed from the front end."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from cppdoc.source.buffer import Span


class NodeKind(Enum):
    """Kinds of syntax nodes reported by the front end."""

    FUNCTION = "function"
    METHOD = "method"
    CONSTRUCTOR = "constructor"
    DESTRUCTOR = "destructor"
    CONVERSION_FUNCTION = "conversion_function"
    FUNCTION_TEMPLATE = "function_template"
    CLASS = "class"
    STRUCT = "struct"
    UNION = "union"
    CLASS_TEMPLATE = "class_template"
    CLASS_TEMPLATE_PARTIAL_SPECIALIZATION = "class_template_partial_specialization"
    TEMPLATE_TYPE_PARAMETER = "template_type_parameter"
    NON_TYPE_TEMPLATE_PARAMETER = "non_type_template_parameter"
    TEMPLATE_TEMPLATE_PARAMETER = "template_template_parameter"
    TYPE_ALIAS = "type_alias"
    TYPEDEF = "typedef"
    VARIABLE = "variable"
    FIELD = "field"
    ENUM = "enum"
    ENUM_CONSTANT = "enum_constant"
    NAMESPACE = "namespace"
    USING_DIRECTIVE = "using_directive"
    USING_DECLARATION = "using_declaration"
    MACRO_DEFINITION = "macro_definition"
    PARAMETER = "parameter"
    BASE_SPECIFIER = "base_specifier"
    COMPOUND_STATEMENT = "compound_statement"
    TRY_STATEMENT = "try_statement"
    OTHER_DECLARATION = "other_declaration"
    OTHER = "other"

    @property
    def is_declaration(self) -> bool:
        return self not in _NON_DECLARATIONS

    @property
    def is_function_like(self) -> bool:
        return self in _FUNCTION_KINDS

    @property
    def is_class_like(self) -> bool:
        return self in _CLASS_KINDS

    @property
    def is_template_parameter(self) -> bool:
        return self in _TEMPLATE_PARAMETER_KINDS

    @property
    def is_body(self) -> bool:
        return self in (NodeKind.COMPOUND_STATEMENT, NodeKind.TRY_STATEMENT)


_FUNCTION_KINDS = frozenset(
    {
        NodeKind.FUNCTION,
        NodeKind.METHOD,
        NodeKind.CONSTRUCTOR,
        NodeKind.DESTRUCTOR,
        NodeKind.CONVERSION_FUNCTION,
        NodeKind.FUNCTION_TEMPLATE,
    }
)

_CLASS_KINDS = frozenset(
    {
        NodeKind.CLASS,
        NodeKind.STRUCT,
        NodeKind.UNION,
        NodeKind.CLASS_TEMPLATE,
        NodeKind.CLASS_TEMPLATE_PARTIAL_SPECIALIZATION,
    }
)

_TEMPLATE_PARAMETER_KINDS = frozenset(
    {
        NodeKind.TEMPLATE_TYPE_PARAMETER,
        NodeKind.NON_TYPE_TEMPLATE_PARAMETER,
        NodeKind.TEMPLATE_TEMPLATE_PARAMETER,
    }
)

# Macro definitions count as declarations: they carry documentation and
# their extents are corrected like any other declaration.
_NON_DECLARATIONS = frozenset(
    {
        NodeKind.COMPOUND_STATEMENT,
        NodeKind.TRY_STATEMENT,
        NodeKind.OTHER,
    }
)


class ChildVisit(Enum):
    """Signal returned by a child visitor."""

    CONTINUE = "continue"
    BREAK = "break"


@dataclass(frozen=True)
class SyntaxNode:
    """
    One construct identified by the front end.

    The extent (begin, end) is approximate: it is what the front end reports
    and may be off in the ways the span corrector knows how to repair.
    `file` is None for synthesized or built-in nodes that have no source.
    `template_kind` is the kind of the templated entity when the node is a
    template (e.g. FUNCTION for a function template).
    """

    kind: NodeKind
    begin: int
    end: int
    file: str | None = None
    spelling: str = ""
    template_kind: NodeKind | None = None
    children: tuple[SyntaxNode, ...] = ()

    @property
    def span(self) -> Span:
        return Span(self.begin, self.end)

    @property
    def is_function_like(self) -> bool:
        return self.kind.is_function_like or (
            self.template_kind is not None and self.template_kind.is_function_like
        )

    def visit_children(self, visitor: Callable[[SyntaxNode], ChildVisit]) -> bool:
        """
        Call visitor on each direct child in order.

        Returns:
            True if the visitor stopped the enumeration early
        """
        for child in self.children:
            if visitor(child) is ChildVisit.BREAK:
                return True
        return False
