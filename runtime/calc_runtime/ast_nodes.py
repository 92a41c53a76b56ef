"""
Calc AST - expression nodes and statements

Nodes are frozen once the parser builds them. Interior nodes own their
children; the parser never links a node back to an ancestor, so every tree
is finite and acyclic.
"""

from dataclasses import dataclass
from enum import Enum


class BinaryOperator(Enum):
    """Binary arithmetic operators, valued by their source symbol"""
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    MOD = '%'


# ============================================================================
# Expression Nodes
# ============================================================================

@dataclass(frozen=True)
class ASTNode:
    """Base AST node"""
    pass


@dataclass(frozen=True)
class Literal(ASTNode):
    """Integer literal"""
    value: int


@dataclass(frozen=True)
class Identifier(ASTNode):
    """Variable reference, resolved at evaluation time"""
    name: str


@dataclass(frozen=True)
class Negative(ASTNode):
    """Unary minus"""
    child: ASTNode


@dataclass(frozen=True)
class Binary(ASTNode):
    """Binary operation"""
    op: BinaryOperator
    left: ASTNode
    right: ASTNode


# ============================================================================
# Statements
# ============================================================================

@dataclass(frozen=True)
class Statement:
    """Base statement; one per input line"""
    pass


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    expr: ASTNode


@dataclass(frozen=True)
class Assignment(Statement):
    """Variable binding: name = value"""
    name: str
    value: ASTNode


def show_node(node: ASTNode) -> str:
    """Render a node as a fully parenthesized expression"""
    if isinstance(node, Literal):
        return str(node.value)
    if isinstance(node, Identifier):
        return node.name
    if isinstance(node, Negative):
        return f"(-{show_node(node.child)})"
    if isinstance(node, Binary):
        spine = []
        while isinstance(node, Binary):
            spine.append(node)
            node = node.left
        text = show_node(node)
        for binary in reversed(spine):
            text = f"({text} {binary.op.value} {show_node(binary.right)})"
        return text
    return repr(node)


def show_statement(stmt: Statement) -> str:
    if isinstance(stmt, Assignment):
        return f"{stmt.name} = {show_node(stmt.value)}"
    if isinstance(stmt, ExpressionStatement):
        return show_node(stmt.expr)
    return repr(stmt)


__all__ = [
    'BinaryOperator',
    'ASTNode', 'Literal', 'Identifier', 'Negative', 'Binary',
    'Statement', 'ExpressionStatement', 'Assignment',
    'show_node', 'show_statement',
]
