"""SPDX license expression handling.

Two levels of processing are offered:

* ``map_license`` rewrites identifier tokens in place and leaves everything
  else of the original text (operators, parentheses, spacing) untouched. It
  only lexes the expression.
* ``parse_expression``/``render_expression`` convert between text and a small
  immutable syntax tree, used where the structure matters, e.g. when license
  exceptions are attached to licenses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional, Set, Tuple, Union

from lark import Transformer
from lark.exceptions import LarkError

from scansummary.errors import LicenseExpressionError
from scansummary.spdx.grammar import SPDX_PARSER
from scansummary.spdx.identifiers import is_exception_id

logger = logging.getLogger("scansummary.spdx.expression")


@dataclass(frozen=True)
class LicenseId:
    """A single license (or license exception) identifier."""

    id: str


@dataclass(frozen=True)
class WithException:
    """A license with an exception applied, ``<license> WITH <exception>``."""

    license: str
    exception: str


@dataclass(frozen=True)
class Compound:
    """Operands joined by one boolean operator, ``AND`` or ``OR``."""

    operator: str
    operands: Tuple["Expression", ...]


Expression = Union[LicenseId, WithException, Compound]


def _combine(operator: str, left: Expression, right: Expression) -> Compound:
    """Join two operands, flattening chains of the same operator."""
    operands: List[Expression] = []
    for operand in (left, right):
        if isinstance(operand, Compound) and operand.operator == operator:
            operands.extend(operand.operands)
        else:
            operands.append(operand)
    return Compound(operator, tuple(operands))


class _ExpressionBuilder(Transformer):
    """Turn the lark parse tree into Expression objects."""

    def license_id(self, children):
        return LicenseId(str(children[0]))

    def with_op(self, children):
        return WithException(str(children[0]), str(children[1]))

    def and_op(self, children):
        return _combine("AND", children[0], children[1])

    def or_op(self, children):
        return _combine("OR", children[0], children[1])


def parse_expression(text: str) -> Expression:
    """Parse an SPDX license expression.

    Raises:
        LicenseExpressionError: The text is not a valid expression.
    """
    try:
        tree = SPDX_PARSER.parse(text)
    except LarkError as exc:
        raise LicenseExpressionError(text, str(exc).strip()) from exc
    return _ExpressionBuilder().transform(tree)


def render_expression(expression: Expression) -> str:
    """Render an expression with upper-case operators.

    Nested compound operands are always parenthesized.
    """
    if isinstance(expression, LicenseId):
        return expression.id
    if isinstance(expression, WithException):
        return f"{expression.license} WITH {expression.exception}"

    parts = []
    for operand in expression.operands:
        rendered = render_expression(operand)
        if isinstance(operand, Compound):
            rendered = f"({rendered})"
        parts.append(rendered)
    return f" {expression.operator} ".join(parts)


def map_license(expression: str, mapping: Mapping[str, str]) -> str:
    """Replace identifier tokens of an expression according to a mapping.

    Only identifier tokens that are keys of ``mapping`` are replaced.
    Operators, parentheses and whitespace are kept exactly as written.

    Args:
        expression: License expression text, e.g. ``"gpl-2.0 with classpath-exception-2.0"``.
        mapping: Replacement identifier by original identifier.

    Returns:
        The rewritten expression; the input itself when the mapping is empty.

    Raises:
        LicenseExpressionError: The expression contains characters that are
            not part of the SPDX expression syntax.
    """
    if not mapping:
        return expression

    try:
        tokens = list(SPDX_PARSER.lex(expression))
    except LarkError as exc:
        raise LicenseExpressionError(expression, str(exc).strip()) from exc

    parts: List[str] = []
    position = 0
    for token in tokens:
        if token.type != "LICENSE_ID":
            continue
        replacement = mapping.get(str(token))
        if replacement is None:
            continue
        parts.append(expression[position : token.start_pos])
        parts.append(replacement)
        position = token.end_pos
    parts.append(expression[position:])
    return "".join(parts)


def is_single_exception(expression: Expression) -> bool:
    return isinstance(expression, LicenseId) and is_exception_id(expression.id)


def _is_plain_license(expression: Expression) -> bool:
    return isinstance(expression, LicenseId) and not is_exception_id(expression.id)


def attached_exceptions(expression: Expression) -> Set[str]:
    """Collect the exceptions attached with ``WITH`` anywhere in an expression."""
    if isinstance(expression, WithException):
        return {expression.exception}
    if isinstance(expression, Compound):
        found: Set[str] = set()
        for operand in expression.operands:
            found |= attached_exceptions(operand)
        return found
    return set()


def associate_exceptions(expression: Expression) -> Expression:
    """Attach bare exception operands of ``AND`` chains to their license.

    ``GPL-2.0-only AND Classpath-exception-2.0`` becomes
    ``GPL-2.0-only WITH Classpath-exception-2.0``. An exception is attached to
    the nearest preceding plain license of the same chain; exceptions without
    one stay where they are.
    """
    if not isinstance(expression, Compound):
        return expression

    operands = [associate_exceptions(operand) for operand in expression.operands]
    if expression.operator == "AND":
        chained: List[Expression] = []
        for operand in operands:
            if is_single_exception(operand):
                for index in range(len(chained) - 1, -1, -1):
                    previous = chained[index]
                    if _is_plain_license(previous):
                        chained[index] = WithException(previous.id, operand.id)
                        break
                else:
                    chained.append(operand)
            else:
                chained.append(operand)
        operands = chained

    if len(operands) == 1:
        return operands[0]
    return Compound(expression.operator, tuple(operands))


def apply_exception(expression: Expression, exception: str) -> Optional[Expression]:
    """Apply an exception to the license of an expression.

    A plain license gets the exception directly. A compound expression gets
    it only if exactly one of its top-level operands is a plain license;
    with several candidates the target is ambiguous.

    Returns:
        The new expression, or None if there was no unambiguous license.
    """
    if _is_plain_license(expression):
        return WithException(expression.id, exception)
    if not isinstance(expression, Compound):
        return None

    candidates = [i for i, operand in enumerate(expression.operands) if _is_plain_license(operand)]
    if len(candidates) != 1:
        return None

    operands = list(expression.operands)
    target = operands[candidates[0]]
    operands[candidates[0]] = WithException(target.id, exception)
    return Compound(expression.operator, tuple(operands))


__all__ = [
    "LicenseId",
    "WithException",
    "Compound",
    "Expression",
    "parse_expression",
    "render_expression",
    "map_license",
    "is_single_exception",
    "attached_exceptions",
    "associate_exceptions",
    "apply_exception",
]
