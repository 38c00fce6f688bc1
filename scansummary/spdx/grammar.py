"""Lark grammar for SPDX license expressions.

Operators are matched case-insensitively because ScanCode writes them in
lower case (``mit and apache-2.0``). Operator terminals carry a higher
priority than identifiers and refuse to match a prefix of a longer
identifier, so ``ORACLE`` or ``and-later`` lex as identifiers.
"""

from __future__ import annotations

from lark import Lark

SPDX_GRAMMAR = r"""
?start: or_expr

?or_expr: and_expr
        | or_expr _OR and_expr          -> or_op

?and_expr: with_expr
         | and_expr _AND with_expr      -> and_op

?with_expr: atom
          | LICENSE_ID _WITH LICENSE_ID -> with_op

?atom: LICENSE_ID                       -> license_id
     | "(" or_expr ")"

_OR.2: /OR(?![A-Za-z0-9.\-_:+])/i
_AND.2: /AND(?![A-Za-z0-9.\-_:+])/i
_WITH.2: /WITH(?![A-Za-z0-9.\-_:+])/i

LICENSE_ID: /[A-Za-z0-9][A-Za-z0-9.\-_:]*\+?/

%import common.WS
%ignore WS
"""

SPDX_PARSER = Lark(SPDX_GRAMMAR, parser="lalr", lexer="basic")

__all__ = ["SPDX_GRAMMAR", "SPDX_PARSER"]
