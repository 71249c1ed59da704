"""Recursive-descent parser for lispr. Tokens are pulled from the Lexer one at a time, with a single token of lookahead.

```
<expr> ::= <atom>                 ; Atom
         | <number>               ; Number
         | "-" <number>           ; negative Number
         | "-"                    ; Atom named "-" when not followed by a number
         | <string>               ; Text, surrounding quotes stripped
         | "(" <expr>* ")"        ; List (call-form)
         | "'" "(" <expr>* ")"    ; List (literal); quoting anything but a list is an error
```
"""

from lispr.lang import numerical
from lispr.lang.error import GenericException
from lispr.pure.lexer import Lexer, Token
from lispr.pure.syntax import Atom, List, Number, Text


class Parser:
    """Parses expressions out of source, a str or a readable text stream."""

    def __init__(self, source):
        self.lexer = Lexer(source)
        self.peeked = None

    def peek(self):
        """Returns the next (Token, text) pair without consuming it."""
        if self.peeked is None:
            self.peeked = self.lexer.next()
        return self.peeked

    def consume(self):
        """Advances past the next token, returning it."""
        pair = self.peek()
        self.peeked = None
        return pair

    def parse_expression(self):
        """Parses exactly one expression. Raises GenericException if the input does not start with a valid one."""
        token, text = self.consume()

        if token is Token.ATOM:
            return Atom(text)

        elif token is Token.MINUS:
            if self.peek()[0] is Token.NUMBER:
                __, digits = self.consume()
                return Number(numerical.number(digits, negative=True))
            return Atom(text)

        elif token is Token.NUMBER:
            return Number(numerical.number(text))

        elif token is Token.STRING:
            return Text(text[1:-1] if self.lexer.terminated else text[1:])

        elif token is Token.LPAREN:
            return self._list()

        elif token is Token.QUOTE:
            expr = self.parse_expression()
            if not isinstance(expr, List):
                raise GenericException("only lists can be quoted, got '{}'", str(expr))
            expr.literal = True
            return expr

        raise GenericException("unexpected token '{}'", str(token))

    def _list(self):
        """Parses the children of a list whose opening parenthesis was just consumed."""
        values = []
        while self.peek()[0] is not Token.RPAREN:
            if self.peek()[0] is Token.EOF:
                partial = List(values)
                raise GenericException("'{}' is missing a closing parenthesis", str(partial)[:-1])
            values.append(self.parse_expression())

        self.consume()
        return List(values)
