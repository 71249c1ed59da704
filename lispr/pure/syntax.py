"""Abstract syntax tree for lispr. An expression is exactly one of

```
Atom     ; bare symbol, e.g. print, +, #foo, bar-baz
Number   ; signed 64-bit integer
Text     ; string literal with escapes already resolved
List     ; ordered children, either a call-form (foo 1 2) or a quoted literal '(foo 1 2)
```

str() of any expression renders it back to canonical source: children separated by single spaces, strings in double
quotes, literal lists prefixed by a quote.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Expression(ABC):
    """Superclass of every lispr expression."""

    @abstractmethod
    def __str__(self):
        """Renders this expression as source text."""

    def display(self, indents=0):
        """Recursively displays the expression tree in a readable format.

        Format:
        List('<expr>')[
            <Expression>('<expr>'),
            ...
        ]
        """
        return f"{'    ' * indents}{self!r}"

    def __repr__(self):
        return f"{type(self).__name__}('{self}')"


@dataclass(repr=False)
class Atom(Expression):
    value: str

    def __str__(self):
        return self.value


@dataclass(repr=False)
class Number(Expression):
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(repr=False)
class Text(Expression):
    value: str

    def __str__(self):
        return f"\"{self.value}\""


@dataclass(repr=False)
class List(Expression):
    """A list of expressions. literal is only ever set by the parser, when the list is quoted."""
    values: list = field(default_factory=list)
    literal: bool = False

    def __str__(self):
        prefix = "'" if self.literal else ""
        return f"{prefix}({' '.join(str(value) for value in self.values)})"

    def display(self, indents=0):
        result = f"{'    ' * indents}{self!r}"
        if self.values:
            result += "[" + ",".join("\n" + value.display(indents + 1) for value in self.values)
            result += f"\n{'    ' * indents}]"
        return result
