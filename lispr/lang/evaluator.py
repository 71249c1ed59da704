"""Tree-walking evaluator for lispr expressions.

Numbers and strings evaluate to themselves. A call-form `(name arg ...)` evaluates every argument left to right and then
dispatches on name to one of the builtins below; `()` evaluates to None, the absent value.

Known quirks, kept as is:
- a call-form whose name is not a builtin evaluates its arguments and then returns None, without raising
- `+` and `*` count any argument that is not a Number as 0, so a single non-number turns a product into 0
"""

import sys

from lispr.lang import numerical
from lispr.lang.error import GenericException
from lispr.pure.syntax import Atom, List, Number, Text


class Evaluator:
    """Evaluates expressions, writing the output of print to out (sys.stdout if not given)."""

    def __init__(self, out=None):
        self.out = out
        self.builtins = {
            "print": self.builtin_print,
            "+": self.builtin_add,
            "*": self.builtin_mul,
        }

    def evaluate(self, expr):
        """Returns the value of expr, or None if it has none. Raises GenericException if expr cannot be evaluated."""
        if isinstance(expr, Atom):
            raise GenericException("cannot evaluate atom '{}'", str(expr))

        elif isinstance(expr, (Number, Text)):
            return expr

        elif isinstance(expr, List):
            if expr.literal:
                raise GenericException("evaluating literal list '{}' is not implemented", str(expr))
            return self._call(expr)

        raise GenericException("unknown expression '{}'", repr(expr), internal=True)

    def _call(self, expr):
        if not expr.values:
            return None

        name, *args = expr.values
        if not isinstance(name, Atom):
            if args:
                raise GenericException("expected an atom as the function name in '{}'", str(expr))
            # covers (1) and ("foo")
            return self.evaluate(name)

        args = [self.evaluate(arg) for arg in args]

        builtin = self.builtins.get(name.value)
        if builtin is None:
            return None
        return builtin(args)

    def builtin_print(self, args):
        out = self.out if self.out is not None else sys.stdout
        for arg in args:
            if isinstance(arg, Text):
                out.write(arg.value)
            elif arg is None:
                out.write("()")
            else:
                out.write(str(arg))
        out.flush()

    @staticmethod
    def builtin_add(args):
        total = 0
        for arg in args:
            total = numerical.add(total, arg.value if isinstance(arg, Number) else 0)
        return Number(total)

    @staticmethod
    def builtin_mul(args):
        total = 1
        for arg in args:
            total = numerical.mul(total, arg.value if isinstance(arg, Number) else 0)
        return Number(total)


def evaluate(expr, out=None):
    """Evaluates expr with a fresh Evaluator."""
    return Evaluator(out).evaluate(expr)
