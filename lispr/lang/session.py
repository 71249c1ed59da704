"""Session control for the lispr language: reads a single expression from an input stream and evaluates it, keeping the
error handler informed of the source line being processed.
"""

from lispr.lang.evaluator import Evaluator
from lispr.pure.parser import Parser


class Session:
    """Governs one lispr run over source, a str or a readable text stream. Input after the first expression is never
    read.
    """
    STDIN = "<stdin>"  # name used for standard input in error messages

    def __init__(self, error_handler, source, path=STDIN, out=None):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path
        self.parser = Parser(source)
        self.evaluator = Evaluator(out)

        self.expr = None  # last expression read

    def read(self):
        """Parses the next expression. On error, the line it occurred on is left registered for the traceback."""
        lexer = self.parser.lexer
        try:
            self.expr = self.parser.parse_expression()
        except Exception:
            self.error_handler.register_line(self.path, lexer.line.strip(), lexer.line_num)
            raise
        return self.expr

    def run(self):
        """Reads one expression and evaluates it. Returns the result, None if there is none."""
        expr = self.read()

        self.error_handler.register_line(self.path, str(expr), self.parser.lexer.line_num)
        result = self.evaluator.evaluate(expr)
        self.error_handler.remove_line(self.path)

        return result
