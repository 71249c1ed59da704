import io
import unittest

from lispr.lang.error import GenericException
from lispr.pure.parser import Parser
from lispr.pure.syntax import Atom, List, Number, Text


def parse(source):
    return Parser(source).parse_expression()


class ParserTestCase(unittest.TestCase):

    def test_literals(self):
        cases = {
            "1  ": Number(1),
            "-1": Number(-1),
            "1_000": Number(1000),
            "- 5": Number(-5),
            "+": Atom("+"),
            "-": Atom("-"),
            "#foo": Atom("#foo"),
            "bar": Atom("bar"),
            "  \"string\"": Text("string"),
            "\"\"": Text(""),
            "\"a\\\"b\"": Text("a\"b"),
            "\"open": Text("open"),
            "\"open\\\"": Text("open\""),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, parse(case), case)

    def test_minus(self):
        cases = {
            "(- 1)": List([Number(-1)]),
            "(- a)": List([Atom("-"), Atom("a")]),
            "(-)": List([Atom("-")]),
            "(- \"s\")": List([Atom("-"), Text("s")]),
            "(- -1)": List([Atom("-"), Number(-1)]),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, parse(case), case)

    def test_lists(self):
        cases = {
            "()": List([]),
            "'()": List([], literal=True),
            "(a (b 1) \"c\")": List([Atom("a"), List([Atom("b"), Number(1)]), Text("c")]),
            "'(a '(b))": List([Atom("a"), List([Atom("b")], literal=True)], literal=True),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, parse(case), case)

    def test_render(self):
        cases = {
            "   (   foo    bar    baz ) ": "(foo bar baz)",
            "'(foo bar-baz)": "'(foo bar-baz)",
            "(print(*(+ 1 2)3))": "(print (* (+ 1 2) 3))",
            "(print '(foo bar))": "(print '(foo bar))",
            "(\n\tnested (lists\n(here)) \"s p\" -7)": "(nested (lists (here)) \"s p\" -7)",
            "( )": "()",
            "' ( )": "'()",
            "1_0": "10",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, str(parse(case)), case)

    def test_errors(self):
        should_raise = [
            "",
            "   ",
            ")",
            "(foo",
            "(foo (bar)",
            "'foo",
            "'1",
            "'\"s\"",
            "'",
            "; comment",
            "(a ; comment\n)",
            "99999999999999999999",
            "9223372036854775808",
        ]
        for case in should_raise:
            self.assertRaises(GenericException, parse, case)

    def test_error_messages(self):
        cases = {
            ")": "unexpected token",
            "(foo bar": "missing a closing parenthesis",
            "'foo": "only lists can be quoted",
        }
        for case, expected in cases.items():
            with self.assertRaises(GenericException) as context:
                parse(case)
            self.assertIn(expected, context.exception.msg, case)

    def test_int64_bounds(self):
        self.assertEqual(Number(9223372036854775807), parse("9223372036854775807"))
        self.assertEqual(Number(-9223372036854775808), parse("-9223372036854775808"))

    def test_reads_one_expression(self):
        stream = io.StringIO("(a b) (c d)")
        parser = Parser(stream)
        self.assertEqual("(a b)", str(parser.parse_expression()))
        self.assertEqual("(c d)", str(parser.parse_expression()))

    def test_peek(self):
        parser = Parser("a b")
        self.assertEqual(parser.peek(), parser.peek())
        self.assertEqual(Atom("a"), parser.parse_expression())
        self.assertEqual(Atom("b"), parser.parse_expression())


if __name__ == '__main__':
    unittest.main()
