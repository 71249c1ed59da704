"""Interpreter for lispr, a minimal Lisp-like expression language.

Basic program flow:
    1. Lexer: turns the input into (Token, text) pairs, one character at a time (see lispr/pure/lexer.py)
    2. Parser: builds one expression tree out of those tokens, with one token of lookahead (see lispr/pure/parser.py)
    3. Evaluator: walks the tree and runs the builtins print, + and * (see lispr/lang/evaluator.py)
"""

__version__ = "0.1.0"
