"""Tokenizer for lispr source text. Characters are pulled one at a time from the input, so that reading a single
expression from an unbounded stream (such as standard input) never consumes more than that expression.

Token rules, checked in order on the next unread character:

```
<EOF>      ::= end of input                  ; returned again on every later call
"(" ")" "'" "-"                              ; single character tokens
<number>   ::= [0-9] [0-9_]*                 ; underscores kept verbatim
<comment>  ::= ";" <char>*                   ; up to (not including) the next newline
<string>   ::= '"' (<char> | "\\" <char>)* '"'  ; backslash copies the next character, quotes are kept
<atom>     ::= anything up to one of ( ) " ; space tab newline
```

Whitespace (space, tab, newline) separates tokens and is never returned.
"""

import io
from enum import Enum


class Token(Enum):
    """Kinds of lexical tokens. Values are the names used when a token is reported in an error message."""
    ERROR = "<error>"
    ATOM = "<atom>"
    MINUS = "-"
    NUMBER = "<number>"
    STRING = "<string>"
    COMMENT = "<comment>"
    LPAREN = "("
    RPAREN = ")"
    QUOTE = "'"
    EOF = "<EOF>"

    def __str__(self):
        return self.value


WHITESPACE = " \t\n"
DIGITS = "0123456789"
ATOM_TERMINATORS = "()\";" + WHITESPACE

SINGLES = {
    "(": Token.LPAREN,
    ")": Token.RPAREN,
    "'": Token.QUOTE,
    "-": Token.MINUS,
}


class Lexer:
    """Produces (Token, literal text) pairs from source, which is either a str or a readable text stream."""

    def __init__(self, source):
        if isinstance(source, str):
            source = io.StringIO(source)

        self.source = source
        self._unread = None

        self.line_num = 1
        self.line = ""           # text read so far on the current line, used for error messages
        self._prev_line = ""
        self.terminated = True   # whether the last string token was closed by a double quote

    def _read(self):
        """Returns the next character, or "" at the end of input."""
        if self._unread is not None:
            char, self._unread = self._unread, None
        else:
            char = self.source.read(1)

        if char == "\n":
            self.line_num += 1
            self._prev_line, self.line = self.line, ""
        else:
            self.line += char
        return char

    def unread(self, char):
        """Puts char, the last character returned by _read, back into the input. Only one character can be held."""
        if not char:
            return
        assert self._unread is None, "only one character can be unread"

        self._unread = char
        if char == "\n":
            self.line_num -= 1
            self.line = self._prev_line
        else:
            self.line = self.line[:-1]

    def next(self):
        """Returns the next (Token, text) pair. Keeps returning (Token.EOF, "") once the input is exhausted."""
        char = self._read()

        while char and char in WHITESPACE:
            char = self._read()

        if not char:
            return Token.EOF, ""
        elif char in SINGLES:
            return SINGLES[char], char

        self.unread(char)
        if char in DIGITS:
            return self._number()
        elif char == ";":
            return self._comment()
        elif char == "\"":
            return self._string()
        return self._atom()

    def _number(self):
        digits = ""
        char = self._read()
        while char and (char in DIGITS or char == "_"):
            digits += char
            char = self._read()

        self.unread(char)
        return Token.NUMBER, digits

    def _comment(self):
        body = ""
        char = self._read()
        while char and char != "\n":
            body += char
            char = self._read()

        # a comment ends at its newline, so put it back for the line count
        self.unread(char)
        return Token.COMMENT, body

    def _string(self):
        """Reads a string literal, surrounding quotes included. Backslashes are dropped and the character after each
        one is copied as is. Hitting the end of input before the closing quote silently truncates the string.
        """
        text = self._read()
        self.terminated = False

        char = self._read()
        while char:
            if char == "\\":
                char = self._read()
                if not char:
                    break
            elif char == "\"":
                text += char
                self.terminated = True
                break

            text += char
            char = self._read()

        return Token.STRING, text

    def _atom(self):
        text = ""
        char = self._read()
        while char and char not in ATOM_TERMINATORS:
            text += char
            char = self._read()

        self.unread(char)
        return Token.ATOM, text

    def __iter__(self):
        """Iterates over tokens, stopping after Token.EOF has been produced once."""
        while True:
            token, text = self.next()
            yield token, text
            if token is Token.EOF:
                return
