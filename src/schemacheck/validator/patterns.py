"""Build a sample string that matches a regular expression.

Only the common subset of regex syntax found in API schemas is understood:
literals, escapes (``\\d``, ``\\w``, ``\\s`` and escaped punctuation),
character classes, ``.``, groups, alternation (first branch) and the
``* + ? {m} {m,} {m,n}`` quantifiers, each repeated its minimum number of
times. Anything else makes :func:`synthesize` return None.
"""

import re
import string

CLASS_CANDIDATES = "aA1x0-_ ." + string.ascii_letters + string.digits + string.punctuation

ESCAPES = {
    "d": "1",
    "D": "a",
    "w": "a",
    "W": "-",
    "s": " ",
    "S": "a",
    "n": "\n",
    "t": "\t",
    "r": "\r",
}
ZERO_WIDTH_ESCAPES = {"b", "B", "A", "Z", "z"}


class UnsupportedPattern(Exception):
    """Raised when the walker meets syntax it does not handle."""


class _Walker:
    def __init__(self, pattern: str):
        self.pattern = pattern
        self.pos = 0

    def peek(self) -> str | None:
        return self.pattern[self.pos] if self.pos < len(self.pattern) else None

    def take(self) -> str:
        if self.pos >= len(self.pattern):
            raise UnsupportedPattern("unexpected end of pattern")
        char = self.pattern[self.pos]
        self.pos += 1
        return char

    def run(self) -> str:
        value = self.alternation()
        if self.pos != len(self.pattern):
            raise UnsupportedPattern(f"unbalanced pattern at {self.pos}")
        return value

    def alternation(self) -> str:
        first = self.sequence()
        while self.peek() == "|":
            self.pos += 1
            self.sequence()
        return first

    def sequence(self) -> str:
        parts = []
        while self.peek() is not None and self.peek() not in "|)":
            atom = self.atom()
            parts.append(atom * self.quantifier())
        return "".join(parts)

    def atom(self) -> str:
        char = self.take()
        if char in "^$":
            return ""
        if char == ".":
            return "a"
        if char == "(":
            return self.group()
        if char == "[":
            return self.char_class()
        if char == "\\":
            return self.escape()
        if char in "*+?{)":
            raise UnsupportedPattern(f"unexpected {char!r}")
        return char

    def group(self) -> str:
        if self.peek() == "?":
            self.pos += 1
            marker = self.take()
            if marker == "P" and self.peek() == "<":
                end = self.pattern.find(">", self.pos)
                if end < 0:
                    raise UnsupportedPattern("unterminated group name")
                self.pos = end + 1
            elif marker != ":":
                raise UnsupportedPattern(f"group modifier ?{marker}")
        value = self.alternation()
        if self.take() != ")":
            raise UnsupportedPattern("unterminated group")
        return value

    def escape(self) -> str:
        char = self.take()
        if char in ESCAPES:
            return ESCAPES[char]
        if char in ZERO_WIDTH_ESCAPES:
            return ""
        if char.isalnum():
            raise UnsupportedPattern(f"escape \\{char}")
        return char

    def char_class(self) -> str:
        start = self.pos - 1
        i = self.pos
        if i < len(self.pattern) and self.pattern[i] == "^":
            i += 1
        if i < len(self.pattern) and self.pattern[i] == "]":
            i += 1
        while i < len(self.pattern) and self.pattern[i] != "]":
            i += 2 if self.pattern[i] == "\\" else 1
        if i >= len(self.pattern):
            raise UnsupportedPattern("unterminated character class")
        self.pos = i + 1

        try:
            matcher = re.compile(self.pattern[start : self.pos])
        except re.error as e:
            raise UnsupportedPattern(str(e)) from e
        for candidate in CLASS_CANDIDATES:
            if matcher.fullmatch(candidate):
                return candidate
        raise UnsupportedPattern("no printable character matches the class")

    def quantifier(self) -> int:
        char = self.peek()
        if char in ("*", "?"):
            self.pos += 1
            count = 0
        elif char == "+":
            self.pos += 1
            count = 1
        elif char == "{":
            end = self.pattern.find("}", self.pos)
            if end < 0:
                raise UnsupportedPattern("unterminated quantifier")
            bounds = self.pattern[self.pos + 1 : end].split(",")[0].strip()
            if not bounds.isdigit():
                raise UnsupportedPattern("malformed quantifier")
            self.pos = end + 1
            count = int(bounds)
        else:
            return 1
        if self.peek() in ("?", "+"):
            self.pos += 1
        return count


def synthesize(pattern: str) -> str | None:
    """Return a string built from ``pattern``, or None if it is out of reach.

    The result is a best-effort candidate; callers should still confirm it
    with ``re.search``.

    Example:
        >>> synthesize(r"^[A-Z]{2}\\d{6}$")
        'AA111111'
    """
    try:
        return _Walker(pattern).run()
    except UnsupportedPattern:
        return None
