from __future__ import annotations

"""
Lightweight indexer for minirack files without evaluating code.

We scan for `(define name ...)` forms and bracket balance, and run the real
reader once to surface its syntax error, if any. The scanner is tolerant so
partial buffers still yield symbols for completion and document outline.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Tuple
import re

from minirack.builtin.env_builtin import primitive_functions
from minirack.errors import MinirackSyntaxError
from minirack.reader.parser import parse

# Simple token pattern for scanning; strings are not part of the language
TOKEN_REGEX = re.compile(r"\s+|;[^\n]*|[()\[\]]|'|[^\s()\[\]';]+")

OPENERS = "(["
CLOSERS = ")]"


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    paren_balance: int = 0
    unmatched: List[Tuple[int, int]] = field(default_factory=list)  # (line, col) of stray brackets
    syntax_error: Optional[str] = None


def _iter_tokens(text: str):
    for m in TOKEN_REGEX.finditer(text):
        tok = m.group(0)
        if not tok or tok.isspace() or tok.startswith(";"):
            continue
        yield tok, m.start(), m.end()


def position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(_iter_tokens(text))
    open_stack: List[int] = []

    for i, (tok, start, _) in enumerate(tokens):
        if tok in OPENERS:
            idx.paren_balance += 1
            open_stack.append(start)
            # (define name value): record the name and whether value is a lambda
            if i + 2 < len(tokens) and tokens[i + 1][0] == "define":
                name, name_start, _ = tokens[i + 2]
                if name not in OPENERS + CLOSERS + "'":
                    kind = "var"
                    if (
                        i + 4 < len(tokens)
                        and tokens[i + 3][0] in OPENERS
                        and tokens[i + 4][0] == "lambda"
                    ):
                        kind = "function"
                    line, col = position_from_offset(text, name_start)
                    idx.symbols[name] = SymbolDef(name=name, kind=kind, line=line, col=col)
        elif tok in CLOSERS:
            idx.paren_balance -= 1
            if open_stack:
                open_stack.pop()
            else:
                idx.unmatched.append(position_from_offset(text, start))

    idx.unmatched.extend(position_from_offset(text, s) for s in open_stack)

    try:
        parse(text)
    except MinirackSyntaxError as err:
        idx.syntax_error = str(err)

    return idx


# Signatures for quick hover/signature help without eval
BUILTIN_SIGNATURES: Dict[str, str] = {p.name: p.signature for p in primitive_functions()}

SPECIAL_FORM_SIGNATURES: Dict[str, str] = {
    "quote": "(quote datum)",
    "define": "(define name expr)",
    "lambda": "(lambda (params ...) body)",
    "if": "(if test then else)",
}


# --- Text helpers shared by the server ---

def get_line_prefix(text: str, line: int, character: int) -> str:
    # Return the text from start of line up to the cursor
    lines = text.splitlines(True)
    if line >= len(lines):
        return ""
    return lines[line][:character]


def extract_word_at(text: str, line: int, character: int) -> Tuple[Optional[str], int]:
    """Return the atom under the cursor and the column where it starts."""
    lines = text.splitlines(True)
    if line >= len(lines):
        return None, character
    line_text = lines[line]
    delimiters = " \t()[]'\n\r"
    start = character
    while start > 0 and line_text[start - 1] not in delimiters:
        start -= 1
    end = character
    while end < len(line_text) and line_text[end] not in delimiters:
        end += 1
    word = line_text[start:end]
    return (word if word else None), start


def extract_callee_name(prefix: str) -> Optional[str]:
    # find last open bracket and take the following token
    lp = max(prefix.rfind("("), prefix.rfind("["))
    if lp == -1:
        return None
    tail = prefix[lp + 1:].strip()
    if not tail:
        return None
    return re.split(r"[\s()\[\]]", tail, maxsplit=1)[0] or None
