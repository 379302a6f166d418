"""
nsupdate grammar - turns one line of nsupdate text into a command.

Recognized lines::

    [update] add <domain> <ttl> <type> [<priority>] <content>
    [update] delete <domain> <type>
    send

Blank lines and lines starting with ``#`` or ``;`` produce no command.
"""

import logging
import re
from typing import Optional

from lark import Lark, Token, Transformer
from lark.exceptions import (
    UnexpectedCharacters,
    UnexpectedEOF,
    UnexpectedInput,
    UnexpectedToken,
    VisitError,
)

from ..models import AddAction, Command, DeleteAction, SendCommand, UpdateCommand
from ..exceptions import ParseError
from ..utils.validators import is_absolute_name, normalize_record_type, uses_priority

logger = logging.getLogger(__name__)

_GRAMMAR = r"""
start: command?

command: _UPDATE? (add | delete)
       | send

add: _ADD FIELD FIELD FIELD _value+
delete: _DELETE FIELD FIELD
send: _SEND

_value: FIELD | QUOTED

_UPDATE: /update(?!\S)/i
_ADD: /add(?!\S)/i
_DELETE: /del(ete)?(?!\S)/i
_SEND: /send(?!\S)/i

FIELD: /[^\s"#;][^\s"]*/
QUOTED: /"(\\.|[^"\\])*"/
COMMENT: /[#;][^\n]*/

%import common.WS
%ignore WS
%ignore COMMENT
"""

_INTEGER = re.compile(r"[0-9]+")
_ESCAPE = re.compile(r"\\(.)")

_parser = Lark(_GRAMMAR, parser="lalr")


class _CommandBuilder(Transformer):
    """Build typed commands from the parse tree of a single line."""

    def __init__(self, line: str, line_number: int):
        super().__init__()
        self.line = line
        self.line_number = line_number

    def start(self, children):
        return children[0] if children else None

    def command(self, children):
        return children[0]

    def send(self, children):
        return SendCommand()

    def delete(self, children):
        domain, record_type = children
        return UpdateCommand(
            DeleteAction(
                domain=self._domain(domain),
                record_type=self._record_type(record_type),
            )
        )

    def add(self, children):
        domain, ttl, record_type, *fields = children
        record_type_text = self._record_type(record_type)

        # Fields after the record type decide whether a priority is present
        if len(fields) == 1:
            priority = None
            content = fields[0]
        elif len(fields) == 2:
            priority_token, content = fields
            if not uses_priority(record_type_text):
                raise self._error(
                    f"Record type {record_type_text} does not take a priority",
                    priority_token,
                )
            priority = self._integer(priority_token, "priority")
        else:
            raise self._error(
                "Expected '[priority] content' after the record type, "
                "quote content that contains spaces",
                fields[2],
            )

        return UpdateCommand(
            AddAction(
                domain=self._domain(domain),
                ttl=self._integer(ttl, "TTL"),
                record_type=record_type_text,
                priority=priority,
                content=self._content(content),
            )
        )

    def _domain(self, token: Token) -> str:
        domain = str(token)
        if not is_absolute_name(domain):
            logger.warning(
                f"Line {self.line_number}: domain '{domain}' is not dot-terminated"
            )
        return domain

    def _record_type(self, token: Token) -> str:
        try:
            return normalize_record_type(str(token))
        except ValueError as e:
            raise self._error(str(e), token)

    def _integer(self, token: Token, field: str) -> int:
        if not _INTEGER.fullmatch(str(token)):
            raise self._error(f"{field} must be a non-negative integer", token)
        return int(token)

    def _content(self, token: Token) -> str:
        if token.type == "QUOTED":
            return _ESCAPE.sub(r"\1", token[1:-1])
        return str(token)

    def _error(self, message: str, token: Token) -> ParseError:
        return ParseError(message, self.line_number, token.column or 1, self.line)


def parse_line(line: str, line_number: int = 1) -> Optional[Command]:
    """
    Parse a single line of nsupdate text.

    Args:
        line: One line of input, without its line separator
        line_number: 1-based line number used in error messages

    Returns:
        The parsed command, or None for blank and comment lines

    Raises:
        ParseError: If the line matches no production or a field is invalid
    """
    try:
        tree = _parser.parse(line)
    except UnexpectedInput as e:
        raise ParseError(_describe(e), line_number, _column(e, line), line) from None

    try:
        return _CommandBuilder(line, line_number).transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from None
        raise


def _describe(error: UnexpectedInput) -> str:
    if isinstance(error, UnexpectedEOF):
        return "Unexpected end of line"
    if isinstance(error, UnexpectedToken):
        if error.token.type == "$END":
            return "Unexpected end of line"
        return f"Unexpected token '{error.token}'"
    if isinstance(error, UnexpectedCharacters):
        return "Unrecognized command"
    return "Invalid syntax"


def _column(error: UnexpectedInput, line: str) -> int:
    column = getattr(error, "column", -1)
    at_end = isinstance(error, UnexpectedToken) and error.token.type == "$END"
    if at_end or not isinstance(column, int) or column < 1:
        return len(line.rstrip()) + 1
    return column
