"""Streaming reader for XML documentation files.

The translator writes one ``<member name="...">`` element per documented
symbol inside ``<doc><members>``. This module walks the file with expat
(the parser underneath ``xml.etree``) and yields each member's signature
together with the exact text between its start and end tags.

The body is sliced from the raw input rather than re-serialized, so nested
tags, entity references, attribute quoting and carriage returns come back
exactly as the translator wrote them.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator
from xml.parsers import expat

from .errors import MalformedInputError

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 65536

# Leading bytes of UTF-16/UTF-32 documents, with and without a byte order mark.
# Member bodies are sliced at single-byte '>' positions, so only
# ASCII-compatible encodings can be read.
_WIDE_PREFIXES = (
    (b"\x00\x00\xfe\xff", "UTF-32"),
    (b"\xff\xfe\x00\x00", "UTF-32"),
    (b"\x00\x00\x00<", "UTF-32"),
    (b"<\x00\x00\x00", "UTF-32"),
    (b"\xfe\xff", "UTF-16"),
    (b"\xff\xfe", "UTF-16"),
    (b"\x00<", "UTF-16"),
    (b"<\x00", "UTF-16"),
)


@dataclass(frozen=True)
class DocumentationRecord:
    """One documented symbol as written by the translator."""

    signature: str
    body: str


@dataclass
class _OpenMember:
    signature: str | None
    depth: int
    body_start: int
    self_closing: bool


def _start_tag_end(data: bytearray, start: int) -> int:
    """Return the index just past the '>' that closes the tag at ``start``."""
    quote = None
    for index in range(start, len(data)):
        byte = data[index]
        if quote is not None:
            if byte == quote:
                quote = None
        elif byte in (0x22, 0x27):  # " '
            quote = byte
        elif byte == 0x3E:  # >
            return index + 1
    raise ValueError(f"start tag at byte {start} is not closed")


def _ascii_compatible(encoding: str) -> bool:
    markup = "<>/=\"'"
    try:
        return markup.encode(encoding) == markup.encode("ascii")
    except (LookupError, UnicodeError):
        return False


class _MemberScanner:
    """Expat callbacks that cut member bodies out of the raw byte stream.

    ``_buffer`` holds input from absolute position ``_offset`` onward. Bytes
    before the last reported event (or before the open member's body) are
    dropped after every chunk.
    """

    def __init__(self, member_tag: str, signature_attribute: str, source_name: str):
        self._member_tag = member_tag
        self._signature_attribute = signature_attribute
        self._source_name = source_name
        self._encoding = "utf-8"
        self._buffer = bytearray()
        self._offset = 0
        self._last_event = 0
        self._depth = 0
        self._member: _OpenMember | None = None
        self._ready: deque[DocumentationRecord] = deque()
        self._sniffed = False

        self._parser = expat.ParserCreate()
        self._parser.XmlDeclHandler = self._xml_decl
        self._parser.StartElementHandler = self._start
        self._parser.EndElementHandler = self._end
        self._parser.CharacterDataHandler = self._mark
        self._parser.CommentHandler = self._mark

    def feed(self, data: bytes, final: bool = False) -> None:
        self._buffer += data
        if not self._sniffed:
            # hold the first bytes back until the encoding can be told apart
            if len(self._buffer) < 4 and not final:
                return
            self._sniff(bytes(self._buffer[:4]))
            data = bytes(self._buffer)
        try:
            self._parser.Parse(data, final)
        except expat.ExpatError as exc:
            raise MalformedInputError(
                self._source_name, expat.ErrorString(exc.code), exc.lineno, exc.offset
            ) from exc
        self._trim()

    def drain(self) -> Iterator[DocumentationRecord]:
        while self._ready:
            yield self._ready.popleft()

    def _unsupported(self, encoding: str) -> MalformedInputError:
        return MalformedInputError(
            self._source_name, f"unsupported encoding {encoding}, expected UTF-8 or another ASCII-compatible encoding"
        )

    def _sniff(self, prefix: bytes) -> None:
        self._sniffed = True
        for marker, encoding in _WIDE_PREFIXES:
            if prefix.startswith(marker):
                raise self._unsupported(encoding)

    def _xml_decl(self, version, encoding, standalone) -> None:
        if not encoding:
            return
        if not _ascii_compatible(encoding):
            raise self._unsupported(encoding)
        self._encoding = encoding

    def _mark(self, *args) -> None:
        self._last_event = self._parser.CurrentByteIndex

    def _start(self, name: str, attributes: dict[str, str]) -> None:
        position = self._parser.CurrentByteIndex
        self._last_event = position
        self._depth += 1
        if self._member is not None or name != self._member_tag:
            return
        body_start = self._offset + _start_tag_end(self._buffer, position - self._offset)
        self._member = _OpenMember(
            signature=attributes.get(self._signature_attribute),
            depth=self._depth,
            body_start=body_start,
            self_closing=self._buffer[body_start - self._offset - 2] == 0x2F,  # /
        )

    def _end(self, name: str) -> None:
        position = self._parser.CurrentByteIndex
        self._last_event = position
        member = self._member
        if member is not None and member.depth == self._depth:
            self._member = None
            if member.signature is None:
                logger.warning(
                    f"Skipping <{self._member_tag}> without a "
                    f"'{self._signature_attribute}' attribute in {self._source_name}"
                )
            else:
                body = "" if member.self_closing else self._text(member.body_start, position)
                self._ready.append(DocumentationRecord(member.signature, body))
        self._depth -= 1

    def _text(self, start: int, end: int) -> str:
        raw = self._buffer[start - self._offset:end - self._offset]
        try:
            return bytes(raw).decode(self._encoding)
        except (LookupError, UnicodeDecodeError) as exc:
            raise MalformedInputError(
                self._source_name, f"member body at byte {start} is not valid {self._encoding}"
            ) from exc

    def _trim(self) -> None:
        keep_from = self._last_event if self._member is None else self._member.body_start
        drop = keep_from - self._offset
        if drop > 0:
            del self._buffer[:drop]
            self._offset = keep_from


class DocumentationReader:
    """
    Forward-only reader of documented-member records.

    Parameters
    ----------
    source : str | Path | BinaryIO
        Path to the documentation file, or an open binary stream. A stream
        supplied by the caller is left open; a path is opened on entry and
        closed on exit.
    member_tag : str, default "member"
        Tag name of the documented-member element.
    signature_attribute : str, default "name"
        Attribute of the member element holding the symbol signature.
    chunk_size : int, default 65536
        Number of bytes fed to the parser per read.

    Examples
    --------
    >>> with DocumentationReader("doxygen_basic_translate.xml") as reader:
    ...     for record in reader:
    ...         print(record.signature)
    M:doxygen_basic_translate.function
    ...
    """

    def __init__(
        self,
        source: str | Path | BinaryIO,
        member_tag: str = "member",
        signature_attribute: str = "name",
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.source = source
        self.member_tag = member_tag
        self.signature_attribute = signature_attribute
        self.chunk_size = chunk_size
        self._stream: BinaryIO | None = None
        self._owns_stream = False
        self._started = False

    @property
    def name(self) -> str:
        if isinstance(self.source, (str, Path)):
            return str(self.source)
        return str(getattr(self.source, "name", "<stream>"))

    def __enter__(self) -> DocumentationReader:
        if isinstance(self.source, (str, Path)):
            path = Path(self.source)
            if not path.exists():
                raise FileNotFoundError(f"Documentation file not found: {path}")
            self._stream = open(path, "rb")
            self._owns_stream = True
        else:
            self._stream = self.source
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._stream is not None and self._owns_stream:
            self._stream.close()
        self._stream = None
        self._owns_stream = False

    def __iter__(self) -> Iterator[DocumentationRecord]:
        if self._stream is None:
            raise RuntimeError("DocumentationReader must be entered with 'with' before iterating")
        if self._started:
            raise RuntimeError(f"{self.name} has already been read; reopen it to read again")
        self._started = True
        return self._records(self._stream)

    def _records(self, stream: BinaryIO) -> Iterator[DocumentationRecord]:
        scanner = _MemberScanner(self.member_tag, self.signature_attribute, self.name)
        count = 0
        while True:
            chunk = stream.read(self.chunk_size)
            scanner.feed(chunk, final=not chunk)
            for record in scanner.drain():
                count += 1
                logger.debug(f"Read record {record.signature}")
                yield record
            if not chunk:
                break
        logger.info(f"Read {count} documented members from {self.name}")


def read_records(source: str | Path | BinaryIO, **options) -> Iterator[DocumentationRecord]:
    """
    Yield every documented-member record from ``source``.

    Keyword options are passed to DocumentationReader. The file is closed
    when the generator is exhausted or closed; use DocumentationReader in a
    ``with`` block when iteration may stop early.
    """
    with DocumentationReader(source, **options) as reader:
        yield from reader
