"""Tab-delimited record reading and writing.

Input columns are matched by header name. Values are kept as strings exactly as
they appear in the file (postal codes keep their leading zeros, whitespace is
not stripped).
"""
from dataclasses import dataclass, astuple
from typing import Any, Dict, Iterator, TextIO
import csv

from .errors import MalformedRecordError


INPUT_COLUMNS = ["nom", "adresse", "cp", "ville", "contact"]
OUTPUT_COLUMNS = INPUT_COLUMNS + ["adresse_valide"]

DELIMITER = "\t"

# DictReader stores surplus fields of a long row under this key
_EXTRA_KEY = "__extra__"


@dataclass(frozen=True)
class InputRecord:
    name: str
    street_address: str
    postal_code: str
    city: str
    contact: str


@dataclass(frozen=True)
class OutputRecord:
    name: str
    street_address: str
    postal_code: str
    city: str
    contact: str
    address_valid: bool

    @classmethod
    def from_input(cls, record: InputRecord, address_valid: bool) -> "OutputRecord":
        return cls(*astuple(record), address_valid=address_valid)

    def to_row(self) -> list[str]:
        values = list(astuple(self))
        values[-1] = "true" if self.address_valid else "false"
        return values


def record_from_row(row: Dict[str, Any], line: int | None = None) -> InputRecord:
    """Build an InputRecord from a header-keyed row.

    Raises MalformedRecordError when a required column is missing from the
    header, a value is absent (short row) or the row carries more fields than
    the header declares.
    """
    if row.get(_EXTRA_KEY):
        raise MalformedRecordError("more fields than header columns", line)
    values = []
    for col in INPUT_COLUMNS:
        if col not in row:
            raise MalformedRecordError(f"missing column {col!r}", line)
        val = row[col]
        if val is None:
            raise MalformedRecordError(f"no value for column {col!r}", line)
        values.append(val)
    return InputRecord(*values)


def read_records(source: TextIO, limit: int) -> Iterator[InputRecord]:
    """Yield the first `limit` records of a tab-delimited stream, in order.

    Rows past the limit are never parsed.
    """
    if limit <= 0:
        return
    reader = csv.DictReader(source, delimiter=DELIMITER, restkey=_EXTRA_KEY)
    # a stream not opened with utf-8-sig still carries the BOM on the first header name
    if reader.fieldnames and reader.fieldnames[0].startswith("\ufeff"):
        reader.fieldnames[0] = reader.fieldnames[0][1:]
    for index, row in enumerate(reader):
        # reader.line_num counts physical lines, header included
        yield record_from_row(row, line=reader.line_num)
        if index + 1 >= limit:
            break


def open_writer(sink: TextIO):
    return csv.writer(sink, delimiter=DELIMITER, lineterminator="\n")


def write_header(writer) -> None:
    writer.writerow(OUTPUT_COLUMNS)


def write_record(writer, record: OutputRecord) -> None:
    writer.writerow(record.to_row())
