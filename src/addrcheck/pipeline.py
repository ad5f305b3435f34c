"""Record-by-record verification pipeline.

Each record is fully handled (lookup, pacing pause, write) before the next one
is read. A malformed row aborts the run; rows already written stay in the
output.
"""
from functools import partial
from pathlib import Path
from typing import Callable, TextIO, Tuple
import logging

from .client import verify_address
from .config import Settings, load_settings
from .pacing import FixedIntervalPacer
from .progress import ProgressReporter
from .records import OutputRecord, open_writer, read_records, write_header, write_record


logger = logging.getLogger("addrcheck.pipeline")

Verifier = Callable[[str, str, str], bool]


def output_path_for(input_path: str) -> str:
    """`dir/name.ext` -> `dir/name_chk.ext`."""
    p = Path(input_path)
    return str(p.with_name(f"{p.stem}_chk{p.suffix}"))


def run(
    source: TextIO,
    sink: TextIO,
    limit: int,
    verify: Verifier = verify_address,
    pacer: FixedIntervalPacer | None = None,
    progress: ProgressReporter | None = None,
) -> int:
    """Check the first `limit` records of `source` and write them to `sink`.

    The header is written by the caller. Returns the number of records written.
    """
    if limit < 0:
        raise ValueError("limit must be a non-negative integer")

    writer = open_writer(sink)
    written = 0
    for record in read_records(source, limit):
        ok = verify(record.street_address, record.postal_code, record.city)
        if pacer is not None:
            pacer.wait()

        write_record(writer, OutputRecord.from_input(record, ok))
        written += 1
        logger.debug("row %d %s -> %s", written, record.name, ok)
        if progress is not None:
            progress.advance()
    return written


def check_file(
    input_path: str,
    limit: int,
    settings: Settings | None = None,
    verify: Verifier | None = None,
    pacer: FixedIntervalPacer | None = None,
    show_progress: bool = True,
) -> Tuple[str, int]:
    """Check `input_path` and write `<stem>_chk<ext>` next to it.

    Returns (output_path, rows_written).
    """
    settings = settings or load_settings()
    if verify is None:
        verify = partial(verify_address, settings=settings)
    if pacer is None:
        pacer = FixedIntervalPacer(settings.pacing_interval)

    output_path = output_path_for(input_path)
    logger.info("Checking up to %d rows of %s", limit, input_path)

    with open(input_path, newline="", encoding="utf-8-sig") as src, \
            open(output_path, "w", newline="", encoding="utf-8") as dst:
        write_header(open_writer(dst))
        with ProgressReporter(limit, enabled=show_progress) as progress:
            written = run(src, dst, limit, verify=verify, pacer=pacer, progress=progress)
            progress.finish()

    logger.info("Wrote %d rows to %s", written, output_path)
    return output_path, written
