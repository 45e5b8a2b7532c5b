# =============================================================================
# iss_core/schedule.py  -  ISS Crew Schedule Reader & Filters
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the ISS crew schedule from a CSV file that ships with the package
#   and filters it by day and by crew member.
#
# THE SEPARATION OF "LOAD" AND "FILTER":
#   - load_schedule() does the I/O: it parses the whole file into a list of
#     ScheduleRecord, in file order, every call.  Nothing is cached.
#   - filter_schedule() is pure: records in, records out, never raises.
#   The tool layer composes them; tests exercise each on its own.
#
# FILTER SEMANTICS:
#   - day:  exact match, case-insensitive ("monday" == "Monday").
#   - name: substring match, case-insensitive ("jane" matches "Jane Doe").
#   Both optional; when both are given they are ANDed.  A falsy filter
#   (None or "") means "no filter".  No limit: every match is returned.
# =============================================================================

import csv
import logging
from pathlib import Path
from typing import Iterable, Optional

from iss_core.errors import ScheduleFileNotFoundError, ScheduleParseError
from iss_core.models import SCHEDULE_COLUMNS, ScheduleRecord

logger = logging.getLogger(__name__)

DEFAULT_SCHEDULE_PATH = Path(__file__).parent / "data" / "iss_schedule.csv"


def load_schedule(path: Optional[Path] = None) -> list[ScheduleRecord]:
    """Parse the whole schedule CSV into records, preserving file order.

    Args:
        path: CSV file to read.  Defaults to the packaged iss_schedule.csv.

    Returns:
        Every row of the file as a ScheduleRecord.

    Raises:
        ScheduleFileNotFoundError: If the file does not exist.
        ScheduleParseError: If the header lacks a required column or a row
            has fewer cells than the header.  One bad row fails the read.
    """
    csv_path = Path(path) if path is not None else DEFAULT_SCHEDULE_PATH
    if not csv_path.is_file():
        raise ScheduleFileNotFoundError(f"Schedule file not found: {csv_path}")

    # utf-8-sig: spreadsheet exports often start with a BOM, which would
    # otherwise end up glued to the "Date" header.
    with csv_path.open(newline="", encoding="utf-8-sig") as handle:
        reader = csv.DictReader(handle)
        header = reader.fieldnames
        if not header:
            raise ScheduleParseError(f"Schedule file is empty: {csv_path.name}")

        missing = [column for column in SCHEDULE_COLUMNS if column not in header]
        if missing:
            raise ScheduleParseError(
                f"Schedule file {csv_path.name} is missing columns: {', '.join(missing)}"
            )

        records = []
        for row in reader:
            # DictReader fills absent trailing cells with None.
            short = [column for column in SCHEDULE_COLUMNS if row.get(column) is None]
            if short:
                raise ScheduleParseError(
                    f"Malformed row at line {reader.line_num} of {csv_path.name}: "
                    f"missing {', '.join(short)}"
                )
            records.append(ScheduleRecord.from_row(row))

    logger.debug("Loaded %d schedule records from %s", len(records), csv_path)
    return records


def filter_schedule(
    records: Iterable[ScheduleRecord],
    day: Optional[str] = None,
    name: Optional[str] = None,
) -> list[ScheduleRecord]:
    """Filter records by day (exact) and crew member (substring).

    Both comparisons ignore case.  Order of the input is preserved.
    """
    filtered = list(records)

    if day:
        wanted_day = day.lower()
        filtered = [r for r in filtered if r.day.lower() == wanted_day]

    if name:
        wanted_name = name.lower()
        filtered = [r for r in filtered if wanted_name in r.crew_member.lower()]

    return filtered
