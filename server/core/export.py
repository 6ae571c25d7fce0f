# server/core/export.py

import csv
import io
from datetime import datetime
from typing import Iterable, Iterator
from urllib.parse import quote


CSV_HEADER = "Name,Email,Company Code,Core Values,Date Submitted\n"


def format_submitted_at(value: datetime) -> str:
    """
    Short US date-time, e.g. "Oct 17, 2026, 02:30 PM".
    """
    return f"{value.strftime('%b')} {value.day}, {value.year}, {value.strftime('%I:%M %p')}"


def format_core_values(core_values) -> str:
    if isinstance(core_values, list):
        return ", ".join(str(v) for v in core_values)
    return "No values"


def submission_row(submission) -> list[str]:
    return [
        submission.name or "",
        submission.email or "",
        submission.company_code or "",
        format_core_values(submission.core_values),
        format_submitted_at(submission.created_at),
    ]


def iter_submissions_csv(submissions: Iterable) -> Iterator[str]:
    yield CSV_HEADER
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for submission in submissions:
        writer.writerow(submission_row(submission))
        yield buffer.getvalue()
        buffer.seek(0)
        buffer.truncate(0)


def export_filename(company_code: str | None) -> str:
    return f"submissions_{company_code}.csv" if company_code else "submissions.csv"


def content_disposition(filename: str) -> str:
    """
    Attachment header that survives any company code.
    Non-ASCII or quote characters get an ASCII fallback plus an RFC 5987 `filename*`.
    """
    fallback = "".join(c if c.isascii() and c.isprintable() and c not in '"\\' else "_" for c in filename)
    if fallback == filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"
