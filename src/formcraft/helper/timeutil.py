import iso8601
from datetime import date, datetime, UTC


def timestamp():
    return datetime.now(UTC)


def parse_iso_date(dstr):
    ''' Accepts `date`, `datetime` or an ISO-8601 string and returns a `date`. '''
    if dstr is None:
        return None

    if isinstance(dstr, datetime):
        return dstr.date()

    if isinstance(dstr, date):
        return dstr

    try:
        return iso8601.parse_date(dstr).date()
    except (ValueError, TypeError, iso8601.ParseError):
        raise ValueError("Invalid iso date string: %s [Code 3E1A97]" % dstr)
