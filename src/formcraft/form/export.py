import csv
import io
import re
from typing import List, Tuple

from .answer import render_answer
from .exceptions import NoDataToExportError
from .store import FormStore


def response_table(store: FormStore, form_id) -> Tuple[List[str], List[List[str]]]:
    ''' Field labels as header, one row of rendered answers per response. '''
    form = store.fetch_form(form_id)
    headers = [field.label for field in form.fields]
    rows = [
        [render_answer(response.get_answer(field.id)) for field in form.fields]
        for response in store.list_responses(form_id)
    ]
    return headers, rows


RX_WHITESPACE = re.compile(r"\s+")


def export_filename(title: str) -> str:
    return RX_WHITESPACE.sub("_", title) + "_responses.csv"


def export_csv(store: FormStore, form_id) -> Tuple[str, str]:
    form = store.fetch_form(form_id)
    headers, rows = response_table(store, form_id)
    if not rows:
        raise NoDataToExportError(form_id)

    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(headers)
    writer.writerows(rows)
    return export_filename(form.title), buffer.getvalue()
