from __future__ import annotations

import io
from typing import Iterable, Mapping

import pandas as pd
from flask import send_file

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def rows_to_xlsx(rows: Iterable[Mapping], *, sheet_name: str) -> io.BytesIO:
    df = pd.DataFrame(list(rows))
    output = io.BytesIO()
    # Written in memory; nothing touches the disk
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    output.seek(0)
    return output


def send_xlsx(rows: Iterable[Mapping], *, sheet_name: str, download_name: str):
    return send_file(
        rows_to_xlsx(rows, sheet_name=sheet_name),
        download_name=download_name,
        as_attachment=True,
        mimetype=XLSX_MIMETYPE,
    )
