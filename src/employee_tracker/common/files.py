from __future__ import annotations

import io
import warnings

import pandas as pd
from flask import request
from werkzeug.utils import secure_filename

from ..core.exceptions import ValidationError


def read_uploaded_text(field: str = "file") -> tuple[str, str]:
    """Return ``(filename, text)`` of a multipart upload, BOM stripped."""
    upload = request.files.get(field)
    if upload is None or not upload.filename:
        raise ValidationError("No file uploaded")
    filename = secure_filename(upload.filename) or upload.filename
    content = upload.read().decode("utf-8-sig", errors="replace")
    return filename, content


def read_csv_frame(content: str) -> pd.DataFrame:
    """Read CSV text into an all-string frame keyed by the header row.

    Columns are taken by header position: a single trailing empty field is
    ignored, rows carrying extra values are rejected.
    """
    try:
        with warnings.catch_warnings():
            # pandas only warns when extra values would be dropped
            warnings.simplefilter("error", pd.errors.ParserWarning)
            frame = pd.read_csv(
                io.StringIO(content),
                dtype=str,
                keep_default_na=False,
                skipinitialspace=True,
                skip_blank_lines=True,
                index_col=False,
            )
    except (pd.errors.EmptyDataError, pd.errors.ParserError, pd.errors.ParserWarning) as e:
        raise ValidationError(f"Unable to read CSV file: {e}") from None
    frame.columns = [str(c).strip() for c in frame.columns]
    return frame
