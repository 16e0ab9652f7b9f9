"""
Part Table - converts between pandas DataFrames and gateway payloads.

Used by the Streamlit UI to edit parts as a grid and to flatten gateway
responses into exportable tables.
"""
from typing import Any

import pandas as pd


SUMMARY_COLUMNS = ['markupAmount', 'discountAmount', 'finalPrice', 'manufacturable']


def _is_blank(value: Any) -> bool:
    if isinstance(value, str):
        return not value.strip()
    return pd.api.types.is_scalar(value) and pd.isna(value)


def _to_python(value: Any) -> Any:
    """Unwrap numpy scalars so values serialize as plain JSON."""
    return value.item() if hasattr(value, 'item') else value


def parts_from_frame(df: pd.DataFrame) -> list[dict]:
    """
    Convert grid rows to part records.

    Empty cells are dropped rather than sent as null, and fully empty rows
    are skipped.
    """
    parts = []
    for _, row in df.iterrows():
        record = {
            str(col): _to_python(val)
            for col, val in row.items()
            if not _is_blank(val)
        }
        if record:
            parts.append(record)
    return parts


def pricing_results_frame(results: list[dict]) -> pd.DataFrame:
    """Flatten a /rules response into one row per part: input fields then summary."""
    rows = []
    for result in results:
        row = dict(result.get('input') or {})
        summary = result.get('summary') or {}
        for col in SUMMARY_COLUMNS:
            row[col] = summary.get(col)
        rows.append(row)
    return pd.DataFrame(rows)


def flow_results_frame(results: list[Any]) -> pd.DataFrame:
    """
    Flatten a /flow response.

    Input fields become `input.<field>` columns; remaining payload fields are
    kept as-is. Nested list results (flows returning several records per part)
    contribute one row per record.
    """
    records = []
    for result in results:
        if isinstance(result, list):
            records.extend(result)
        else:
            records.append(result)

    rows = []
    for record in records:
        if not isinstance(record, dict):
            rows.append({'value': record})
            continue
        row = {key: val for key, val in record.items() if key != 'input'}
        for key, val in (record.get('input') or {}).items():
            row[f'input.{key}'] = val
        rows.append(row)
    return pd.DataFrame(rows)
