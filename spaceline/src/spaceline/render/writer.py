"""Output sinks for generated ticket tables."""

import sys
import time
from pathlib import Path
from typing import List, Optional, TextIO
import pandas as pd
from spaceline.ir.ticket import TicketRow
from spaceline.generation.error_logging import log_error
from spaceline.config.logging import get_logger

logger = get_logger(__name__)

COLUMNS = ["carrier", "duration_days", "trip_type", "price"]


def write_text(text: str, stream: Optional[TextIO] = None) -> None:
    """
    Write a rendered table to a text stream.

    Args:
        text: Rendered table
        stream: Destination (defaults to sys.stdout at call time)
    """
    stream = stream or sys.stdout
    stream.write(text)
    stream.flush()


def rows_to_frame(rows: List[TicketRow]) -> pd.DataFrame:
    """Convert rows to a DataFrame with one column per TicketRow field."""
    return pd.DataFrame([row.model_dump() for row in rows], columns=COLUMNS)


def write_csv(rows: List[TicketRow], path: Path) -> None:
    """
    Write rows to a CSV file.

    Args:
        rows: Rows to write
        path: Output file path (parent directories are created)
    """
    write_start = time.time()
    path = Path(path)
    df = rows_to_frame(rows)

    logger.debug(f"Writing {len(df)} ticket row(s) to {path}")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(path, index=False)
    except Exception as e:
        log_error(
            error=e,
            context={
                'rows': len(df),
                'file_path': str(path),
                'parent_dir_exists': path.parent.exists(),
            },
            operation="writing CSV file",
        )
        raise

    logger.info(f"Wrote {len(df):,} rows to {path} in {time.time() - write_start:.3f}s")
