import re
import logging
from pathlib import Path
from typing import Dict, Optional

import numpy as np
import pandas as pd

from ..exceptions import TableLoadError


def valid_column_name(header: str) -> str:
    """'r/R' -> 'r_R', 't/c' -> 't_c'. Leading digits get an 'x' prefix."""
    name = re.sub(r'\W', '_', header.strip())
    if not name or name[0].isdigit():
        name = 'x' + name
    return name


def load_table(path: Path) -> Optional[Dict[str, np.ndarray]]:
    """
    Reads a whitespace-delimited numeric table whose first row is the header.

    Returns:
        {column name: values}, or None if the file does not exist.

    Raises:
        TableLoadError: the file exists but is not a numeric table.
    """
    path = Path(path)
    if not path.exists():
        logging.warning(f"File {path} not found")
        return None

    try:
        data = pd.read_csv(path, sep=r'\s+', header=0)
        data = data.astype(float)
    except (ValueError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise TableLoadError(f"Cannot parse table {path}: {e}") from e

    return {
        valid_column_name(str(col)): data[col].to_numpy(dtype=float)
        for col in data.columns
    }
