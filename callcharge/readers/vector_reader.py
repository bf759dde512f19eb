"""Reader for charge test vector tables.

Test vectors are kept in CSV tables, one call per row:

```
num | startTime           | endTime             | isTransform | pay
----|---------------------|---------------------|-------------|-----
1   | 2023-01-01 00:00:00 | 2023-01-01 00:10:00 | false       | 0.5
2   | 2023-13-01 00:00:00 | 2023-01-01 00:10:00 | false       | error
```

Columns are matched by position, so tables with translated headers read
the same way. The first row is always treated as the header.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pandas as pd
from pydantic import ValidationError

from callcharge.models.vector import ChargeVector

logger = logging.getLogger(__name__)

VECTOR_COLUMNS = ["num", "start_time", "end_time", "is_transform", "expected_amount"]

TRUE_VALUES = {"true", "t", "yes", "y", "1"}
FALSE_VALUES = {"false", "f", "no", "n", "0", ""}
ERROR_VALUES = {"error", "exception", "invalid", "-"}


def parse_bool(value: Any) -> bool:
    """Parse a table cell into a boolean.

    Raises:
        ValueError: If the cell is not a recognised boolean

    Example:
        >>> parse_bool("TRUE")
        True
        >>> parse_bool("0")
        False
    """
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"Cannot interpret {value!r} as a boolean")


def parse_expected_amount(value: Any) -> Optional[float]:
    """Parse the expected amount cell.

    Returns:
        The amount, or None when the row expects an error

    Raises:
        ValueError: If the cell is neither a number nor an error marker
    """
    text = str(value).strip()
    if text.lower() in ERROR_VALUES:
        return None
    return float(text)


class ChargeVectorReader:
    """Reader for CSV tables of charge test vectors.

    Malformed rows are skipped and recorded in ``skipped_rows`` with the
    reason.

    Example:
        >>> reader = ChargeVectorReader()
        >>> vectors = reader.read_csv("vectors.csv")
        >>> vectors[0].expected_amount
        0.5
    """

    def __init__(self, encoding: str = "utf-8"):
        """Initialize the reader.

        Args:
            encoding: Text encoding of the CSV files
        """
        self.encoding = encoding
        self.skipped_rows: List[Dict[str, Any]] = []

    def read_csv(self, path: Union[str, Path]) -> List[ChargeVector]:
        """Read every valid vector from a CSV table.

        Args:
            path: Path to the CSV file

        Returns:
            Vectors in table order

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the table has fewer than five columns
        """
        self.skipped_rows = []

        df = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            encoding=self.encoding,
        )
        return self.read_dataframe(df, source=str(path))

    def read_dataframe(
        self, df: pd.DataFrame, source: str = "<dataframe>"
    ) -> List[ChargeVector]:
        """Convert a raw table into vectors.

        Args:
            df: Table with at least five columns in vector order
            source: Name used in log messages

        Returns:
            Vectors in table order

        Raises:
            ValueError: If the table has fewer than five columns
        """
        if len(df.columns) < len(VECTOR_COLUMNS):
            raise ValueError(
                f"Vector table {source} needs {len(VECTOR_COLUMNS)} columns "
                f"({', '.join(VECTOR_COLUMNS)}), found {len(df.columns)}"
            )

        df = df.iloc[:, : len(VECTOR_COLUMNS)].copy()
        df.columns = VECTOR_COLUMNS

        vectors = []
        for row_number, row in enumerate(df.to_dict(orient="records"), start=2):
            vector = self._parse_row(row, row_number)
            if vector is not None:
                vectors.append(vector)

        logger.info(
            f"Loaded {len(vectors)} vectors from {source} "
            f"({len(self.skipped_rows)} skipped)"
        )
        return vectors

    def _parse_row(
        self, row: Dict[str, Any], row_number: int
    ) -> Optional[ChargeVector]:
        """Parse a single table row.

        Args:
            row: Dictionary containing row data
            row_number: 1-based line number in the source table

        Returns:
            ChargeVector if row is valid, None if row should be skipped
        """
        # Skip blank lines
        if not any(str(value).strip() for value in row.values()):
            return None

        try:
            return ChargeVector(
                num=int(str(row["num"]).strip()),
                start_time=str(row["start_time"]),
                end_time=str(row["end_time"]),
                is_transform=parse_bool(row["is_transform"]),
                expected_amount=parse_expected_amount(row["expected_amount"]),
            )
        except (ValidationError, ValueError, TypeError) as e:
            logger.warning(f"Skipping vector row {row_number}: {e}")
            self.skipped_rows.append({"row": row_number, "reason": str(e)})
            return None
