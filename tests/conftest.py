from pathlib import Path
from typing import Any

import pytest

from sqlrelate.parameters.types import SqlType

here = Path(__file__).parent
root_path = here.parent


class RecordingStatement:
    """Positional statement that records every write in order."""

    def __init__(self) -> None:
        self.values: dict[int, Any] = {}
        self.nulls: dict[int, SqlType] = {}
        self.writes: list[tuple[int, Any]] = []

    def set_value(self, position: int, value: Any) -> None:
        self.values[position] = value
        self.nulls.pop(position, None)
        self.writes.append((position, value))

    def set_null(self, position: int, sql_type: SqlType) -> None:
        self.values.pop(position, None)
        self.nulls[position] = sql_type
        self.writes.append((position, None))


@pytest.fixture
def statement() -> RecordingStatement:
    return RecordingStatement()
