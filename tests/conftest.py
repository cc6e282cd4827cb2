import pandas as pd
import pytest

from classilist.domain.entities import ColumnSpec, ColumnType

ENV_VARS = (
    "CLASSILIST_SEPARATOR",
    "CLASSILIST_MISSING",
    "CLASSILIST_QUOTE_MODE",
    "CLASSILIST_DECIMAL_SEPARATOR",
    "CLASSILIST_ENCODING",
    "CLASSILIST_IF_EXISTS",
    "CLASSILIST_INPUT_ENCODING",
)


@pytest.fixture(autouse=True)
def _clean_classilist_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment overrides out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def iris_columns() -> list[ColumnSpec]:
    return [
        ColumnSpec("Sepal.Length", ColumnType.NUMERIC),
        ColumnSpec("Class", ColumnType.TEXT),
        ColumnSpec("Prediction (Class)", ColumnType.TEXT),
        ColumnSpec("P (Class=setosa)", ColumnType.NUMERIC),
    ]


@pytest.fixture
def iris_frame() -> pd.DataFrame:
    """A small scored table as produced by a classifier."""
    return pd.DataFrame(
        {
            "Sepal.Length": [5.1, 7.0, 6.3],
            "Class": ["setosa", "versicolor", "virginica"],
            "Prediction (Class)": ["setosa", "versicolor", "versicolor"],
            "P (Class=setosa)": [0.98, 0.01, 0.0],
            "P (Class=versicolor)": [0.01, 0.95, 0.6],
            "P (Class=virginica)": [0.01, 0.04, 0.4],
        }
    )
