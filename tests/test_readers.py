import pandas as pd
import pytest

from labfit import InvalidErrorLength, load, read_file, read_to_measures


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text(
        "t\tdt\tx\tdx\n"
        "1,0\t0,1\t5\t0,5\n"
        "\n"
        "2,0\t0,2\t6\t0,6\n"
        "3,0\t0,3\n",
        encoding="utf-8",
    )
    return path


def test_read_file_columns(data_file):
    columns = read_file(data_file, headers=1)
    assert columns[0] == [1.0, 2.0, 3.0]
    assert columns[2] == [5.0, 6.0, None]


def test_read_file_rows(data_file):
    rows = read_file(data_file, headers=1, by_columns=False)
    assert rows[0] == [1.0, 0.1, 5.0, 0.5]
    assert rows[2] == [3.0, 0.3, None, None]


def test_read_to_measures(data_file):
    time, position = read_to_measures(data_file, headers=1)
    assert time.values.tolist() == [1.0, 2.0, 3.0]
    assert time.errors.tolist() == pytest.approx([0.1, 0.2, 0.3])
    assert position.values.tolist() == [5.0, 6.0]


def test_load_picks_reader_by_extension(data_file):
    assert len(load(data_file, headers=1)) == 2


def test_csv_with_dot_decimal(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("1.5;0.2\n2.5;0.3\n", encoding="utf-8")
    (m,) = read_to_measures(path, separator=";", decimal=".")
    assert m.values.tolist() == [1.5, 2.5]


def test_error_column_of_wrong_length(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("1\t0,1\n2\t0,2\n3\n", encoding="utf-8")
    with pytest.raises(InvalidErrorLength):
        read_to_measures(path)


def test_non_numeric_cell(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("1\tabc\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Non number"):
        read_file(path)


def test_unknown_extension(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError, match="No reader"):
        read_file(path)


def test_xlsx(tmp_path):
    path = tmp_path / "data.xlsx"
    pd.DataFrame([[1.0, 0.1], [2.0, 0.2]]).to_excel(path, header=False, index=False)
    (m,) = load(path)
    assert m.values.tolist() == [1.0, 2.0]
    assert m.errors.tolist() == pytest.approx([0.1, 0.2])
