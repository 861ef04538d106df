import pytest

from striker.chart import NUM_COLUMNS, TABLE_SIZE, Chart


def test_chart_insert_and_get_value():
    chart = Chart("Test Chart")
    chart.insert("8", 2, "H")
    chart.insert("8", 3, "S")
    chart.insert("A,7", 4, "D")

    assert chart.get_value("8", 2) == "H"
    assert chart.get_value("8", 3) == "S"
    assert chart.get_value("A,7", 4) == "D"


def test_unset_columns_hold_placeholder():
    chart = Chart("Test Chart")
    chart.insert("8", 2, "H")
    assert chart.get_value("8", 5) == "---"


def test_chart_case_insensitive_keys():
    chart = Chart("Test Chart")
    chart.insert("8", 2, "H")
    chart.insert("a,7", 3, "D")

    assert chart.get_value("8", 2) == "H"
    assert chart.get_value("A,7", 3) == "D"
    assert chart.get_value("a,7", 3) == "D"


def test_values_are_upper_cased():
    chart = Chart("Test Chart")
    chart.insert("12", 4, "y")
    assert chart.get_value("12", 4) == "Y"


def test_chart_get_value_invalid_key_raises():
    chart = Chart("Test Chart")
    with pytest.raises(KeyError, match="Cannot find value in Test Chart for 5 vs 4"):
        chart.get_value("5", 4)


def test_chart_insert_multiple_rows():
    chart = Chart("Multi Row Chart")
    chart.insert("2", 2, "H")
    chart.insert("3", 2, "S")
    chart.insert("4", 2, "D")

    assert chart.get_value("2", 2) == "H"
    assert chart.get_value("3", 2) == "S"
    assert chart.get_value("4", 2) == "D"

    lines = str(chart).splitlines()
    assert lines[2] == " 2 : " + " ---, " * 2 + "   H, " + " ---, " * 9
    assert lines[3].startswith(" 3 : ")
    assert lines[4].startswith(" 4 : ")


def test_row_has_one_entry_per_column():
    chart = Chart("Columns")
    chart.insert("X", 11, "Y")
    row = str(chart).splitlines()[2]
    assert row.count(",") == NUM_COLUMNS
    assert row.endswith("   Y, ")


def test_chart_row_limit():
    chart = Chart("Full")
    for key in range(TABLE_SIZE):
        chart.insert(str(key), 2, "N")
    chart.insert("0", 3, "Y")
    assert chart.get_value("0", 3) == "Y"
    with pytest.raises(ValueError):
        chart.insert("extra", 2, "N")