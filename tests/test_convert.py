import pandas as pd
import pytest

from symbology.convert import convert_frame, convert_option, parse_option
from symbology.errors import NoMatchError
from symbology.options import ContractType


def test_convert_osi_to_schwab() -> None:
    assert convert_option("AAPL  131101C00470000", "osi", "schwab") == "AAPL 11/01/2013 470.00 C"


def test_convert_activity_to_osi() -> None:
    assert convert_option("KO 28MAY21 32.01 C", "activity", "osi") == "KO    210528C00032010"


def test_convert_osi_to_unpadded() -> None:
    assert convert_option("AAPL  131101C00470000", "osi", "osi-unpadded") == "AAPL131101C00470000"


def test_parse_option_dispatches() -> None:
    option = parse_option("AAPL 01NOV13 470.0 P", "activity")

    assert option.contract_type is ContractType.PUT


def test_unknown_formats_raise_value_error() -> None:
    with pytest.raises(ValueError):
        parse_option("AAPL  131101C00470000", "bloomberg")
    with pytest.raises(ValueError):
        convert_option("AAPL  131101C00470000", "osi", "bloomberg")


def test_parse_errors_propagate() -> None:
    with pytest.raises(NoMatchError):
        convert_option("not a symbol", "osi", "schwab")


def test_convert_frame_keeps_failed_rows() -> None:
    df = pd.DataFrame(
        {
            "symbol": ["AAPL  131101C00470000", "garbage", "AAPL  130431C00470000"],
            "qty": ["1", "2", "3"],
        }
    )

    result = convert_frame(df, "symbol", "osi", "schwab", strict_calendar=True)

    assert list(result["qty"]) == ["1", "2", "3"]
    assert result.loc[0, "converted"] == "AAPL 11/01/2013 470.00 C"
    assert result.loc[0, "error"] == ""
    assert result.loc[1, "converted"] == ""
    assert "OSI" in result.loc[1, "error"]
    assert result.loc[2, "converted"] == ""
    assert "does not exist" in result.loc[2, "error"]
    assert "converted" not in df.columns
