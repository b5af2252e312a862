import pytest


@pytest.mark.parametrize(
    "symbol_name",
    [
        "ArtworkRecord",
        "Dimensions",
        "GeoLocation",
        "DepictedPerson",
        "Statistics",
        "StatisticsConfig",
        "StatisticsPipeline",
        "Stats",
        "categorize_color",
        "haversine_km",
        "normalize_gender",
    ],
)
def test_import_symbol(symbol_name):
    """Test that each key symbol can be imported from smk_stats."""
    module = __import__("smk_stats", fromlist=[symbol_name])
    symbol = getattr(module, symbol_name, None)
    assert symbol is not None, f"{symbol_name} could not be imported"


def test_import_failure():
    """Test that importing a non-existent symbol raises ImportError or AttributeError."""
    with pytest.raises((ImportError, AttributeError)):
        from smk_stats import NotARealClass
