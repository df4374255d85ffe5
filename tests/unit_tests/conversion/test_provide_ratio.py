import pytest
from kitchen_converter.conversion.provide_ratio import SystemRatioProvider
from kitchen_converter.conversion.unit_table import convert_same_category
from kitchen_converter.measurement.exceptions import RatioConfigError
from kitchen_converter.measurement.units import MeasurementSystem, VolumeUnit
from omegaconf import OmegaConf


class TestSystemRatioProvider:
    @staticmethod
    @pytest.mark.parametrize(
        "from_unit,to_unit,system,expected_ratio",
        [
            (VolumeUnit.cup, VolumeUnit.milliliter, "UK_IMPERIAL", 284.0),
            (VolumeUnit.cup, VolumeUnit.milliliter, "AU_NZ", 250.0),
            (VolumeUnit.tablespoon, VolumeUnit.teaspoon, "AU_NZ", 4.0),
            (
                VolumeUnit.liter,
                VolumeUnit.cup,
                MeasurementSystem.UK_METRIC,
                float(f"{1000 / 240:.12g}"),
            ),
            (
                VolumeUnit.teaspoon,
                VolumeUnit.cup,
                "US",
                float(f"{4.93 / 236.6:.12g}"),
            ),
        ],
    )
    def test_get_ratio(
        ratio_provider, from_unit, to_unit, system, expected_ratio
    ):
        assert (
            ratio_provider.get_ratio(from_unit, to_unit, system)
            == expected_ratio
        )

    @staticmethod
    @pytest.mark.parametrize(
        "from_unit,to_unit,system",
        [
            (VolumeUnit.cup, VolumeUnit.cup, "US"),
            (VolumeUnit.pint, VolumeUnit.cup, "UK_METRIC"),
            (VolumeUnit.cup, VolumeUnit.liter, "MARS"),
        ],
    )
    def test_get_ratio_returns_none_when_not_stored(
        ratio_provider, from_unit, to_unit, system
    ):
        assert ratio_provider.get_ratio(from_unit, to_unit, system) is None

    @staticmethod
    def test_ratio_table_is_read_only(ratio_provider):
        with pytest.raises(TypeError):
            ratio_provider.ratio_table[
                (MeasurementSystem.US, VolumeUnit.cup, VolumeUnit.liter)
            ] = 1.0

    @staticmethod
    def test_convert_same_category_with_system_ratio(
        ratio_provider, unit_table
    ):
        assert (
            convert_same_category(
                1,
                "cup",
                "ml",
                unit_table,
                ratio_provider=ratio_provider,
                system="UK_IMPERIAL",
            )
            == 284.0
        )

    @staticmethod
    @pytest.mark.parametrize(
        "value,from_unit,to_unit,system,expected_value",
        [
            (1000, "ml", "gallon", "US", 1000 / 3785),
            (1000, "ml", "gallon", "UK_IMPERIAL", 1000 / 4546),
            (1, "gallon", "tsp", "US", 3785 / 4.93),
            (1, "tsp", "liter", "AU_NZ", 5 / 1000),
        ],
    )
    def test_convert_same_category_keeps_small_ratio_precision(
        ratio_provider,
        unit_table,
        value,
        from_unit,
        to_unit,
        system,
        expected_value,
    ):
        assert convert_same_category(
            value,
            from_unit,
            to_unit,
            unit_table,
            ratio_provider=ratio_provider,
            system=system,
        ) == pytest.approx(expected_value, rel=1e-9)

    @staticmethod
    @pytest.mark.parametrize("system", list(MeasurementSystem))
    def test_convert_same_category_round_trip_with_system_ratio(
        ratio_provider, unit_table, system
    ):
        for from_unit in VolumeUnit:
            for to_unit in VolumeUnit:
                converted = convert_same_category(
                    7.5,
                    from_unit,
                    to_unit,
                    unit_table,
                    ratio_provider=ratio_provider,
                    system=system,
                )
                back = convert_same_category(
                    converted,
                    to_unit,
                    from_unit,
                    unit_table,
                    ratio_provider=ratio_provider,
                    system=system,
                )
                assert back == pytest.approx(7.5, rel=1e-6)

    @staticmethod
    @pytest.mark.parametrize(
        "systems,expected_error",
        [
            (
                {"MARS": {"cup": 1}},
                "[ratio config error] unknown measurement system MARS",
            ),
            (
                {"US": {"bucket": 1}},
                "[ratio config error] US has unknown unit bucket",
            ),
            ({"US": {"cup": 0}}, "[ratio config error] US cup=0"),
        ],
    )
    def test_build_ratio_table_raises_for_bad_config(systems, expected_error):
        config = OmegaConf.create(
            {"significant_digits": 12, "systems": systems}
        )
        with pytest.raises(RatioConfigError) as error:
            SystemRatioProvider(config)
        assert str(error.value) == expected_error
