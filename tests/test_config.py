import logging

import numpy as np
import pytest

import phq
from phq import config
from phq.core.unit_system import UnitSystem
from phq.core.utils import Precision
from phq.units import Length
from phq.units.registry import static_convert


def test_defaults():
    settings = config.get_settings()
    assert settings.precision is Precision.Double
    assert settings.unit_system is UnitSystem.MetreKilogramSecondKelvin
    assert settings.number_type is float


def test_configure_replaces_settings():
    before = config.get_settings()
    after = config.configure(precision=Precision.Single)
    assert after.precision is Precision.Single
    assert config.get_settings() is after
    assert before.precision is Precision.Double


def test_configure_accepts_spellings():
    settings = config.configure(precision="single", unit_system="FPS")
    assert settings.precision is Precision.Single
    assert settings.unit_system is UnitSystem.FootPoundSecondRankine


def test_configure_rejects_unknown_names():
    with pytest.raises(TypeError):
        config.configure(colour="blue")


@pytest.mark.parametrize("changes", [
    {"precision": 3},
    {"precision": "quad"},
    {"unit_system": "cgs"},
    {"number_type": int},
    {"number_type": np.float16},
])
def test_configure_rejects_bad_values(changes):
    with pytest.raises(ValueError):
        config.configure(**changes)
    assert config.get_settings() == config.Settings()


def test_settings_are_immutable():
    with pytest.raises(AttributeError):
        config.get_settings().precision = Precision.Single


def test_override_restores_previous_settings():
    config.configure(unit_system=UnitSystem.InchPoundSecondRankine)
    with config.override(precision=Precision.Single) as settings:
        assert settings.precision is Precision.Single
        assert settings.unit_system is UnitSystem.InchPoundSecondRankine
    assert config.get_settings().precision is Precision.Double
    assert config.get_settings().unit_system is UnitSystem.InchPoundSecondRankine


def test_override_restores_after_errors():
    with pytest.raises(RuntimeError):
        with config.override(precision=Precision.Single):
            raise RuntimeError("boom")
    assert config.get_settings().precision is Precision.Double


def test_reset():
    config.configure(precision=Precision.Single)
    assert config.reset() == config.Settings()


def test_configure_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="phq.config"):
        config.configure(precision=Precision.Single)
    assert "Settings changed" in caplog.text


def test_number_type_drives_static_convert():
    with config.override(number_type=np.float32):
        result = static_convert(np.float32(1.0), Length.Foot, Length.Metre, None)
        assert isinstance(result, np.float32)
        assert static_convert(1.0, Length.Foot, Length.Metre) == pytest.approx(0.3048, rel=1e-6)


def test_package_reexports():
    assert phq.configure is config.configure
    assert phq.get_settings is config.get_settings
    assert isinstance(phq.__version__, str)
    assert phq.convert(1.0, Length.Kilometre, Length.Metre) == 1000.0
    assert phq.Length is phq.quantity.Length
