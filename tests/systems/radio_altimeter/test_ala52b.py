"""Tests for the ALA-52B radio altimeter unit."""

import logging

import pytest

from radalt.core.registry import RegistryError
from radalt.simulation.context import InitContext, UpdateContext
from radalt.simulation.element import StateCollector
from radalt.systems.electrical.base import BusPowerState, ElectricalBusType
from radalt.systems.radio_altimeter.ala52b import (
    InstallationDelay,
    RadioAltimeterEngine,
    SignStatus,
)
from radalt.systems.radio_altimeter.antenna import (
    METRES_PER_FOOT,
    AntennaInstallation,
    TransceiverPair,
)

AC_1 = ElectricalBusType.alternating_current(1)


def make_unit(
    context: InitContext,
    transmitter: AntennaInstallation,
    receiver: AntennaInstallation,
    delay: InstallationDelay = InstallationDelay.FIFTY_SEVEN_FEET,
) -> tuple[RadioAltimeterEngine, TransceiverPair]:
    engine = RadioAltimeterEngine(context, 1, delay, AC_1)
    pair = TransceiverPair(context, "radio_altimeter_1_transceivers", transmitter, receiver)
    return engine, pair


@pytest.fixture
def a380_unit(init_context: InitContext, a380_configurations):
    configuration = a380_configurations[0]
    return make_unit(init_context, configuration.transmitter, configuration.receiver)


class TestInstallationDelay:
    """Test installation delay classes."""

    def test_lengths(self) -> None:
        assert InstallationDelay.FIFTY_SEVEN_FEET.length_ft == 57.0
        assert InstallationDelay.FIFTY_SEVEN_FEET.length_m == pytest.approx(57 * METRES_PER_FOOT)

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("fifty_seven_feet", InstallationDelay.FIFTY_SEVEN_FEET),
            ("TWENTY_FEET", InstallationDelay.TWENTY_FEET),
            (" forty_feet ", InstallationDelay.FORTY_FEET),
        ],
    )
    def test_parse(self, name: str, expected: InstallationDelay) -> None:
        assert InstallationDelay.parse(name) is expected

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown installation delay"):
            InstallationDelay.parse("fifty_feet")


class TestRadioAltimeterEngine:
    """Test radio altitude computation and output status."""

    def test_initial_state(self, a380_unit) -> None:
        """A new unit reports failure until its first powered update."""
        engine, _ = a380_unit
        assert engine.identifier == "radio_altimeter_1"
        assert engine.ssm == SignStatus.FAILURE_WARNING
        assert engine.radio_altitude_ft == 0.0
        assert engine.update_count == 0
        assert not engine.is_powered

    def test_registers_itself(self, init_context: InitContext, a380_unit) -> None:
        engine, _ = a380_unit
        assert init_context.lookup("radio_altimeter_1") is engine

    def test_duplicate_number(self, init_context: InitContext, a380_unit) -> None:
        """A second unit with the same number is rejected."""
        with pytest.raises(RegistryError):
            RadioAltimeterEngine(init_context, 1, InstallationDelay.FIFTY_SEVEN_FEET, AC_1)

    def test_on_ground_reads_near_zero(
        self, a380_unit, all_buses_powered: BusPowerState, on_ground_context: UpdateContext
    ) -> None:
        """The installation delay cancels antenna height and cabling on the ground."""
        engine, pair = a380_unit
        engine.receive_power(all_buses_powered)
        engine.update(on_ground_context, pair)

        assert engine.ssm == SignStatus.NORMAL_OPERATION
        assert abs(engine.radio_altitude_ft) < 1.0

    def test_at_height(self, a380_unit, all_buses_powered: BusPowerState, at_height) -> None:
        """Reading at 1000 ft CG height, level."""
        engine, pair = a380_unit
        engine.receive_power(all_buses_powered)
        engine.update(at_height(1000.0), pair)

        assert engine.ssm == SignStatus.NORMAL_OPERATION
        assert engine.radio_altitude_ft == pytest.approx(991.19, abs=0.1)

    def test_above_range(self, a380_unit, all_buses_powered: BusPowerState, at_height) -> None:
        """Above the tracking range the output holds the maximum with NCD."""
        engine, pair = a380_unit
        engine.receive_power(all_buses_powered)
        engine.update(at_height(9000.0), pair)

        assert engine.ssm == SignStatus.NO_COMPUTED_DATA
        assert engine.radio_altitude_ft == RadioAltimeterEngine.MAX_RADIO_ALTITUDE_FT

    def test_below_range_is_clamped(
        self, init_context: InitContext, all_buses_powered: BusPowerState
    ) -> None:
        """Readings never go below the minimum."""
        antenna = AntennaInstallation(0.5, 10.0, 0.0)
        engine, pair = make_unit(
            init_context,
            antenna,
            AntennaInstallation(0.5, 9.3, 0.0),
            InstallationDelay.EIGHTY_FEET,
        )
        engine.receive_power(all_buses_powered)
        engine.update(UpdateContext(delta_s=0.05), pair)

        assert engine.ssm == SignStatus.NORMAL_OPERATION
        assert engine.radio_altitude_ft == RadioAltimeterEngine.MIN_RADIO_ALTITUDE_FT

    def test_pitch_up_reads_lower(
        self, a380_unit, all_buses_powered: BusPowerState, at_height
    ) -> None:
        """Aft antennas come down when the nose goes up."""
        engine, pair = a380_unit
        engine.receive_power(all_buses_powered)

        engine.update(at_height(500.0), pair)
        level = engine.radio_altitude_ft
        engine.update(at_height(500.0, pitch_deg=8.0), pair)

        assert engine.radio_altitude_ft < level

    def test_bank_reads_slightly_higher(
        self, a380_unit, all_buses_powered: BusPowerState, at_height
    ) -> None:
        """Centreline antennas rise a little when the aircraft banks."""
        engine, pair = a380_unit
        engine.receive_power(all_buses_powered)

        engine.update(at_height(500.0), pair)
        level = engine.radio_altitude_ft
        engine.update(at_height(500.0, bank_deg=20.0), pair)

        assert level < engine.radio_altitude_ft < level + 1.0

    def test_unpowered(self, a380_unit, at_height) -> None:
        """Without power the unit keeps updating but reports failure."""
        engine, pair = a380_unit
        engine.receive_power(BusPowerState())
        engine.update(at_height(1000.0), pair)
        engine.update(at_height(1000.0), pair)

        assert engine.ssm == SignStatus.FAILURE_WARNING
        assert engine.radio_altitude_ft == 0.0
        assert engine.update_count == 2

    def test_power_loss_after_normal_operation(
        self, a380_unit, all_buses_powered: BusPowerState, at_height
    ) -> None:
        engine, pair = a380_unit
        engine.receive_power(all_buses_powered)
        engine.update(at_height(1000.0), pair)
        assert engine.ssm == SignStatus.NORMAL_OPERATION

        all_buses_powered.set_powered(AC_1, False)
        engine.receive_power(all_buses_powered)
        engine.update(at_height(1000.0), pair)

        assert engine.ssm == SignStatus.FAILURE_WARNING
        assert engine.radio_altitude_ft == 0.0

    def test_status_change_logged(
        self, a380_unit, all_buses_powered: BusPowerState, at_height, caplog
    ) -> None:
        """Output status transitions are logged at INFO."""
        caplog.set_level(logging.INFO, logger="radalt.systems.radio_altimeter.ala52b")
        engine, pair = a380_unit
        engine.receive_power(all_buses_powered)
        engine.update(at_height(1000.0), pair)

        assert "RA 1 output FAILURE_WARNING -> NORMAL_OPERATION" in caplog.text

    def test_write(self, a380_unit, all_buses_powered: BusPowerState, at_height) -> None:
        """The unit writes its altitude and status under numbered keys."""
        engine, pair = a380_unit
        engine.receive_power(all_buses_powered)
        engine.update(at_height(1000.0), pair)

        collector = StateCollector()
        engine.accept(collector)

        assert collector.variables == {
            "RA_1_RADIO_ALTITUDE": engine.radio_altitude_ft,
            "RA_1_SSM": "NORMAL_OPERATION",
        }
