"""RadAlt - dual radio altimeter simulation.

Flies a straight descent over flat terrain and prints what both radio
altimeters report on every tick.

Typical usage:
    radalt --start-ft 2500 --descent-fpm 700 --ticks 100
    radalt --config config/a380_radio_altimeters.yaml --unpowered-bus AC_1
    python -m radalt.main --pitch-deg 3.0 --dt 0.5
"""

import argparse
import sys

from radalt.core.config import ConfigError
from radalt.core.logging_system import LoggingError, get_logger, initialize_logging
from radalt.simulation.context import InitContext, UpdateContext
from radalt.simulation.simulation import Simulation
from radalt.systems.electrical.base import BusPowerState, ElectricalBusType
from radalt.systems.radio_altimeter.antenna import METRES_PER_FOOT
from radalt.systems.radio_altimeter.installations import (
    a380_channel_configurations,
    load_channel_configurations,
)
from radalt.systems.radio_altimeter.subsystem import RedundantRadioAltimeters

logger = get_logger(__name__)

# A380 CG height over ground with the aircraft on its wheels.
DEFAULT_GROUND_HEIGHT_FT = 8.617


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description="RadAlt - dual radio altimeter simulation")

    parser.add_argument("--config", type=str, help="Radio altimeter installation YAML file")
    parser.add_argument("--log-config", type=str, help="Logging configuration YAML file")
    parser.add_argument(
        "--start-ft", type=float, default=2500.0, help="Initial CG height over ground in feet"
    )
    parser.add_argument(
        "--descent-fpm", type=float, default=700.0, help="Descent rate in feet per minute"
    )
    parser.add_argument("--pitch-deg", type=float, default=0.0, help="Pitch attitude in degrees")
    parser.add_argument("--bank-deg", type=float, default=0.0, help="Bank attitude in degrees")
    parser.add_argument(
        "--ground-height-ft",
        type=float,
        default=DEFAULT_GROUND_HEIGHT_FT,
        help="CG height over ground at touchdown in feet",
    )
    parser.add_argument("--ticks", type=int, default=100, help="Number of ticks to simulate")
    parser.add_argument("--dt", type=float, default=1.0, help="Tick duration in seconds")
    parser.add_argument(
        "--unpowered-bus",
        action="append",
        default=[],
        metavar="BUS",
        help="Bus to leave unpowered, e.g. AC_1 (repeatable)",
    )

    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> list[dict]:
    """Run the descent and print one line per tick.

    Returns:
        Variables collected on each tick, in tick order.

    Raises:
        ConfigError: If the installation file or a bus name is invalid.
    """
    configurations = (
        load_channel_configurations(args.config) if args.config else a380_channel_configurations()
    )

    try:
        unpowered = {ElectricalBusType.parse(name) for name in args.unpowered_bus}
    except ValueError as e:
        raise ConfigError(str(e)) from e

    buses = BusPowerState.all_powered(
        c.powered_by for c in configurations if c.powered_by not in unpowered
    )

    altimeters = RedundantRadioAltimeters(InitContext(), configurations)
    simulation = Simulation(altimeters, buses)

    height_ft = args.start_ft
    context = UpdateContext(delta_s=0.0, pitch_deg=args.pitch_deg, bank_deg=args.bank_deg)
    history = []

    for _ in range(args.ticks):
        context = context.advanced(args.dt).with_aircraft_state(
            plane_height_over_ground_m=height_ft * METRES_PER_FOOT
        )
        variables = simulation.tick(context)
        history.append(variables)

        print(
            f"t={context.simulation_time_s:7.2f}s  height={height_ft:8.1f}ft  "
            f"RA1={variables['RA_1_RADIO_ALTITUDE']:8.1f}ft {variables['RA_1_SSM']:<16}  "
            f"RA2={variables['RA_2_RADIO_ALTITUDE']:8.1f}ft {variables['RA_2_SSM']}"
        )

        height_ft = max(args.ground_height_ft, height_ft - args.descent_fpm / 60.0 * args.dt)

    return history


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success).
    """
    args = parse_args(argv)

    try:
        if args.log_config:
            initialize_logging(args.log_config, use_platform_dir=False)
        run(args)
        return 0
    except (ConfigError, LoggingError) as e:
        logger.error("Configuration error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
