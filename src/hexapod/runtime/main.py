#!/usr/bin/env python3

import argparse
import logging
import sys

from hexapod import constants, labels
from hexapod.configuration import GaitParameters
from hexapod.exceptions import HexapodError
from hexapod.hardware.actuator_bus import ActuatorBusError
from hexapod.hardware.actuator_bus.dynamixel_network import DynamixelNetwork
from hexapod.logger import Logger
from hexapod.runtime.abort_controller.abort_controller import AbortController
from hexapod.runtime.motion_controller.hexapod import Hexapod
from hexapod.runtime.remote_controller import RemoteControlService

log = Logger().setup_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='hexapod', description='Hexapod gait controller')
    parser.add_argument('--port', default=constants.DEFAULT_SERIAL_PORT, help='Serial device of the servo bus')
    parser.add_argument('--baud', type=int, default=constants.DEFAULT_BAUD_RATE, help='Servo bus baud rate')
    parser.add_argument('--config', default=None, help='JSON file overriding the default gait parameters')
    parser.add_argument('--verbose', action='store_true', help='Log debug messages to the console')

    subparsers = parser.add_subparsers(dest='command', required=True)

    run_parser = subparsers.add_parser('run', help='Stand up and walk under gamepad control')
    run_parser.add_argument('--joystick', default=constants.DEFAULT_JOYSTICK, help='Joystick device name in /dev/input')

    subparsers.add_parser('park', help='Fold the legs into the parked pose and relax the servos')

    return parser


def run(hexapod: Hexapod, joystick: str) -> int:
    remote = RemoteControlService(joystick)
    if not remote.scan():
        return 1

    abort_controller = AbortController(hexapod.halt)
    abort_controller.install()
    try:
        return hexapod.main_loop(remote)
    finally:
        abort_controller.uninstall()
        remote.disconnect()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    Logger().enable_console(logging.DEBUG if args.verbose else logging.INFO)
    log.info(labels.MAIN_STARTING)

    try:
        parameters = GaitParameters.from_json(args.config)
        bus = DynamixelNetwork(args.port, args.baud)
    except (HexapodError, ActuatorBusError) as e:
        log.error(labels.MAIN_FATAL_ERROR.format(e))
        return 1

    try:
        hexapod = Hexapod(bus, parameters)

        if args.command == 'park':
            hexapod.shutdown()
            exit_code = 0
        else:
            exit_code = run(hexapod, args.joystick)

    except (HexapodError, ActuatorBusError) as e:
        log.error(labels.MAIN_FATAL_ERROR.format(e))
        return 1

    finally:
        bus.close()

    if exit_code == 0:
        log.info(labels.MAIN_TERMINATED_NORMAL)
    else:
        log.info(labels.MAIN_TERMINATED_EXIT_CODE.format(exit_code))

    return exit_code


if __name__ == '__main__':
    sys.exit(main())
