"""Command-line entry point that wires the device simulation together."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, TextIO

from medsim.controllers import (
    MonitorController,
    MotorController,
    SensorData,
    TemperatureSensorController,
)
from medsim.hw_sim import Board
from medsim.phy_sim import sim_phy_task
from medsim.rtos import Scheduler, Task
from medsim.tasks import (
    monitor_controller_task,
    motor_speed_sensor_task,
    temperature_sensor_task,
)


def build_system(
    scheduler: Scheduler, board: Board, out: Optional[TextIO] = None
) -> List[Task]:
    """Create the physical, sensor and monitor tasks; none has run yet."""
    data = SensorData()
    temperature = TemperatureSensorController(board, data.temperature)
    motor = MotorController(board, data.motor)
    monitor = MonitorController(temperature, motor, out=out)
    return [
        scheduler.create_task(sim_phy_task(board), "phy sim"),
        scheduler.create_task(temperature_sensor_task(board, temperature), "Temperature"),
        scheduler.create_task(motor_speed_sensor_task(board, motor), "Motor Speed"),
        scheduler.create_task(monitor_controller_task(monitor), "Monitor"),
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="medsim", description="Run the medical device simulation."
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="number of scheduler passes to run (default: run forever)",
    )
    args = parser.parse_args(argv)
    if args.iterations is not None and args.iterations < 0:
        parser.error("--iterations must not be negative")

    board = Board()
    scheduler = Scheduler()
    for task in build_system(scheduler, board, sys.stdout):
        scheduler.resume(task)
    try:
        scheduler.start(args.iterations)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())