"""Periodic tasks that sample the sensors and log the readings."""

from __future__ import annotations

from medsim.controllers import (
    MonitorController,
    MotorController,
    TemperatureSensorController,
)
from medsim.hw_sim import Board
from medsim.rtos import TaskCoroutine, task_delay

TEMPERATURE_PERIOD_MS = 200
MOTOR_SPEED_PERIOD_MS = 500
MONITOR_PERIOD_MS = 900


def temperature_sensor_task(
    board: Board, controller: TemperatureSensorController
) -> TaskCoroutine:
    """Start ADC1 and sample the temperature sensor every 200 ms."""
    board.adc_start(board.hadc1)
    while True:
        yield task_delay(TEMPERATURE_PERIOD_MS)
        controller.run()


def motor_speed_sensor_task(board: Board, controller: MotorController) -> TaskCoroutine:
    """Start ADC2 and sample the motor speed every 500 ms."""
    board.adc_start(board.hadc2)
    while True:
        yield task_delay(MOTOR_SPEED_PERIOD_MS)
        controller.run()


def monitor_controller_task(controller: MonitorController) -> TaskCoroutine:
    """Log the sensor readings every 900 ms."""
    while True:
        yield task_delay(MONITOR_PERIOD_MS)
        controller.run()