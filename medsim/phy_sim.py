"""Physical-world emulation: what is wired to the board's pins."""

from __future__ import annotations

from medsim.hw_sim import Board
from medsim.rtos import TaskCoroutine, task_delay

AVERAGE_TEMPERATURE_SENSOR_ADC_VALUE = 30
AVERAGE_MOTOR_SENSOR_ADC_VALUE = 2000
PHY_PERIOD_MS = 500


def sim_phy_task(board: Board) -> TaskCoroutine:
    """Set resting pin levels, then let the motor follow its DAC command."""
    board.hadc1.value = AVERAGE_TEMPERATURE_SENSOR_ADC_VALUE
    board.hadc2.value = AVERAGE_MOTOR_SENSOR_ADC_VALUE
    board.hdac1.value = AVERAGE_MOTOR_SENSOR_ADC_VALUE
    while True:
        yield task_delay(PHY_PERIOD_MS)
        # The motor is driven by DAC1 and its speed is sensed on ADC2.
        board.hadc2.value = board.hdac1.value