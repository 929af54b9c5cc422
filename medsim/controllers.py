"""Application controllers that read sensors and report their values."""

from __future__ import annotations

import abc
import sys
from datetime import datetime
from typing import Callable, Optional, TextIO

from medsim.circular_buffer import CircularBuffer
from medsim.hw_sim import Board, HalStatus

SENSOR_BUFFER_CAPACITY = 100


class Controller(abc.ABC):
    """A periodic controller that can also report a reading."""

    @abc.abstractmethod
    def get_data(self) -> int:
        """Return the controller's current reading."""

    @abc.abstractmethod
    def run(self) -> None:
        """Perform one control step."""


class SensorData:
    """The shared sample queues between sensor producers and consumers."""

    def __init__(self, capacity: int = SENSOR_BUFFER_CAPACITY) -> None:
        self.temperature: CircularBuffer[int] = CircularBuffer(capacity)
        self.motor: CircularBuffer[int] = CircularBuffer(capacity)


class TemperatureSensorController(Controller):
    """Samples the temperature sensor on ADC1 into a buffer."""

    def __init__(self, board: Board, buffer: CircularBuffer[int]) -> None:
        self.board = board
        self.buffer = buffer

    def get_temperature(self) -> int:
        """Return the oldest buffered temperature sample, or 0 if none."""
        value = self.buffer.pop()
        return 0 if value is None else value

    def get_data(self) -> int:
        return self.get_temperature()

    def run(self) -> None:
        adc = self.board.hadc1
        if self.board.adc_poll_for_conversion(adc, 0) is HalStatus.OK:
            self.buffer.push(self.board.adc_get_value(adc))


class MotorController(Controller):
    """Samples motor speed on ADC2 and drives the motor through DAC1."""

    def __init__(self, board: Board, buffer: CircularBuffer[int]) -> None:
        self.board = board
        self.buffer = buffer

    def get_speed(self) -> int:
        """Return the oldest buffered speed sample, or 0 if none."""
        value = self.buffer.pop()
        return 0 if value is None else value

    def set_speed(self, rpm: int) -> None:
        self.board.dac_set_value(self.board.hdac1, rpm)

    def get_data(self) -> int:
        return self.get_speed()

    def run(self) -> None:
        adc = self.board.hadc2
        if self.board.adc_poll_for_conversion(adc, 0) is HalStatus.OK:
            self.buffer.push(self.board.adc_get_value(adc))


class MonitorController(Controller):
    """Logs one temperature and one motor-speed reading per step."""

    def __init__(
        self,
        c1: Controller,
        c2: Controller,
        out: Optional[TextIO] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.c1 = c1
        self.c2 = c2
        self.out = out
        self.clock = clock

    def get_data(self) -> int:
        return 0

    def format_line(self, moment: datetime) -> str:
        """Take one reading from each controller and format it for ``moment``."""
        temperature = self.c1.get_data()
        speed = self.c2.get_data()
        return (
            f"[Time: {moment:%H:%M:%S}] "
            f"Temperature: {temperature} C "
            f"| Motor Speed: {speed} RPM"
        )

    def run(self) -> None:
        out = self.out if self.out is not None else sys.stdout
        out.write(self.format_line(self.clock()) + "\n")