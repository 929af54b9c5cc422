"""Emulated microcontroller peripherals: ADC and DAC handles."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import Optional

_UINT32_MASK = 0xFFFFFFFF
_ADC_NOISE = 10


class HalStatus(enum.IntEnum):
    """Status returned by hardware abstraction calls."""

    OK = 0x00
    ERROR = 0x01
    BUSY = 0x02
    TIMEOUT = 0x03


@dataclass
class AdcHandle:
    """An analogue-to-digital converter channel; ``value`` is the pin level."""

    value: int = 0


@dataclass
class DacHandle:
    """A digital-to-analogue converter channel; ``value`` is the output level."""

    value: int = 0


class Board:
    """The emulated board with two ADC channels and one DAC channel."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.hadc1 = AdcHandle()
        self.hadc2 = AdcHandle()
        self.hdac1 = DacHandle()

    def adc_start(self, handle: AdcHandle) -> None:
        """Start conversions on ``handle``; the emulation converts continuously."""

    def adc_poll_for_conversion(self, handle: AdcHandle, timeout: int) -> HalStatus:
        """Wait for a conversion; emulated conversions are always ready."""
        return HalStatus.OK

    def adc_get_value(self, handle: AdcHandle) -> int:
        """Sample the pin level with up to +/-10 counts of noise, as a 32-bit value."""
        noise = self.rng.randint(-_ADC_NOISE, _ADC_NOISE)
        return (handle.value + noise) & _UINT32_MASK

    def dac_set_value(self, handle: DacHandle, value: int) -> None:
        handle.value = value & _UINT32_MASK