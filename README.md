# medsim

A small simulation of medical device firmware. A temperature sensor and a
motor speed sensor are sampled through emulated ADCs. Their readings are
queued in fixed-capacity buffers, and a monitor task prints one reading from
each on a regular schedule. All tasks are generators running on a
cooperative, deadline-based scheduler.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the simulation

```
medsim
```

or, to stop after a given number of scheduler passes (each pass sleeps
0.1 s, then resumes every task whose delay has run out):

```
medsim --iterations 50
```

Four tasks are started:

- the physical simulation task, which sets the resting pin levels
  (temperature 30, motor speed 2000) and then, every 500 ms, copies the
  motor DAC setpoint into the motor speed ADC
- the temperature sensor task, which samples ADC1 every 200 ms
- the motor speed sensor task, which samples ADC2 every 500 ms
- the monitor task, which prints a line to standard output every 900 ms

Each monitor line looks like this:

```
[Time: 14:03:27] Temperature: 31 C | Motor Speed: 1996 RPM
```

A reading of 0 means the buffer had no sample waiting. Without
`--iterations` the scheduler loops until it is interrupted, for example with
Ctrl+C, after which the command exits with status 0.

## Building blocks

- `medsim.circular_buffer.CircularBuffer`: a fixed-capacity FIFO. `push`
  returns `False` and drops the item when the buffer is full; `pop` returns
  `None` when it is empty. `is_empty`, `is_full` and `len()` report its state.
- `medsim.hw_sim`: emulated hardware. `HalStatus`, the `AdcHandle` and
  `DacHandle` handles, and `Board`, which holds `hadc1`, `hadc2` and `hdac1`.
  `Board.adc_get_value` returns the handle's value plus noise in the range
  -10 to +10, as a 32-bit unsigned value; pass a `random.Random` to `Board`
  for repeatable noise. Conversions are always ready (`HalStatus.OK`).
- `medsim.rtos`: the scheduler. A task is a generator that yields
  `task_delay(ms)` or `task_yield()`. `Scheduler.create_task` wraps a
  generator in a `Task`, `Scheduler.resume` runs it up to its first delay,
  `Scheduler.run_once` performs one pass and returns the tasks it resumed,
  and `Scheduler.start(max_iterations)` runs passes. The clock, sleep
  function and tick length can be passed to `Scheduler` for testing.
- `medsim.controllers`: `TemperatureSensorController`, `MotorController`
  (with `set_speed` driving the DAC) and `MonitorController`, which share a
  `SensorData` pair of buffers of capacity 100. `MonitorController.format_line`
  builds a monitor line for a given time.
- `medsim.phy_sim.sim_phy_task` and `medsim.tasks`: the task generators.
- `medsim.main.build_system`: wires everything onto a given scheduler and
  board and returns the four tasks, not yet resumed, so you can drive the
  system yourself.

## What it does not do

There is no real hardware access, no motor control loop beyond following the
DAC setpoint, and no log file: monitor lines go only to standard output (or
the stream given to `build_system`). Tasks have no priorities.