import pytest

from medsim.rtos import Delay, Scheduler, Task, task_delay, task_yield


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


def make_scheduler(tick=0.1):
    clock = FakeClock()
    return Scheduler(clock=clock, sleep=clock.sleep, tick=tick), clock


def looping(log, label, ms):
    while True:
        yield task_delay(ms)
        log.append(label)


def _record_then_delay(started):
    started.append(True)
    yield task_delay(10)


def _delay_once():
    yield task_delay(100)


def _yield_non_delay():
    yield 42


def _delay_then_raise():
    yield task_delay(50)
    raise ValueError("boom")


def test_delay_helpers():
    assert task_delay(200) == Delay(200)
    assert task_yield() == Delay(0)


def test_task_does_not_run_until_resumed():
    sched, _ = make_scheduler()
    started = []
    task = sched.create_task(_record_then_delay(started), "t")
    assert started == []
    assert task.name == "t"
    sched.resume(task)
    assert started == [True]
    assert not task.done()


def test_task_resumed_only_after_deadline():
    sched, clock = make_scheduler()
    log = []
    task = sched.create_task(looping(log, "x", 250), "x")
    sched.resume(task)
    assert sched.run_once() == []
    assert sched.run_once() == []
    resumed = sched.run_once()
    assert resumed == [task]
    assert log == ["x"]


def test_due_tasks_resumed_in_blocking_order():
    sched, _ = make_scheduler()
    log = []
    a = sched.create_task(looping(log, "a", 100), "a")
    b = sched.create_task(looping(log, "b", 100), "b")
    sched.resume(a)
    sched.resume(b)
    assert sched.run_once() == [a, b]
    assert log == ["a", "b"]


def test_yield_task_runs_once_per_pass():
    sched, _ = make_scheduler()
    log = []
    task = sched.create_task(looping(log, "y", 0), "y")
    sched.resume(task)
    sched.start(max_iterations=3)
    assert log == ["y", "y", "y"]


def test_start_sleeps_one_tick_per_iteration():
    sched, clock = make_scheduler(tick=0.1)
    sched.start(max_iterations=4)
    assert clock.sleeps == [0.1] * 4


def test_periods_produce_expected_ratio():
    sched, _ = make_scheduler()
    log = []
    fast = sched.create_task(looping(log, "fast", 200), "fast")
    slow = sched.create_task(looping(log, "slow", 500), "slow")
    sched.resume(fast)
    sched.resume(slow)
    sched.start(max_iterations=30)
    assert log.count("fast") > log.count("slow") > 0


def test_finished_task_is_done_and_cannot_resume():
    sched, _ = make_scheduler()
    task = sched.create_task(_delay_once(), "once")
    sched.resume(task)
    assert sched.run_once() == [task]
    assert task.done()
    with pytest.raises(RuntimeError):
        sched.resume(task)
    assert sched.run_once() == []


def test_non_delay_yield_rejected():
    sched, _ = make_scheduler()
    task = sched.create_task(_yield_non_delay(), "bad")
    with pytest.raises(TypeError):
        sched.resume(task)


def test_task_exception_propagates():
    sched, _ = make_scheduler()
    task = sched.create_task(_delay_then_raise(), "err")
    sched.resume(task)
    with pytest.raises(ValueError, match="boom"):
        sched.run_once()


def test_task_constructed_directly():
    sched, _ = make_scheduler()
    log = []
    task = Task("direct", looping(log, "d", 0))
    task.resume(sched)
    assert sched.run_once() == [task]
    assert log == ["d"]