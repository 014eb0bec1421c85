import time
from app.domain.services_interfaces.clock import ClockInterface


class SystemClock(ClockInterface):
    def now(self) -> int:
        return time.time_ns()
