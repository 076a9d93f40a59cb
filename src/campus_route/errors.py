# campus_route/errors.py


class PlannerError(Exception):
    """Base class for everything the planner raises on purpose."""


class EmptyGraph(PlannerError):
    def __init__(self, msg: str = "graph snapshot has no nodes"):
        super().__init__(msg)


class InvalidSnapshot(PlannerError):
    pass


class SnapshotFetchFailure(PlannerError):
    """Raised at the provider boundary; the planner never retries it."""


class NoPathFound(PlannerError):
    def __init__(self, start: str, end: str):
        super().__init__(f"no path from {start!r} to {end!r}")
        self.start, self.end = start, end


class SearchAborted(PlannerError):
    def __init__(self, reason: str, **info):
        detail = ", ".join(f"{k}={v}" for k, v in info.items())
        super().__init__(f"search aborted: {reason}" + (f" ({detail})" if detail else ""))
        self.reason, self.info = reason, info
