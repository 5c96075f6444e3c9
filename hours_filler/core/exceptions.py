class HoursFillerError(Exception):
    """Base error for everything raised while talking to Factorial."""


class FatalError(HoursFillerError):
    """
    Aborts the whole /fill-hours run.
    The route turns it into a 500 with "Fatal error: <detail>".
    """


class RecoverableError(HoursFillerError):
    """
    Local to one day or one slot.
    Logged and absorbed by the component that raised it. It never reaches the route.
    """


class IdentityResolutionError(FatalError):
    pass


class PeriodNotFoundError(RecoverableError):
    def __init__(self, month: int) -> None:
        super().__init__("Period ID not found.")
        self.month = month


class ShiftSubmissionError(RecoverableError):
    def __init__(self, date: str, message: str) -> None:
        super().__init__(message)
        self.date = date
