from typing import Optional, Protocol


class AppHooks(Protocol):
    """
    Protocol for application hooks to follow long statistics runs.
    This can be implemented by the calling application to show progress
    and to cancel collection between collectors.

    Methods:
        report_step(...): Report progress of the current collector.
        stop_requested() -> bool: Ask whether collection should stop.
    """
    def report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 1) -> None:
        """
        Report progress messages from the statistics run.

        Args:
            info (str): Progress message.
            target (int): Target count for progress.
            reset_counter (bool): Whether to reset the counter.
            plus_step (int): Incremental step count.
        """
        pass

    def stop_requested(self) -> bool:
        """
        Check if a stop has been requested by the user.

        Returns:
            bool: True if stop is requested, False otherwise.
        """
        return False
