from __future__ import annotations

from dataclasses import dataclass

CLEANUP_MODES = ("raise", "log", "ignore")


@dataclass(frozen=True)
class AskConfig:
    reconvert: bool = False  # re-run convert on input read after a failed validation
    cleanup_errors: str = "log"  # one of CLEANUP_MODES
    max_attempts: int | None = None  # prompt() calls per question; None = unbounded

    def __post_init__(self) -> None:
        if self.cleanup_errors not in CLEANUP_MODES:
            raise ValueError(
                f"cleanup_errors must be one of {', '.join(CLEANUP_MODES)}, "
                f"got {self.cleanup_errors!r}"
            )
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")


DEFAULT_CONFIG = AskConfig()
