class GlobEngineUnavailableError(OSError):
    """Raised when a requested glob engine cannot run on this platform. Subclass of OSError."""
    def __init__(self, engine: str, reason: str) -> None:
        self.engine = engine
        self.reason = reason
        super().__init__(f"Glob engine {engine!r} is unavailable: {reason}.")
