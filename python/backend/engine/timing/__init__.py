from backend.engine.timing.timer import RunTimer

__all__ = ["RunTimer"]
