from backend.engine.closedset.table import VisitedStateTable

__all__ = ["VisitedStateTable"]
