from backend.engine.normalizer.normalize import normalize

__all__ = ["normalize"]
