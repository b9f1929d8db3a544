"""In-process event bus with synchronous, thread-pool and deferred timer-tick dispatch."""

__version__ = "0.1.0"
__all__ = ["bus", "dispatchers", "flags", "pending", "stream"]