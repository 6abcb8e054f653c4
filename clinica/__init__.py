"""Medical appointment manager: patient registry, service and priority queues, sorted listings, undo history and file storage."""

__version__ = "0.1.0"