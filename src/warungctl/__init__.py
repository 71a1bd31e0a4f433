"""warungctl — site rendering and messaging-channel ordering for small food businesses."""

__version__ = "0.1.0"
