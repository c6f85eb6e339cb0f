"""Building blocks for a Redis cluster proxy: errors, string and address helpers, socket I/O and an epoll poller."""

__version__ = "0.8.0"