"""messagely - user directory, message ledger and session issuing backend."""

__version__ = "0.1.0"
