"""pfoana command line interface."""
