"""Watch VATSIM pilots around an airport, ranked by time on the network."""

__version__ = "0.3.0"
