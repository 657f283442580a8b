"""Exceptions raised by the API client and the airport table."""


class FetchError(Exception):
    """A remote VATSIM call did not produce usable data."""


class ServiceUnreachable(FetchError):
    """Transport failure or non-success status from a VATSIM endpoint."""


class DecodeFailure(ServiceUnreachable):
    """The endpoint answered, but the body was not the JSON we expect."""


class PerPilotFetchFailure(FetchError):
    """The ratings lookup for a single pilot failed."""

    def __init__(self, cid, message):
        super().__init__(f"CID {cid}: {message}")
        self.cid = cid


class UnknownAirport(LookupError):
    def __init__(self, identifier):
        super().__init__(f"Unsupported airport {identifier}")
        self.identifier = identifier
