"""Airline name → booking-site deep link.

Pure lookup: no network, no cache. Unknown airlines fall back to a Google
Flights search. Origin and destination are passed through unvalidated.
"""

from types import MappingProxyType

from flight_tracker.schemas import BookingLink

DEFAULT_AIRLINE = "default"

BOOKING_URLS = MappingProxyType({
    "Delta": "https://www.delta.com/flight-search/book-a-flight?origin={origin}&dest={dest}",
    "JetBlue": "https://www.jetblue.com/booking/flights?from={origin}&to={dest}",
    "American": "https://www.aa.com/booking/find-flights?origin={origin}&dest={dest}",
    "United": "https://www.united.com/en/us/fsr/choose-flights?origin={origin}&dest={dest}",
    DEFAULT_AIRLINE: "https://www.google.com/flights?q=flights+from+{origin}+to+{dest}",
})


def resolve_booking_url(airline: str | None, origin: str | None, dest: str | None) -> BookingLink:
    """Build the booking link for ``airline`` (exact, case-sensitive match)."""
    origin = origin or ""
    dest = dest or ""
    template = BOOKING_URLS.get(airline or DEFAULT_AIRLINE, BOOKING_URLS[DEFAULT_AIRLINE])
    return BookingLink(
        url=template.format(origin=origin, dest=dest),
        airline=airline,
        route=f"{origin} → {dest}",
    )
