"""Constants for the SL realtime departures API.

API documentation: https://www.trafiklab.se/api/sl-realtidsinformation-4
"""

SL_API_HOST = "api.sl.se"
SL_REALTIME_DEPARTURES_PATH = "/api2/realtimedeparturesV4.json"

# Minutes ahead of now to ask departures for
TIME_WINDOW_MINUTES = 60

# Response array name -> query parameter that switches the category off
TRANSPORT_CATEGORIES: dict[str, str] = {
    "Metros": "metro",
    "Buses": "bus",
    "Trains": "train",
    "Trams": "tram",
    "Ships": "ship",
}

TRANSPORT_TYPE_ALIASES: dict[str, str] = {
    "metro": "metro",
    "metros": "metro",
    "bus": "bus",
    "buses": "bus",
    "train": "train",
    "trains": "train",
    "tram": "tram",
    "trams": "tram",
    "ship": "ship",
    "ships": "ship",
}

SUCCESS_STATUS_CODE = 0


def realtime_departures_url(use_ssl: bool) -> str:
    """Build the endpoint URL for http or https."""
    scheme = "https" if use_ssl else "http"
    return f"{scheme}://{SL_API_HOST}{SL_REALTIME_DEPARTURES_PATH}"
