"""Display adapters."""

from sl_departures.adapters.display.logging_display_adapter import LoggingDisplayAdapter

__all__ = ["LoggingDisplayAdapter"]
