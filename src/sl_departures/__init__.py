"""Real-time SL departures for a set of configured stations."""
