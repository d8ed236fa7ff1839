"""Line and direction filtering for normalized departures."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from sl_departures.domain.errors import ConfigurationError
from sl_departures.domain.models.departure import Departure
from sl_departures.domain.models.station_configuration import LineRule, StationConfiguration

logger = logging.getLogger(__name__)

_SWAPPED_DIRECTIONS = {1: 2, 2: 1}


@dataclass(frozen=True)
class LineDecision:
    """Outcome of a line check: either a yes/no answer or a configuration error."""

    wanted: bool
    error: ConfigurationError | None = None


def swap_journey_direction(direction: int | None) -> int | None:
    """Swap direction codes 1 and 2; any other code (0 is reserved) is returned as is."""
    return _SWAPPED_DIRECTIONS.get(direction, direction) if direction is not None else None


def _line_key(line: object) -> str:
    return str(line).strip().upper()


def _rule_list(station: StationConfiguration) -> Sequence[LineRule] | None:
    if isinstance(station.lines, (list, tuple)):
        return station.lines
    return None


def _first_matching_rule(rules: Sequence[LineRule], departure: Departure) -> LineRule | None:
    if departure.line_number is None:
        return None
    key = _line_key(departure.line_number)
    for rule in rules:
        if _line_key(rule.line) == key:
            return rule
    return None


def fix_journey_direction(station: StationConfiguration, departure: Departure) -> Departure:
    """Return the departure with its direction swapped if its line rule asks for it.

    Only the first rule matching the departure's line is considered.
    """
    rules = _rule_list(station)
    if rules is None:
        return departure

    rule = _first_matching_rule(rules, departure)
    if rule is None or not rule.swap_dir:
        return departure

    new_direction = swap_journey_direction(departure.journey_direction)
    logger.debug(
        f"Swapping direction for line {departure.line_number} "
        f"from {departure.journey_direction} to {new_direction}"
    )
    return replace(departure, journey_direction=new_direction)


def is_wanted_line(station: StationConfiguration, departure: Departure) -> LineDecision:
    """Decide whether a departure's line (and direction) is configured for the station.

    The first rule whose line matches decides; rule order is precedence.
    """
    if station.lines is None:
        return LineDecision(wanted=True)

    rules = _rule_list(station)
    if rules is None:
        return LineDecision(
            wanted=False,
            error=ConfigurationError(
                f"station id={station.station_id} lines is defined but not as a list."
            ),
        )

    rule = _first_matching_rule(rules, departure)
    if rule is None:
        return LineDecision(wanted=False)
    if rule.direction is None:
        return LineDecision(wanted=True)
    return LineDecision(wanted=departure.journey_direction == rule.direction)


def is_wanted_direction(direction: int | None, configured_direction: int | None) -> bool:
    """Apply the global direction filter, if one is configured."""
    if configured_direction is None:
        return True
    return direction == configured_direction
