#!/usr/bin/env python3
"""
Heat-load report for a saved project.

Loads a project snapshot (path from the command line or the
HEATLOAD_SNAPSHOT environment variable; the default project otherwise) and
logs the heat gain table, comfort check, ventilation and system sizing.
"""
import logging
import os
import sys

from heatload.metrics import (
    envelope_totals,
    is_comfortable,
    size_system,
    ventilation_requirement,
)
from heatload.model import Season, default_project_state
from heatload.persistence import load_snapshot

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main(argv=None):
    """Log the heat-load results for one project."""
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else os.getenv("HEATLOAD_SNAPSHOT")

    state = load_snapshot(path) if path else default_project_state()
    room = state.room
    logger.info("Project %r, room %r (%g ft², %g ft³)", state.project.name, room.name, room.floor_area, room.volume)

    totals = envelope_totals(state.elements, state.internal_loads, room.floor_area)
    for season in Season:
        logger.info("Heat gain, %s: %s BTU/hr", season.value, f"{totals.get(season):,}")

    comfort = "OK" if is_comfortable(state.climate.inside) else "CHECK CONDITIONS"
    logger.info("ASHRAE 55 comfort: %s", comfort)

    ventilation = ventilation_requirement(room.floor_area, state.internal_loads.people.count)
    logger.info("Ventilation: %s", ventilation.formula)

    result = size_system(state)
    logger.info("ERSH %s BTU/hr, ERLH %s BTU/hr, ESHF %.3f", f"{result.ersh:,}", f"{result.erlh:,}", result.eshf)
    if result.is_configured:
        logger.info("Dehumidified CFM %d (rise %.2f °F)", result.deh_cfm, result.rise)
    else:
        logger.warning("ADP/bypass factor leave no dehumidified rise; check the system design")
    logger.info("Grand total %s BTU/hr = %.2f TR", f"{result.grand_total:,}", result.tonnage)
    logger.info("Supply air %d CFM, fresh air %d CFM", result.supply_air, result.fresh_air)
    return 0


if __name__ == "__main__":
    sys.exit(main())
