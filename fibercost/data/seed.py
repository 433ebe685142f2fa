"""Seed rate catalogs for the fibercost engine.

Representative rural fiber-to-the-home buildout prices: materials and
equipment priced per foot or each, crew labor per hour, and round-trip
mileage buckets at the standard per-mile reimbursement rate.
"""

from fibercost.models.catalog import LaborRate, MileageRate, Unit

SEED_UNITS: list[Unit] = [
    # --- Cable & conduit (per foot) ---
    Unit(id="fiber-144ct", name="144-count fiber cable", cost=2.15, type="foot"),
    Unit(id="fiber-48ct", name="48-count fiber cable", cost=1.10, type="foot"),
    Unit(id="drop-cable", name="Pre-terminated drop cable", cost=0.45, type="foot"),
    Unit(id="conduit-1-25", name="1.25in HDPE conduit", cost=0.95, type="foot"),
    Unit(id="directional-bore", name="Directional bore", cost=12.00, type="foot"),
    Unit(id="aerial-strand", name="Aerial strand and lashing", cost=1.75, type="foot"),
    # --- Enclosures & equipment (each) ---
    Unit(id="handhole", name="Handhole 17x30", cost=425.00, type="each"),
    Unit(id="splice-closure", name="Splice closure", cost=310.00, type="each"),
    Unit(id="fdh-288", name="288-port fiber distribution hub", cost=6800.00, type="each"),
    Unit(id="ont", name="Optical network terminal", cost=185.00, type="each"),
]

SEED_LABOR_RATES: list[LaborRate] = [
    LaborRate(id="splicer", name="Fiber splicer", cost=85.00, type="hour"),
    LaborRate(id="bore-crew", name="Boring crew", cost=240.00, type="hour"),
    LaborRate(id="aerial-crew", name="Aerial crew", cost=195.00, type="hour"),
    LaborRate(id="install-tech", name="Install technician", cost=55.00, type="hour"),
    LaborRate(id="project-manager", name="Project manager", cost=95.00, type="hour"),
]

SEED_MILEAGE_RATES: list[MileageRate] = [
    MileageRate(id="trip-25", distance=25, cost_per_mile=0.67),
    MileageRate(id="trip-50", distance=50, cost_per_mile=0.67),
    MileageRate(id="trip-100", distance=100, cost_per_mile=0.67),
]
