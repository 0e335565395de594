"""
Project state document for a heat-load calculation.

The whole project is a single immutable value: frozen dataclasses with
tuples for ordered collections. Nothing here is ever mutated in place; the
transition engine builds a new document for every change.

Usage:
    from heatload.model.state import default_project_state

    state = default_project_state()
    state.room.volume  # 1500.0
"""

from dataclasses import dataclass, field
from typing import ClassVar, FrozenSet, Tuple

from heatload.core.config import SystemDesign
from heatload.core.constants import (
    DEFAULT_AHU_CONFIGURATION,
    DEFAULT_DESIGN_SCHEME,
    DEFAULT_ISO_CLASS,
    LPD_OFFICE,
    PEOPLE_LATENT_SEATED,
    PEOPLE_SENSIBLE_SEATED,
)
from heatload.model.enums import (
    ElementCategory,
    LoadKind,
    OpeningType,
    PressureRegime,
    Season,
)


# =============================================================================
# Project metadata
# =============================================================================


@dataclass(frozen=True)
class Ambient:
    """Site ambient data entered with the project metadata."""

    elevation: float = 0.0  # ft
    dry_bulb: float = 0.0  # °C
    wet_bulb: float = 0.0  # °C
    latitude: float = 0.0  # degrees
    relative_humidity: float = 0.0  # %


@dataclass(frozen=True)
class ProjectInfo:
    """Descriptive project metadata."""

    name: str = ""
    location: str = ""
    customer: str = ""
    consultant: str = ""
    industry: str = ""
    account_manager: str = ""
    ambient: Ambient = field(default_factory=Ambient)


@dataclass(frozen=True)
class AhuConfiguration:
    """Selection record for one air handling unit."""

    READ_ONLY_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"id"})

    id: int = 0
    room_name: str = ""
    iso_class: str = DEFAULT_ISO_CLASS
    design_scheme: str = DEFAULT_DESIGN_SCHEME
    configuration: str = DEFAULT_AHU_CONFIGURATION


# =============================================================================
# Room and climate
# =============================================================================


@dataclass(frozen=True)
class Room:
    """Geometry and ventilation inputs of the zone being sized."""

    # volume is derived from floor_area × height and never set directly
    READ_ONLY_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"volume"})

    name: str = ""
    floor_area: float = 0.0  # ft²
    height: float = 0.0  # ft
    volume: float = 0.0  # ft³
    min_air_changes: float = 0.5  # ACH
    pressure: PressureRegime = PressureRegime.POSITIVE


@dataclass(frozen=True)
class OutsideCondition:
    """Outdoor design condition for one season."""

    db: float = 0.0  # °F dry bulb
    wb: float = 0.0  # °F wet bulb
    rh: float = 0.0  # %
    dp: float = 0.0  # °F dew point
    gr: float = 0.0  # grains/lb
    time: str = ""
    month: str = ""


@dataclass(frozen=True)
class InsideCondition:
    """Indoor comfort target, applied across all seasons."""

    db: float = 0.0  # °F
    rh: float = 0.0  # %
    dp: float = 0.0  # °F
    gr: float = 0.0  # grains/lb


@dataclass(frozen=True)
class OutsideConditions:
    """Outdoor design conditions keyed by season."""

    summer: OutsideCondition = field(default_factory=OutsideCondition)
    monsoon: OutsideCondition = field(default_factory=OutsideCondition)
    winter: OutsideCondition = field(default_factory=OutsideCondition)

    def for_season(self, season: Season) -> OutsideCondition:
        """Return the condition record for a season."""
        return getattr(self, season.value)


@dataclass(frozen=True)
class Climate:
    """Outside (per season) and inside design conditions."""

    outside: OutsideConditions = field(default_factory=OutsideConditions)
    inside: InsideCondition = field(default_factory=InsideCondition)


# =============================================================================
# Envelope
# =============================================================================


@dataclass(frozen=True)
class SeasonalValues:
    """One number per design season."""

    summer: float = 0.0
    monsoon: float = 0.0
    winter: float = 0.0

    def get(self, season: Season) -> float:
        """Return the value for a season."""
        return getattr(self, season.value)


@dataclass(frozen=True)
class EnvelopeElement:
    """A glass, wall, roof, ceiling, floor or partition row."""

    READ_ONLY_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"id"})

    id: int = 0
    label: str = ""
    direction: str = ""
    area: float = 0.0  # ft²
    u_value: float = 0.0  # BTU/hr·ft²·°F
    diff: SeasonalValues = field(default_factory=SeasonalValues)  # °F CLTD per season


@dataclass(frozen=True)
class Elements:
    """Envelope elements grouped by category, each an ordered tuple."""

    glass: Tuple[EnvelopeElement, ...] = ()
    walls: Tuple[EnvelopeElement, ...] = ()
    roof: Tuple[EnvelopeElement, ...] = ()
    ceiling: Tuple[EnvelopeElement, ...] = ()
    floor: Tuple[EnvelopeElement, ...] = ()
    partitions: Tuple[EnvelopeElement, ...] = ()

    def for_category(self, category: ElementCategory) -> Tuple[EnvelopeElement, ...]:
        """Return the rows of a category."""
        return getattr(self, category.value)


# =============================================================================
# Internal loads and infiltration
# =============================================================================


@dataclass(frozen=True)
class People:
    count: float = 0.0
    sensible_per_person: float = PEOPLE_SENSIBLE_SEATED  # BTU/hr
    latent_per_person: float = PEOPLE_LATENT_SEATED  # BTU/hr


@dataclass(frozen=True)
class Equipment:
    kw: float = 0.0


@dataclass(frozen=True)
class Lights:
    watts_per_sq_ft: float = 0.0


@dataclass(frozen=True)
class InternalLoads:
    """Occupant, equipment and lighting heat gains."""

    people: People = field(default_factory=People)
    equipment: Equipment = field(default_factory=Equipment)
    lights: Lights = field(default_factory=Lights)

    def for_kind(self, kind: LoadKind):
        """Return the load record of a kind."""
        return getattr(self, kind.value)


@dataclass(frozen=True)
class Opening:
    """A door, window, crack or vent through which air leaks."""

    READ_ONLY_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"id"})

    id: int = 0
    thru: OpeningType = OpeningType.DOOR
    nos: float = 0.0
    area: float = 0.0  # ft²
    width: float = 0.0  # ft
    height: float = 0.0  # ft
    pressure: float = 0.0  # in.wg
    infil_cfm: float = 0.0
    exfil_cfm: float = 0.0


@dataclass(frozen=True)
class Infiltration:
    """
    Infiltration openings plus the stored aggregate airflow.

    ``cfm`` is what system sizing reads. The transition engine rewrites it
    whenever ``doors`` changes; ``door_cfm`` is the same sum evaluated on
    read.
    """

    doors: Tuple[Opening, ...] = ()
    cfm: float = 0.0

    @property
    def door_cfm(self) -> float:
        """Sum of infiltration CFM across all openings."""
        return sum(door.infil_cfm for door in self.doors)


# =============================================================================
# Root document
# =============================================================================


@dataclass(frozen=True)
class ProjectState:
    """The complete project document."""

    project: ProjectInfo = field(default_factory=ProjectInfo)
    ahus: Tuple[AhuConfiguration, ...] = ()
    room: Room = field(default_factory=Room)
    climate: Climate = field(default_factory=Climate)
    elements: Elements = field(default_factory=Elements)
    internal_loads: InternalLoads = field(default_factory=InternalLoads)
    infiltration: Infiltration = field(default_factory=Infiltration)
    system_design: SystemDesign = field(default_factory=SystemDesign)
    # next id handed out to a new AHU, envelope row or opening
    next_id: int = 1


def default_project_state() -> ProjectState:
    """
    Build the canonical default project document.

    A 150 ft² × 10 ft zone with one window, one wall and one roof, four
    seated occupants, 0.5 kW of equipment and office lighting, served by a
    single AHU.
    """
    return ProjectState(
        project=ProjectInfo(),
        ahus=(AhuConfiguration(id=4),),
        room=Room(
            name="Zone 1",
            floor_area=150.0,
            height=10.0,
            volume=1500.0,
            min_air_changes=0.5,
            pressure=PressureRegime.POSITIVE,
        ),
        climate=Climate(
            outside=OutsideConditions(
                summer=OutsideCondition(
                    db=105.0, wb=78.0, rh=40.0, dp=69.0, gr=100.0, time="15:00", month="May"
                ),
                monsoon=OutsideCondition(
                    db=95.0, wb=82.0, rh=65.0, dp=79.0, gr=150.0, time="15:00", month="Aug"
                ),
                winter=OutsideCondition(
                    db=55.0, wb=48.0, rh=60.0, dp=41.0, gr=40.0, time="06:00", month="Dec"
                ),
            ),
            # standard indoor comfort, 75°F / 50% RH
            inside=InsideCondition(db=75.0, rh=50.0, dp=55.0, gr=65.0),
        ),
        elements=Elements(
            glass=(
                EnvelopeElement(
                    id=1,
                    label="North Window",
                    area=40.0,
                    u_value=0.85,  # single pane
                    diff=SeasonalValues(summer=35.0, monsoon=30.0, winter=10.0),
                ),
            ),
            walls=(
                EnvelopeElement(
                    id=2,
                    label="North Wall",
                    area=120.0,
                    u_value=0.35,  # 9" brick
                    diff=SeasonalValues(summer=25.0, monsoon=20.0, winter=40.0),
                ),
            ),
            roof=(
                EnvelopeElement(
                    id=3,
                    label="Exposed Roof",
                    area=150.0,
                    u_value=0.22,
                    diff=SeasonalValues(summer=45.0, monsoon=35.0, winter=20.0),
                ),
            ),
        ),
        internal_loads=InternalLoads(
            people=People(
                count=4.0,
                sensible_per_person=PEOPLE_SENSIBLE_SEATED,
                latent_per_person=PEOPLE_LATENT_SEATED,
            ),
            equipment=Equipment(kw=0.5),
            lights=Lights(watts_per_sq_ft=LPD_OFFICE),
        ),
        infiltration=Infiltration(doors=(), cfm=0.0),
        system_design=SystemDesign(),
        next_id=5,
    )
