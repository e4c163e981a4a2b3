# utils/weight_calculator.py
"""
Eligibility weight calculator.

Pure scoring over one candidate's stored record. No database access here:
callers gather the inputs (see controllers/marks_controller.py) and persist
the result.

Bands are inclusive at their lower bound and evaluated top-down, except the
top band of each grade scale which requires strictly greater than its bound.
Grades are compared as stored; CGPA-scale values are not rescaled.
"""
import logging
from typing import Any, ClassVar, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

# (exclusive top bound, top weight), then (inclusive lower bound, weight)..., fallback
HSC_BANDS = ((95, 5), ((91, 4), (86, 3), (81, 2)), 1)
UG_BANDS = ((90, 10), ((81, 7.5), (71, 5), (60, 3)), 0)
PG_BANDS = ((90, 15), ((81, 12.5), (71, 10), (60, 5)), 0)

MEDIUM_ENGLISH = 5
MEDIUM_TAMIL = 2
MEDIUM_OTHER = 3.5
MPHIL_WEIGHT = 5
MPHIL_PG_DEGREE = "M.Sc"
FIRST_ATTEMPT_WEIGHT = 5
PER_EXPERIENCE = 2
PER_PUBLICATION = 1.5

# largest value that is plausibly a CGPA rather than a percentage
CGPA_SCALE_MAX = 10

_TRUE_STRINGS = {"yes", "true", "1", "y"}


class WeightBreakdown(BaseModel):
    """Nine sub-weights plus their sum. snake_case fields, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    medium_weight: float
    hsc_weight: float
    ug_degree_weight: float
    pg_degree_weight: float
    mphil_weight: float
    ug_first_attempt_weight: float
    pg_first_attempt_weight: float
    experience_weight: float
    publications_weight: float
    total_weight: float

    COMPONENTS: ClassVar[Tuple[str, ...]] = (
        "medium_weight",
        "hsc_weight",
        "ug_degree_weight",
        "pg_degree_weight",
        "mphil_weight",
        "ug_first_attempt_weight",
        "pg_first_attempt_weight",
        "experience_weight",
        "publications_weight",
    )

    @classmethod
    def from_components(cls, **components):
        total = sum(components[name] for name in cls.COMPONENTS)
        return cls(total_weight=total, **components)

    def to_api(self) -> dict:
        return self.model_dump(by_alias=True)

    def to_columns(self) -> dict:
        return self.model_dump()


def _field(record: Any, name: str):
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def parse_grade(value) -> Optional[float]:
    """'87.5', '87.5%', 8.9 -> float; blank or garbage -> None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip().rstrip("%").strip()
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def is_truthy(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def band_weight(grade, bands: Tuple) -> float:
    (top_bound, top_weight), lower_bands, fallback = bands
    value = parse_grade(grade)
    if value is None:
        return fallback
    if value > top_bound:
        return top_weight
    for lower_bound, weight in lower_bands:
        if value >= lower_bound:
            return weight
    return fallback


def medium_weight(tenth_medium, twelfth_medium) -> float:
    tenth = (tenth_medium or "").strip().lower()
    twelfth = (twelfth_medium or "").strip().lower()
    if tenth == "english" and twelfth == "english":
        return MEDIUM_ENGLISH
    if tenth == "tamil" and twelfth == "tamil":
        return MEDIUM_TAMIL
    return MEDIUM_OTHER


def hsc_weight(percentage) -> float:
    return band_weight(percentage, HSC_BANDS)


def ug_degree_weight(percentage) -> float:
    return band_weight(percentage, UG_BANDS)


def pg_degree_weight(percentage) -> float:
    return band_weight(percentage, PG_BANDS)


def mphil_weight(pg_degree, mphil_year) -> float:
    if (pg_degree or "").strip() == MPHIL_PG_DEGREE and mphil_year:
        return MPHIL_WEIGHT
    return 0


def _warn_if_cgpa_scale(education, level: str):
    value = parse_grade(_field(education, f"{level}_cgpa_percentage"))
    if value is not None and 0 < value <= CGPA_SCALE_MAX:
        logger.warning(
            "%s grade %.2f looks like a CGPA; scoring it against percentage bands",
            level, value,
        )


def calculate_weights(
    education: Any,
    experience: Sequence = (),
    publications: Sequence = (),
    phd: Any = None,
) -> WeightBreakdown:
    """
    Score one candidate.

    `education` is a mapping or row exposing the education columns. Only the
    number of `experience` and `publications` entries matters. `phd` is
    accepted with the rest of the record but carries no weight.
    """
    if education is None:
        raise ValueError("education record is required")

    for level in ("twelfth", "ug", "pg"):
        _warn_if_cgpa_scale(education, level)

    experience = list(experience or ())
    publications = list(publications or ())

    return WeightBreakdown.from_components(
        medium_weight=medium_weight(
            _field(education, "tenth_medium"), _field(education, "twelfth_medium")
        ),
        hsc_weight=hsc_weight(_field(education, "twelfth_cgpa_percentage")),
        ug_degree_weight=ug_degree_weight(_field(education, "ug_cgpa_percentage")),
        pg_degree_weight=pg_degree_weight(_field(education, "pg_cgpa_percentage")),
        mphil_weight=mphil_weight(_field(education, "pg_degree"), _field(education, "mphil_year")),
        ug_first_attempt_weight=FIRST_ATTEMPT_WEIGHT if is_truthy(_field(education, "ug_first_attempt")) else 0,
        pg_first_attempt_weight=FIRST_ATTEMPT_WEIGHT if is_truthy(_field(education, "pg_first_attempt")) else 0,
        experience_weight=PER_EXPERIENCE * len(experience),
        publications_weight=PER_PUBLICATION * len(publications),
    )
