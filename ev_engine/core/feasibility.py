"""Feasibility scoring for the EV performance engine.

The score starts at 100 and every threshold rule that fires subtracts a
fixed penalty and records one diagnostic message.  Rules are
independent; any number of them may fire together.  The score is
floored at 0 and mapped to a qualitative rating.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from ev_engine.core.units import round_half_up, round_int

MAX_SCORE: int = 100

# (minimum score, rating), checked in order.
RATING_BANDS: tuple[tuple[int, str], ...] = (
    (85, "Excellent"),
    (70, "Good"),
    (55, "Fair"),
)
FALLBACK_RATING: str = "Poor"


@dataclass(frozen=True)
class FeasibilityInputs:
    """Quantities the penalty rules look at."""

    power_to_weight: float
    battery_capacity: float
    consumption_wh_km: float
    acceleration_0_to_100: float
    total_mass: float
    drag_coefficient: float
    range_efficiency: float | None


@dataclass(frozen=True)
class PenaltyRule:
    """One threshold rule: a predicate, its penalty and its message."""

    penalty: int
    issue: str
    applies: Callable[[FeasibilityInputs], bool]


def _poor_range_ratio(inputs: FeasibilityInputs) -> bool:
    return inputs.range_efficiency is not None and inputs.range_efficiency < 4.0


PENALTY_RULES: tuple[PenaltyRule, ...] = (
    PenaltyRule(
        15,
        "High power-to-weight ratio may increase cost",
        lambda i: i.power_to_weight > 300.0,
    ),
    PenaltyRule(
        20,
        "Large battery capacity increases weight and cost",
        lambda i: i.battery_capacity > 100.0,
    ),
    PenaltyRule(
        15,
        "High energy consumption reduces efficiency",
        lambda i: i.consumption_wh_km > 250.0,
    ),
    PenaltyRule(
        10,
        "Slow acceleration may not meet market expectations",
        lambda i: i.acceleration_0_to_100 > 12.0,
    ),
    PenaltyRule(
        15,
        "High vehicle weight affects performance and efficiency",
        lambda i: i.total_mass > 2500.0,
    ),
    PenaltyRule(
        10,
        "High drag coefficient reduces efficiency at high speeds",
        lambda i: i.drag_coefficient > 0.35,
    ),
    PenaltyRule(
        10,
        "Poor range-to-battery ratio indicates inefficiency",
        _poor_range_ratio,
    ),
)


@dataclass(frozen=True)
class FeasibilityResult:
    """Feasibility assessment.

    Attributes:
        score: 0-100 composite score.
        rating: ``Excellent``, ``Good``, ``Fair`` or ``Poor``.
        issues: One message per rule that fired, in rule order.
        power_to_weight: Required power per kg of total mass, in W/kg.
        range_efficiency: Target range per kWh of battery, in km/kWh.
    """

    score: int
    rating: str
    issues: tuple[str, ...] = field(default_factory=tuple)
    power_to_weight: int = 0
    range_efficiency: float = 0.0

    def to_dict(self) -> dict[str, object]:
        """Export keys as used by the report and JSON output."""
        return {
            "score": self.score,
            "rating": self.rating,
            "issues": list(self.issues),
            "powerToWeight": self.power_to_weight,
            "rangeEfficiency": self.range_efficiency,
        }


def rating_for(score: int) -> str:
    """Map a score to its rating band."""
    for threshold, label in RATING_BANDS:
        if score >= threshold:
            return label
    return FALLBACK_RATING


def feasibility(
    required_power: float,
    battery_capacity: float,
    consumption_wh_km: float,
    mass: float,
    acceleration_0_to_100: float,
    drag_coefficient: float,
    range_km: float,
    additional_weight: float = 0.0,
) -> FeasibilityResult:
    """Score how practical a specification is.

    Args:
        required_power: Motor rating in kW.
        battery_capacity: Battery capacity in kWh.
        consumption_wh_km: Consumption in Wh/km.
        mass: Curb mass in kg.
        acceleration_0_to_100: 0-100 km/h time in s.
        drag_coefficient: Cd.
        range_km: Target range in km.
        additional_weight: Payload in kg.

    Returns:
        :class:`FeasibilityResult`.
    """
    total_mass: float = mass + additional_weight
    power_to_weight: float = required_power / total_mass * 1000.0
    # Zero capacity: ratio is unbounded, reported as 0.0.
    range_efficiency: float | None = (
        range_km / battery_capacity if battery_capacity > 0.0 else None
    )

    inputs = FeasibilityInputs(
        power_to_weight=power_to_weight,
        battery_capacity=battery_capacity,
        consumption_wh_km=consumption_wh_km,
        acceleration_0_to_100=acceleration_0_to_100,
        total_mass=total_mass,
        drag_coefficient=drag_coefficient,
        range_efficiency=range_efficiency,
    )

    score: int = MAX_SCORE
    issues: list[str] = []
    for rule in PENALTY_RULES:
        if rule.applies(inputs):
            score -= rule.penalty
            issues.append(rule.issue)
    score = max(0, score)

    return FeasibilityResult(
        score=score,
        rating=rating_for(score),
        issues=tuple(issues),
        power_to_weight=round_int(power_to_weight),
        range_efficiency=(
            round_half_up(range_efficiency, 1) if range_efficiency is not None else 0.0
        ),
    )
