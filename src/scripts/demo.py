"""
Print premium breakdowns for a handful of sample drivers.

Usage:
  python -m src.scripts.demo
"""

from __future__ import annotations

from typing import List, Optional

from src.rating.engine import RatingEngine
from src.rating.premium import Premium
from src.rating.profile import DriverProfile
from src.utils.config import get_settings
from src.utils.log import configure_logging

SAMPLE_PROFILES: List[DriverProfile] = [
    DriverProfile(age=30, vehicle_make="Toyota", vehicle_model="Camry", accidents_in_last_five_years=0),
    DriverProfile(age=17, vehicle_make="Ferrari", vehicle_model="488", accidents_in_last_five_years=2),
    DriverProfile(age=22, vehicle_make="Ford", vehicle_model="Explorer", accidents_in_last_five_years=1),
    DriverProfile(age=70, vehicle_make="BMW", vehicle_model="X5", accidents_in_last_five_years=0),
]


def format_premium(profile: DriverProfile, premium: Premium, currency: str) -> str:
    category = premium.vehicle_category.value if premium.vehicle_category else "unclassified"
    lines = [
        f"Driver: age {profile.age}, {profile.vehicle_make} {profile.vehicle_model}, "
        f"{profile.accidents_in_last_five_years} accident(s)",
        f"  Vehicle category : {category}",
        f"  Base rate        : {premium.base_rate:.2f} {currency}",
    ]
    for adj in premium.adjustments:
        lines.append(f"  {adj.label:<17}: {adj.amount:+.2f} ({adj.explanation})")
    lines.append(f"  Total            : {premium.total:.2f} {currency}")
    return "\n".join(lines)


def main(profiles: Optional[List[DriverProfile]] = None) -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    engine = RatingEngine()
    for profile in profiles or SAMPLE_PROFILES:
        premium = engine.calculate_premium(profile)
        print(format_premium(profile, premium, settings.currency))
        print()


if __name__ == "__main__":
    main()
