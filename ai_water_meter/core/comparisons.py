"""
Everyday comparisons for energy and water figures.
"""

from dataclasses import dataclass
from typing import List

GLASS_OF_WATER_ML = 250.0
LED_BULB_KW = 0.01  # 10 W
SHOWER_LITRES = 8.0
HOUSEHOLD_DAILY_KWH = 5.0


def energy_comparison(kwh: float) -> str:
    """Describe an amount of energy in everyday terms."""
    watt_hours = kwh * 1000
    if watt_hours < 1:
        return f"Your energy usage ({watt_hours:.3f} Wh) is less than charging a smartphone."
    if watt_hours < 5:
        return (
            f"Your energy usage ({watt_hours:.2f} Wh) is roughly equivalent to the energy "
            f"needed to pump {watt_hours * 15:.1f} liters of water from a well."
        )
    if watt_hours < 15:
        return (
            f"Your energy usage ({watt_hours:.2f} Wh) is equivalent to powering an LED bulb "
            f"for about {watt_hours / 10:.1f} hours."
        )
    if watt_hours < 100:
        return (
            f"Your energy usage ({watt_hours:.1f} Wh) could run a laptop for about "
            f"{watt_hours / 50:.1f} hours."
        )
    return (
        f"Your energy usage ({kwh:.3f} kWh) is approximately "
        f"{kwh / HOUSEHOLD_DAILY_KWH * 100:.1f}% of what an average US household uses daily."
    )


def water_comparison(water_ml: float) -> str:
    """Describe an amount of water in everyday terms."""
    if water_ml < 50:
        return f"You've used about {water_ml:.1f} ml of water, less than a small shot glass."
    if water_ml < 250:
        return f"You've used about {water_ml:.1f} ml of water, equivalent to a cup of coffee."
    if water_ml < 1000:
        return f"You've used about {water_ml:.1f} ml of water, similar to a small bottle of water."
    litres = water_ml / 1000
    return (
        f"You've used about {litres:.2f} liters of water, equivalent to "
        f"{litres / SHOWER_LITRES:.2f} showers."
    )


def eco_comparisons(kwh: float, water_ml: float) -> List[str]:
    """Energy comparison followed by water comparison."""
    return [energy_comparison(kwh), water_comparison(water_ml)]


@dataclass(frozen=True)
class PromptEquivalents:
    """Per-prompt equivalents shown after an analysis."""
    litres: float
    glasses_of_water: float
    led_bulb_hours: float


def prompt_equivalents(kwh: float, water_ml: float) -> PromptEquivalents:
    return PromptEquivalents(
        litres=water_ml / 1000,
        glasses_of_water=water_ml / GLASS_OF_WATER_ML,
        led_bulb_hours=kwh / LED_BULB_KW,
    )
