"""Domain services for calculations.

Services contain pure calculation logic and operate on value objects.
"""

from .activity_calculator import ActivityCalculator
from .cooking_converter import CookingConverter
from .credit_card_calculator import CreditCardCalculator
from .currency_converter import CurrencyConverter
from .earnings_calculator import EarningsCalculator
from .energy_calculator import EnergyCalculator
from .growth_calculator import GrowthCalculator
from .health_calculator import HealthCalculator
from .home_garden_calculator import HomeGardenCalculator
from .life_event_calculator import LifeEventCalculator
from .loan_calculator import LoanCalculator
from .rate_calculator import RateCalculator
from .retirement_calculator import RetirementCalculator
from .unit_converter import UnitConverter

__all__ = [
    "ActivityCalculator",
    "CookingConverter",
    "CreditCardCalculator",
    "CurrencyConverter",
    "EarningsCalculator",
    "EnergyCalculator",
    "GrowthCalculator",
    "HealthCalculator",
    "HomeGardenCalculator",
    "LifeEventCalculator",
    "LoanCalculator",
    "RateCalculator",
    "RetirementCalculator",
    "UnitConverter",
]
