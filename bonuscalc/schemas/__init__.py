from bonuscalc.schemas.calculator import (
    BonusResultOut,
    CompareIn,
    ComparisonOut,
    PerformanceIn,
    RatesPercentIn,
    RecommendationOut,
    ScenarioOut,
)
from bonuscalc.schemas.settings import RateIn, SalaryIn, SettingsOut, TierRowOut, TierTableOut

__all__ = [
    "BonusResultOut",
    "CompareIn",
    "ComparisonOut",
    "PerformanceIn",
    "RatesPercentIn",
    "RecommendationOut",
    "ScenarioOut",
    "RateIn",
    "SalaryIn",
    "SettingsOut",
    "TierRowOut",
    "TierTableOut",
]
