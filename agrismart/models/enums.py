"""Closed vocabularies shared by the reference tables, schemas and services.

Member names are Python identifiers; values are the labels shown on the
dashboard and accepted over the API, so they keep their display casing.
"""

from enum import StrEnum

# ── Prediction enums ────────────────────────────────────────────────────────


class InvestmentTierEnum(StrEnum):
    """Input spend level; drives expenses per acre and the yield multiplier."""

    low = "Low"
    medium = "Medium"
    high = "High"
    premium = "Premium"


class ConfidenceLabelEnum(StrEnum):
    """Qualitative tag derived from the investment tier alone."""

    high = "High"
    medium_high = "Medium-High"
    medium = "Medium"
    low_medium = "Low-Medium"


# ── Soil enums ──────────────────────────────────────────────────────────────


class SoilTypeEnum(StrEnum):
    clay = "Clay"
    sandy = "Sandy"
    loamy = "Loamy"
    silty = "Silty"
    peaty = "Peaty"
    chalky = "Chalky"
    saline = "Saline"


class FieldStatusEnum(StrEnum):
    """Overall soil condition of a monitored field."""

    excellent = "Excellent"
    good = "Good"
    needs_attention = "Needs Attention"


class ReadingLevelEnum(StrEnum):
    """Assessment of a single soil reading against its target band."""

    low = "Low"
    optimal = "Optimal"
    high = "High"
    adjust = "Adjust"
    good = "Good"
    monitor = "Monitor"


# ── Crop health enums ───────────────────────────────────────────────────────


class CropHealthEnum(StrEnum):
    excellent = "Excellent"
    good = "Good"
    needs_attention = "Needs Attention"
    poor = "Poor"


class GrowthStageEnum(StrEnum):
    germination = "Germination"
    seedling = "Seedling"
    vegetative = "Vegetative"
    flowering = "Flowering"
    fruit_development = "Fruit Development"
    grain_development = "Grain Development"
    maturation = "Maturation"
    harvest_ready = "Harvest Ready"


# ── Disease enums ───────────────────────────────────────────────────────────


class DiseaseTypeEnum(StrEnum):
    fungal = "Fungal"
    bacterial = "Bacterial"
    viral = "Viral"
    oomycete = "Oomycete"


class SeverityEnum(StrEnum):
    low = "Low"
    medium = "Medium"
    high = "High"
    critical = "Critical"


# ── Alerts & history ────────────────────────────────────────────────────────


class AlertPriorityEnum(StrEnum):
    low = "low"
    medium = "medium"
    high = "high"


class SuitabilityEnum(StrEnum):
    """Weather-driven planting suitability for a crop."""

    excellent = "Excellent"
    good = "Good"
    moderate = "Moderate"
    poor = "Poor"


class SeasonStatusEnum(StrEnum):
    completed = "Completed"
    in_progress = "In Progress"
    planned = "Planned"
