# src/canvas_kit/research/schemas.py

"""Typed payloads produced by the framework parsers.

One model per framework. Field names are snake_case in Python and dump
to the camelCase keys used by stored entities (`by_alias=True`).
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Level = Literal["high", "medium", "low"]


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Market sizing
# ============================================================================


class MarketValue(_Model):
    value: float | None = None
    currency: str = "USD"
    unit: Literal["annual", "monthly"] = "annual"
    methodology: str | None = None
    sources: list[str] | None = None


class GrowthRate(_Model):
    rate: float
    period: str = "annual"


class MarketSizingData(_Model):
    tam: MarketValue
    sam: MarketValue
    som: MarketValue
    growth_rate: GrowthRate | None = None


# ============================================================================
# Competitive analysis
# ============================================================================


class Competitor(_Model):
    name: str
    strengths: list[str]
    weaknesses: list[str]


class OurPosition(_Model):
    differentiators: list[str]
    gaps: list[str]
    opportunities: list[str]


class CompetitiveAnalysisData(_Model):
    competitors: list[Competitor]
    our_position: OurPosition | None = None


# ============================================================================
# User persona
# ============================================================================


class Demographics(_Model):
    age: str | None = None
    occupation: str | None = None
    location: str | None = None


class Behavior(_Model):
    goals: list[str]
    frustrations: list[str]
    motivations: list[str]


class Persona(_Model):
    name: str
    demographics: Demographics
    behavior: Behavior


class UserPersonaData(_Model):
    personas: list[Persona]


# ============================================================================
# SWOT
# ============================================================================


class SwotItem(_Model):
    item: str
    impact: Level | None = None


class ThreatItem(_Model):
    item: str
    likelihood: Level | None = None


class SwotAnalysisData(_Model):
    strengths: list[SwotItem]
    weaknesses: list[SwotItem]
    opportunities: list[SwotItem]
    threats: list[ThreatItem]


# ============================================================================
# Business model canvas
# ============================================================================


class CustomerSegment(_Model):
    segment: str


class ValueProposition(_Model):
    proposition: str


class Channel(_Model):
    channel: str


class CustomerRelationship(_Model):
    relationship: str


class RevenueStream(_Model):
    stream: str


class KeyResource(_Model):
    resource: str


class KeyActivity(_Model):
    activity: str


class KeyPartner(_Model):
    partner: str


class Cost(_Model):
    cost: str


class BusinessModelCanvasData(_Model):
    customer_segments: list[CustomerSegment]
    value_propositions: list[ValueProposition]
    channels: list[Channel]
    customer_relationships: list[CustomerRelationship]
    revenue_streams: list[RevenueStream]
    key_resources: list[KeyResource]
    key_activities: list[KeyActivity]
    key_partnerships: list[KeyPartner]
    cost_structure: list[Cost]


# ============================================================================
# Lean canvas
# ============================================================================


class Problem(_Model):
    problem: str


class Feature(_Model):
    feature: str


class KeyMetric(_Model):
    metric: str


class UniqueValueProposition(_Model):
    proposition: str


class LeanCanvasData(_Model):
    problem: list[Problem]
    customer_segments: list[CustomerSegment]
    unique_value_proposition: UniqueValueProposition
    solution: list[Feature]
    channels: list[str]
    revenue_streams: list[RevenueStream]
    cost_structure: list[Cost]
    key_metrics: list[KeyMetric]
    unfair_advantage: str | None = None


# ============================================================================
# Value proposition canvas
# ============================================================================


class CustomerJob(_Model):
    job: str


class Pain(_Model):
    pain: str


class Gain(_Model):
    gain: str


class ProductOrService(_Model):
    item: str


class PainReliever(_Model):
    reliever: str


class GainCreator(_Model):
    creator: str


class CustomerProfile(_Model):
    customer_jobs: list[CustomerJob]
    pains: list[Pain]
    gains: list[Gain]


class ValueMap(_Model):
    products_and_services: list[ProductOrService]
    pain_relievers: list[PainReliever]
    gain_creators: list[GainCreator]


class ValuePropositionCanvasData(_Model):
    customer_profile: CustomerProfile
    value_map: ValueMap


class EmptyData(_Model):
    """Payload of the unknown-framework sentinel result. Dumps to `{}`."""


FrameworkData = (
    MarketSizingData
    | CompetitiveAnalysisData
    | UserPersonaData
    | SwotAnalysisData
    | BusinessModelCanvasData
    | LeanCanvasData
    | ValuePropositionCanvasData
    | EmptyData
)
