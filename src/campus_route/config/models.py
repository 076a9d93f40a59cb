import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- COSTS & METRICS ---------------------


class CostModelModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    carbon_baseline_ppm: float = 350.0
    carbon_weight: float = 0.5
    lighting_weight: float = 20.0
    no_cctv_penalty: float = 50.0
    crowd_weight: float = 10.0

    @field_validator(
        "carbon_weight", "lighting_weight", "no_cctv_penalty", "crowd_weight"
    )
    @classmethod
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        # negative weights would break the shortest-path relaxation
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v


class MetricsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    walk_kmh: float = 5.0
    cycle_kmh: float = 15.0
    other_kmh: float = 5.0
    car_g_per_km: float = 120.0
    other_mode_credit: float = 0.7

    @field_validator("walk_kmh", "cycle_kmh", "other_kmh")
    @classmethod
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v

    @field_validator("other_mode_credit")
    @classmethod
    def _fraction(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("other_mode_credit must be within [0, 1]")
        return v


class SearchLimitsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    max_frontier: int | None = Field(default=None, gt=0)
    max_expansions: int | None = Field(default=None, gt=0)
    deadline_s: float | None = Field(default=None, gt=0)


# ----------------- SNAPSHOT PROVIDERS ---------------------


class ProviderMemoryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["memory"] = "memory"
    nodes: list[dict] = Field(default_factory=list)  # campus_nodes rows
    edges: list[dict] = Field(default_factory=list)  # campus_edges rows


class ProviderJsonFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["json_file"] = "json_file"
    file: str

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


ProviderUnion = Annotated[
    ProviderMemoryModel | ProviderJsonFileModel,
    Field(discriminator="kind"),
]


# ------------------------------------------------------------------


class PlannerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "campus"
    log: LogModel = LogModel()
    costs: CostModelModel = CostModelModel()
    metrics: MetricsModel = MetricsModel()
    limits: SearchLimitsModel = SearchLimitsModel()
    provider: ProviderUnion = Field(default_factory=ProviderMemoryModel)
    parallel_searches: bool = False
    strict_no_path: bool = False
