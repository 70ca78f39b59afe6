"""Resolution pipeline configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from storeview.domain.model import UnsupportedKindPolicy

from .env import env_choice


@dataclass(frozen=True, slots=True)
class PipelineConfig:
    unsupported_kind_policy: UnsupportedKindPolicy = UnsupportedKindPolicy.SKIP


def get_pipeline_config() -> PipelineConfig:
    policy = env_choice(
        "STOREVIEW_UNSUPPORTED_KIND",
        choices={policy.value for policy in UnsupportedKindPolicy},
        default=UnsupportedKindPolicy.SKIP.value,
    )
    return PipelineConfig(unsupported_kind_policy=UnsupportedKindPolicy(policy))
