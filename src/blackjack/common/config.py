# src/blackjack/common/config.py

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import DEALER_POLICY_CHASE, VALID_DEALER_POLICIES

# Environment switches:
#   BJ_SEED=<int>            reproducible shuffles
#   BJ_DEALER_POLICY=chase|house
#   BJ_CARD_ART=1            draw card faces instead of short tokens
#   BJ_COLOR=0               plain text, no ANSI colours


class ConfigError(ValueError):
    """Raised when an environment switch holds an unusable value."""
    pass


def _flag(raw: Optional[str], default: bool) -> bool:
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class GameConfig:
    seed: Optional[int] = None
    dealer_policy: str = DEALER_POLICY_CHASE
    card_art: bool = False
    color: bool = True

    def __post_init__(self) -> None:
        if self.dealer_policy not in VALID_DEALER_POLICIES:
            raise ConfigError(
                f"Unknown dealer policy {self.dealer_policy!r}, "
                f"expected one of {sorted(VALID_DEALER_POLICIES)}"
            )

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "GameConfig":
        env = os.environ if env is None else env

        seed: Optional[int] = None
        raw_seed = env.get("BJ_SEED", "").strip()
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError as e:
                raise ConfigError(f"BJ_SEED must be an integer, got {raw_seed!r}") from e

        policy = env.get("BJ_DEALER_POLICY", DEALER_POLICY_CHASE).strip().lower() or DEALER_POLICY_CHASE

        return cls(
            seed=seed,
            dealer_policy=policy,
            card_art=_flag(env.get("BJ_CARD_ART"), False),
            color=_flag(env.get("BJ_COLOR"), True),
        )
