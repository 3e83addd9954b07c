"""
Constants and configuration for cbseg.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Optional

from pydantic_settings import BaseSettings


CBSEG_SHUFFLES: int = int(os.getenv("CBSEG_SHUFFLES", "1000"))
CBSEG_SIGNIFICANCE: float = float(os.getenv("CBSEG_SIGNIFICANCE", "0.05"))

# splits closer than this to either edge of a range are snapped onto the edge
CBSEG_EDGE_MARGIN: int = int(os.getenv("CBSEG_EDGE_MARGIN", "5"))
# splits narrower than this are never trusted
CBSEG_MIN_SPLIT_LENGTH: int = int(os.getenv("CBSEG_MIN_SPLIT_LENGTH", "5"))

CBSEG_LOG_LEVEL = os.getenv("CBSEG_LOG_LEVEL", "WARNING").upper()


class Settings(BaseSettings):
    # permutation test defaults
    cbs_shuffles: int = CBSEG_SHUFFLES
    cbs_significance: float = CBSEG_SIGNIFICANCE
    # None draws fresh entropy for every call
    cbs_seed: Optional[int] = None

    # boundary heuristics
    cbs_edge_margin: int = CBSEG_EDGE_MARGIN
    cbs_min_split_length: int = CBSEG_MIN_SPLIT_LENGTH

    log_level: str = CBSEG_LOG_LEVEL

    model_config = {
        "env_prefix": "CBSEG_",
        "extra": "ignore",
    }


settings = Settings()
