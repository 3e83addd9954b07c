"""
Enumerations for segment mean shift directions

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class ShiftDirection(str, Enum):
    up = "up"
    down = "down"
    none = "none"

    @classmethod
    def between(cls, before: float, after: float) -> ShiftDirection:
        if after > before:
            return cls.up
        if after < before:
            return cls.down
        return cls.none
