"""
Test configuration package: pytest markers and deterministic test doubles.
"""

from .fixtures import FROZEN_NOW, FrozenClock, SequentialIds

__all__ = ["FROZEN_NOW", "FrozenClock", "SequentialIds"]
