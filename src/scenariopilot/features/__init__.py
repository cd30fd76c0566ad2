"""Feature extraction entrypoints."""

from scenariopilot.features.extractor import FeatureExtractor
from scenariopilot.features.flows import derive_user_flows, split_into_steps
from scenariopilot.features.keywords import requirement_keywords, similarity, text_keywords

__all__ = [
    "FeatureExtractor",
    "derive_user_flows",
    "requirement_keywords",
    "similarity",
    "split_into_steps",
    "text_keywords",
]
