from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .lexicon import DEFAULT_LEXICON, Lexicon, lexicon_from_dict


@dataclass(frozen=True, slots=True)
class ScoringThresholds:
    """Ratio boundaries (percent) for the three verdict tiers."""

    ok_below: float = 5.0
    overload_above: float = 20.0


@dataclass(slots=True)
class FluffAnalyzerConfig:
    """Configuration options for the fluff analyzer."""

    thresholds: ScoringThresholds = field(default_factory=ScoringThresholds)
    merge_touching: bool = False
    normalize_whitespace: bool = False
    sentence_rewrites: bool = True
    max_suggestions: int = 8
    sample_limit: int = 10
    highlight_tag: str = "mark"
    highlight_class: str | None = None
    lexicon: Lexicon = DEFAULT_LEXICON

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["thresholds"] = asdict(self.thresholds)
        data["lexicon"] = self.lexicon.to_dict()
        return data


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {f.name for f in fields(FluffAnalyzerConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "thresholds" in data:
        value = data["thresholds"]
        if isinstance(value, ScoringThresholds):
            kwargs["thresholds"] = value
        elif isinstance(value, Mapping):
            kwargs["thresholds"] = _build_thresholds(value)
        else:
            raise ValueError("'thresholds' must be a mapping.")
    if "lexicon" in data:
        value = data["lexicon"]
        if isinstance(value, Lexicon):
            kwargs["lexicon"] = value
        elif isinstance(value, Mapping):
            kwargs["lexicon"] = lexicon_from_dict(value)
        elif value is None:
            kwargs.pop("lexicon")
        else:
            raise ValueError("'lexicon' must be a mapping.")
    return kwargs


def _build_thresholds(data: Mapping[str, Any]) -> ScoringThresholds:
    allowed = {f.name for f in fields(ScoringThresholds)}
    filtered = {key: float(data[key]) for key in data if key in allowed}
    thresholds = ScoringThresholds(**filtered)
    if thresholds.ok_below > thresholds.overload_above:
        raise ValueError("'ok_below' must not exceed 'overload_above'.")
    return thresholds


def config_from_dict(data: Mapping[str, Any] | None) -> FluffAnalyzerConfig:
    """Build a FluffAnalyzerConfig from a dictionary-like input."""
    if data is None:
        return FluffAnalyzerConfig()
    return FluffAnalyzerConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> FluffAnalyzerConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> FluffAnalyzerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return FluffAnalyzerConfig()
    return config_from_yaml(path)
