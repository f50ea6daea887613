from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    escalate_on_parse_error: bool = False
    process_browser_specific_properties: bool = False
    retain_duplicate_properties: bool = False
