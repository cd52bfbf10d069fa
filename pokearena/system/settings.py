from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Mapping, Optional
from pokearena.core.logging import logger
from pokearena.battle.core import DamagePolicy

SETTINGS_FILENAME = ".pokearena_settings.json"
TRANSPORTS = ("stdio", "http", "both")

@dataclass
class SettingsData:
    log_level: str = "INFO"            # DEBUG / INFO / WARN / ERROR
    debug: bool = False                # keep INFO lines when serving
    transport: str = "stdio"           # stdio | http | both
    host: str = "127.0.0.1"
    port: int = 3000
    effectiveness_cap: Optional[float] = 2.0   # None disables the cap
    halve_damage: bool = True

    def normalize(self):
        self.log_level = str(self.log_level).upper()
        if self.log_level not in {"DEBUG","INFO","WARN","ERROR"}:
            self.log_level = "INFO"
        if self.transport not in TRANSPORTS:
            self.transport = "stdio"
        try:
            self.port = int(self.port)
        except (TypeError, ValueError):
            self.port = 3000
        if not (0 < self.port < 65536):
            self.port = 3000
        if self.effectiveness_cap is not None:
            try:
                self.effectiveness_cap = float(self.effectiveness_cap)
            except (TypeError, ValueError):
                self.effectiveness_cap = 2.0
            if self.effectiveness_cap <= 0:
                self.effectiveness_cap = 2.0
        self.debug = bool(self.debug)
        self.halve_damage = bool(self.halve_damage)

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> "Settings":
        path = path or cls._resolve_path()
        data = SettingsData()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                # Backfill missing fields (migration safe)
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                logger.debug("SettingsLoaded", path=str(path))
            except (OSError, ValueError, TypeError, AttributeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
                data = SettingsData()
        cls._apply_env(data, os.environ if env is None else env)
        data.normalize()
        return cls(data, path)

    @staticmethod
    def _apply_env(data: SettingsData, env: Mapping[str, str]):
        if env.get("POKEARENA_TRANSPORT"):
            data.transport = env["POKEARENA_TRANSPORT"].strip().lower()
        if env.get("PORT"):
            data.port = env["PORT"]  # type: ignore[assignment]
        if env.get("POKEARENA_LOG_LEVEL"):
            data.log_level = env["POKEARENA_LOG_LEVEL"]

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2))
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))

    def damage_policy(self) -> DamagePolicy:
        return DamagePolicy(effectiveness_cap=self.data.effectiveness_cap, halve_damage=self.data.halve_damage)

    def effective_log_level(self) -> str:
        """INFO is raised to WARN unless debug is on."""
        lvl = self.data.log_level
        if lvl == "INFO" and not self.data.debug:
            return "WARN"
        return lvl
