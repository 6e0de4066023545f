from __future__ import annotations

import copy
import os
import tomllib as toml
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from numkernel.errors import ConfigError
from numkernel.runtime import DEFAULTS


@dataclass
class Settings:
    """
    Wrap the full TOML dict (without the [_PROFILE_] section), merged over the
    built-in defaults. .as_dict() feeds runtime.apply().

      - name:        resolved profile name (file stem if not given in [_PROFILE_])
      - description: one-line description from [_PROFILE_] or "(no description)"
    """
    data: dict[str, Any]
    name: str
    description: str
    _source: Path | None = None

    def as_dict(self) -> dict[str, Any]:
        return self.data


# --- Paths -----------------------------------------------------------------

def workspace_dir() -> Path:
    env = os.environ.get("NUMKERNEL_HOME")
    if env:
        return Path(env).expanduser().resolve()
    return (Path.home() / ".numkernel").resolve()


def _profiles_dir() -> Path:
    return workspace_dir() / "profiles"


def _profile_path(name: str) -> Path:
    return _profiles_dir() / f"{name}.toml"


# --- I/O -------------------------------------------------------------------


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return toml.load(f)
    except (OSError, toml.TOMLDecodeError) as e:
        lineno = getattr(e, "lineno", None)
        colno = getattr(e, "colno", None)
        msg = getattr(e, "msg", str(e))
        where = []
        if lineno is not None:
            where.append(f"line {lineno}")
        if colno is not None:
            where.append(f"column {colno}")
        loc = f" (at {', '.join(where)})" if where else ""
        # No traceback chaining
        raise ConfigError(f"reading {path.name}: {msg}{loc}.") from None


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    out = copy.deepcopy(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def _sanitize_oneline(s: str) -> str:
    return " ".join(str(s).split()) or "(no description)"


def _split_profile_data(raw: dict[str, Any], fallback_name: str) -> tuple[dict[str, Any], str, str]:
    """
    Extract [_PROFILE_] meta (name, description) and return:
      (settings_without_profile, resolved_name, resolved_description)
    """
    meta = raw.get("_PROFILE_") or {}
    data = {k: v for k, v in raw.items() if k != "_PROFILE_"}
    name = str(meta.get("name") or fallback_name)
    description = _sanitize_oneline(str(meta.get("description") or ""))
    return data, name, description


def _validate(data: dict[str, Any], source: str) -> None:
    checks = (
        ("BIGINT", "MAX_DIGITS"),
        ("SIEVE", "MAX_LIMIT"),
    )
    for section, key in checks:
        v = (data.get(section) or {}).get(key)
        if isinstance(v, bool) or not isinstance(v, int) or v < 1:
            raise ConfigError(f"{source}: {section}.{key} must be a positive integer, got {v!r}.")
    dbg = (data.get("BEHAVIOUR") or {}).get("DEBUG")
    if not isinstance(dbg, bool):
        raise ConfigError(f"{source}: BEHAVIOUR.DEBUG must be true or false, got {dbg!r}.")


# --- Public API ------------------------------------------------------------


def list_all_profiles() -> list[str]:
    """Return the list of available profile *names* (filename stems)."""
    pdir = _profiles_dir()
    if not pdir.exists():
        return []
    return sorted(p.stem for p in pdir.glob("*.toml"))


def has_profile(name: str) -> bool:
    return _profile_path(name).exists()


def default_settings() -> Settings:
    return Settings(data=copy.deepcopy(DEFAULTS), name="default", description="built-in defaults")


def load_settings(name: str | None) -> Settings:
    """
    Load a profile by name (default 'default'), strip the [_PROFILE_] metadata,
    merge it over the built-in defaults and validate the known keys.

    A missing 'default' profile yields the built-in defaults; any other
    missing profile raises FileNotFoundError.
    """
    if not name:
        name = "default"

    path = _profile_path(name)
    if not path.exists():
        if name == "default":
            return default_settings()
        raise FileNotFoundError(f"Profile '{name}' not found at {path}")

    raw = _load_toml(path)
    data, resolved_name, description = _split_profile_data(raw, path.stem)
    data = _merge(DEFAULTS, data)
    _validate(data, path.name)

    return Settings(
        data=data,
        name=resolved_name,
        description=description,
        _source=path,
    )
