"""In-process configuration of the process-wide logging context.

Two entry points are provided:

- :func:`basicConfig` adjusts the global switches from keyword arguments or
  a :class:`BasicConfig` instance.
- :func:`dictConfig` applies a ``logging.config``-flavoured mapping that can
  also create or update scoped loggers.

Level strings accept the same case-insensitive spellings as
:func:`elogging.parse_level`; unrecognised names resolve to ``DISABLED``.

Examples
--------
>>> dictConfig({
...     "version": 1,
...     "global_level": "warn",
...     "behaviour": ["SUPPRESS_REPEATS"],
...     "loggers": {"db": {"level": "trace", "stream": "stdout"}},
... })

"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses
import logging
import sys
import typing as typ

from .behaviour import Behaviour
from .context import get_context
from .writer import Flag

Mapping = cabc.Mapping
Sequence = cabc.Sequence
TextIO = typ.TextIO
Final = typ.Final
cast = typ.cast

if typ.TYPE_CHECKING:
    from .context import LoggingContext
    from .logger import ELogger

_diag = logging.getLogger("elogging")

_STREAMS: Final[frozenset[str]] = frozenset({"stdout", "stderr"})


@dataclasses.dataclass
class BasicConfig:
    """Configuration parameters for :func:`basicConfig`."""

    active: bool | None = None
    level: str | None = None
    flags: int | None = None
    output: typ.TextIO | None = None
    suppress_repeats: bool | None = None
    mimic_stdlog: bool | None = None
    force: bool = False


_BASIC_FIELDS: Final[frozenset[str]] = frozenset(
    field.name for field in dataclasses.fields(BasicConfig)
)


@typ.overload
def basicConfig(config: BasicConfig, /) -> None: ...


@typ.overload
def basicConfig(config: BasicConfig, /, **kwargs: object) -> None: ...


@typ.overload
def basicConfig(**kwargs: object) -> None: ...


def basicConfig(  # noqa: N802
    config: BasicConfig | None = None, /, **kwargs: object
) -> None:
    """Configure the process-wide context.

    Parameters
    ----------
    config : BasicConfig, optional
        Aggregated configuration. Its non-``None`` attributes take
        precedence over keyword arguments.
    **kwargs : object
        Supported keys mirror the dataclass fields.
    active : bool, optional
        Master output switch.
    level : str, optional
        Global override level; ``"disabled"`` removes the override.
    flags : int, optional
        Writer flags for loggers created afterwards.
    output : TextIO, optional
        Output for loggers created afterwards.
    suppress_repeats : bool, optional
        Toggle :attr:`Behaviour.SUPPRESS_REPEATS`.
    mimic_stdlog : bool, optional
        Toggle :attr:`Behaviour.MIMIC_STDLOG`.
    force : bool, default False
        Dispose every registered logger before applying the settings.

    Raises
    ------
    TypeError
        If an unknown keyword is supplied.

    Examples
    --------
        basicConfig(level="info", suppress_repeats=True)
        basicConfig(BasicConfig(active=False))

    """
    unknown = set(kwargs) - _BASIC_FIELDS
    if unknown:
        name = next(iter(sorted(unknown)))
        msg = f"basicConfig() got an unexpected keyword argument {name!r}"
        raise TypeError(msg)

    merged = BasicConfig(**cast("dict[str, typ.Any]", kwargs))
    if config is not None:
        for field in _BASIC_FIELDS - {"force"}:
            value = getattr(config, field)
            if value is not None:
                setattr(merged, field, value)
        merged.force = bool(config.force or merged.force)

    _apply_basic_config(get_context(), merged)


def _apply_basic_config(ctx: LoggingContext, cfg: BasicConfig) -> None:
    """Apply a merged :class:`BasicConfig` to ``ctx``."""
    if cfg.output is not None:
        _validate_stream(cfg.output, "output")
    if cfg.force:
        ctx.dispose_all()
    if cfg.active is not None:
        ctx.set_active(cfg.active)
    if cfg.level is not None:
        ctx.set_global_level(cfg.level)
    if cfg.flags is not None:
        ctx.set_default_flags(cfg.flags)
    if cfg.output is not None:
        ctx.set_default_output(cfg.output)
    _toggle(ctx, Behaviour.SUPPRESS_REPEATS, cfg.suppress_repeats)
    _toggle(ctx, Behaviour.MIMIC_STDLOG, cfg.mimic_stdlog)
    _diag.debug("basicConfig applied: %r", cfg)


def _toggle(ctx: LoggingContext, flag: Behaviour, value: bool | None) -> None:
    if value is None:
        return
    if value:
        ctx.enable(flag)
    else:
        ctx.disable(flag)


def _validate_stream(value: object, name: str) -> None:
    """Ensure ``value`` has a callable ``write`` method."""
    write = getattr(value, "write", None)
    if not callable(write):
        msg = f"{name} must be a writable text stream, got {type(value).__name__}"
        raise TypeError(msg)


# -- dictConfig --------------------------------------------------------------


def _validate_mapping_type(value: object, name: str) -> Mapping[object, object]:
    """Ensure ``value`` is a mapping and not bytes-like."""
    if isinstance(value, (bytes, bytearray)) or not isinstance(value, Mapping):
        msg = f"{name} must be a mapping"
        raise TypeError(msg)
    return cast("Mapping[object, object]", value)


def _validate_string_keys(
    mapping: Mapping[object, object], name: str
) -> Mapping[str, object]:
    """Ensure all keys in ``mapping`` are strings."""
    for key in mapping:
        if not isinstance(key, str):
            msg = f"{name} keys must be strings"
            raise TypeError(msg)
    return cast("Mapping[str, object]", mapping)


def _validate_keys(name: str, data: Mapping[str, object], allowed: set[str]) -> None:
    unknown = set(data) - allowed
    if unknown:
        msg = f"{name} has unsupported keys: {sorted(unknown)!r}"
        raise ValueError(msg)


def _validate_bool(value: object, name: str) -> bool:
    if not isinstance(value, bool):
        msg = f"{name} must be a bool"
        raise TypeError(msg)
    return value


def _validate_level(value: object, name: str) -> str:
    if not isinstance(value, str):
        msg = f"{name} must be a string"
        raise TypeError(msg)
    return value


def _coerce_names(value: object, name: str) -> list[str]:
    """Return ``value`` as a list of strings."""
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(
        value, Sequence
    ):
        msg = f"{name} must be a list or tuple of strings"
        raise TypeError(msg)
    items = cast("Sequence[object]", value)
    if not all(isinstance(item, str) for item in items):
        msg = f"{name} must be a list or tuple of strings"
        raise TypeError(msg)
    return list(cast("Sequence[str]", items))


def _coerce_flags(value: object, name: str) -> Flag:
    """Accept an integer bitmask or a list of :class:`Flag` names."""
    if isinstance(value, bool):
        msg = f"{name} must be an int or a list of flag names"
        raise TypeError(msg)
    if isinstance(value, int):
        if value < 0:
            msg = f"{name} must be non-negative"
            raise ValueError(msg)
        return Flag(value)
    flags = Flag(0)
    for flag_name in _coerce_names(value, name):
        try:
            flags |= Flag[flag_name.upper()]
        except KeyError as exc:
            msg = f"{name} has unknown flag {flag_name!r}"
            raise ValueError(msg) from exc
    return flags


def _coerce_behaviour(value: object) -> Behaviour:
    behaviour = Behaviour(0)
    for flag_name in _coerce_names(value, "behaviour"):
        try:
            behaviour |= Behaviour[flag_name.upper()]
        except KeyError as exc:
            msg = f"behaviour has unknown flag {flag_name!r}"
            raise ValueError(msg) from exc
    return behaviour


def _resolve_stream(value: object, name: str) -> TextIO:
    if not isinstance(value, str) or value.lower() not in _STREAMS:
        msg = f"{name} must be 'stdout' or 'stderr'"
        raise ValueError(msg)
    return cast("TextIO", getattr(sys, value.lower()))


def _validate_dict_config(config: Mapping[str, object]) -> None:
    """Validate top-level keys and version."""
    _validate_keys(
        "configuration",
        config,
        {"version", "active", "global_level", "default_flags", "behaviour", "loggers"},
    )
    version = config.get("version", 1)
    if isinstance(version, bool) or not isinstance(version, int) or version != 1:
        msg = f"unsupported configuration version {version!r}"
        raise ValueError(msg)


@dataclasses.dataclass(frozen=True)
class _LoggerSpec:
    """Validated settings for one entry of the ``loggers`` section."""

    scope: str
    level: str | None
    flags: Flag | None
    stream: TextIO | None


def _resolve_logger(scope: str, data: Mapping[str, object]) -> _LoggerSpec:
    """Validate ``data`` for the logger named ``scope``."""
    name = f"logger {scope!r}"
    _validate_keys(name, data, {"level", "flags", "stream"})
    level = _validate_level(data["level"], f"{name} level") if "level" in data else None
    flags = _coerce_flags(data["flags"], f"{name} flags") if "flags" in data else None
    stream = (
        _resolve_stream(data["stream"], f"{name} stream") if "stream" in data else None
    )
    return _LoggerSpec(scope, level, flags, stream)


def _configure_logger(ctx: LoggingContext, spec: _LoggerSpec) -> ELogger:
    """Create or update the logger described by ``spec``."""
    logger = ctx.get_logger_by_scope(spec.scope)
    if logger is None:
        logger = ctx.new_logger(spec.scope, spec.level or "", spec.stream)
    else:
        logger.modify_params(level=spec.level, output=spec.stream)
    if spec.flags is not None:
        logger.set_flags(spec.flags)
    return logger


def _resolve_loggers(config: Mapping[str, object]) -> list[_LoggerSpec]:
    """Validate every entry of the ``loggers`` section without applying any."""
    section = _validate_mapping_type(config.get("loggers", {}), "loggers")
    specs: list[_LoggerSpec] = []
    for key, cfg in section.items():
        if not isinstance(key, str):
            msg = f"loggers section key {key!r} must be a string"
            raise TypeError(msg)
        data = _validate_string_keys(
            _validate_mapping_type(cfg, "logger config"), "logger config"
        )
        specs.append(_resolve_logger(key, data))
    return specs


def dictConfig(config: Mapping[str, object]) -> None:  # noqa: N802
    """Configure logging using a ``dictConfig``-style dictionary.

    Parameters
    ----------
    config : Mapping[str, object]
        Supported keys are ``version`` (must be ``1``), ``active`` (bool),
        ``global_level`` (str), ``default_flags`` (int or list of
        :class:`Flag` names), ``behaviour`` (list of :class:`Behaviour`
        names, replacing the current flags) and ``loggers`` (mapping of
        scope name to ``{"level", "flags", "stream"}``). Existing scopes are
        updated in place, missing ones are created.

    Raises
    ------
    TypeError
        If a section or value has the wrong type.
    ValueError
        If the configuration uses unsupported keys, versions or names.

    """
    config = _validate_string_keys(
        _validate_mapping_type(config, "configuration"), "configuration"
    )
    _validate_dict_config(config)
    ctx = get_context()

    # Validate every section before mutating anything.
    active = _validate_bool(config["active"], "active") if "active" in config else None
    global_level = (
        _validate_level(config["global_level"], "global_level")
        if "global_level" in config
        else None
    )
    default_flags = (
        _coerce_flags(config["default_flags"], "default_flags")
        if "default_flags" in config
        else None
    )
    behaviour = (
        _coerce_behaviour(config["behaviour"]) if "behaviour" in config else None
    )
    loggers = _resolve_loggers(config)

    if active is not None:
        ctx.set_active(active)
    if global_level is not None:
        ctx.set_global_level(global_level)
    if default_flags is not None:
        ctx.set_default_flags(default_flags)
    if behaviour is not None:
        ctx.set_behaviour(behaviour)
    for spec in loggers:
        _configure_logger(ctx, spec)
    _diag.debug("dictConfig applied")


__all__ = ["BasicConfig", "basicConfig", "dictConfig"]
