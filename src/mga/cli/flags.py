"""Declarative flags bound to configuration objects.

A :class:`FlagSpec` describes one command-line flag: its kind, aliases,
environment variables, default and the attribute path it populates.
:func:`add_flags` registers specs on an :mod:`argparse` parser and
:func:`bind_flags` resolves each one after parsing with the precedence

    explicit command-line value  >  first set environment variable  >  default

and writes the result into the target configuration.

List flags usually carry no destination; their raw values are left in the
returned :class:`ParsedFlags` for a
:class:`~mga.cli.converters.SliceConverter` to pick up.
"""

from __future__ import annotations

import argparse
import enum
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from mga.exceptions import ParseError
from mga.utils.attrpath import set_path

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class FlagKind(str, enum.Enum):
    STRING = "string"
    BOOL = "bool"
    INT = "int"
    STRING_LIST = "string-list"
    INT_LIST = "int-list"


class FlagSource(str, enum.Enum):
    """Where a resolved flag value came from."""

    FLAG = "flag"
    ENV = "env"
    DEFAULT = "default"


# ---------------------------------------------------------------------------
# Flag declarations
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlagSpec:
    """Declarative description of one command-line flag."""

    name: str
    kind: FlagKind = FlagKind.STRING
    aliases: tuple[str, ...] = ()
    env_vars: tuple[str, ...] = ()
    default: Any = None
    dest: str | None = None
    """Dotted attribute path in the target config, e.g. ``"database.host"``."""
    help: str = ""

    @property
    def key(self) -> str:
        """Attribute name used on the :class:`argparse.Namespace`."""
        return self.name.replace("-", "_")

    @property
    def is_list(self) -> bool:
        return self.kind in (FlagKind.STRING_LIST, FlagKind.INT_LIST)

    def option_strings(self) -> list[str]:
        """``--name`` followed by aliases (``-x`` for one letter, else ``--alias``)."""
        options = [f"--{self.name}"]
        for alias in self.aliases:
            options.append(f"-{alias}" if len(alias) == 1 else f"--{alias}")
        return options


def string_flag(
    name: str,
    *,
    dest: str | None = None,
    aliases: Sequence[str] = (),
    env_vars: Sequence[str] = (),
    default: str | None = None,
    help: str = "",
) -> FlagSpec:
    return FlagSpec(name, FlagKind.STRING, tuple(aliases), tuple(env_vars), default, dest, help)


def bool_flag(
    name: str,
    *,
    dest: str | None = None,
    aliases: Sequence[str] = (),
    env_vars: Sequence[str] = (),
    default: bool | None = None,
    help: str = "",
) -> FlagSpec:
    return FlagSpec(name, FlagKind.BOOL, tuple(aliases), tuple(env_vars), default, dest, help)


def int_flag(
    name: str,
    *,
    dest: str | None = None,
    aliases: Sequence[str] = (),
    env_vars: Sequence[str] = (),
    default: int | None = None,
    help: str = "",
) -> FlagSpec:
    return FlagSpec(name, FlagKind.INT, tuple(aliases), tuple(env_vars), default, dest, help)


def string_list_flag(
    name: str,
    *,
    dest: str | None = None,
    aliases: Sequence[str] = (),
    env_vars: Sequence[str] = (),
    help: str = "",
) -> FlagSpec:
    return FlagSpec(name, FlagKind.STRING_LIST, tuple(aliases), tuple(env_vars), None, dest, help)


def int_list_flag(
    name: str,
    *,
    dest: str | None = None,
    aliases: Sequence[str] = (),
    env_vars: Sequence[str] = (),
    help: str = "",
) -> FlagSpec:
    return FlagSpec(name, FlagKind.INT_LIST, tuple(aliases), tuple(env_vars), None, dest, help)


# ---------------------------------------------------------------------------
# Reusable flag sets
# ---------------------------------------------------------------------------

def env_prefix(app_prefix: str, *path: str) -> str:
    """Build an environment-variable prefix such as ``MGA_RESOURCE_CREATE_``."""
    if not path:
        return app_prefix
    return app_prefix + "_".join(part.upper().replace("-", "_") for part in path) + "_"


def output_flags(prefix: str) -> list[FlagSpec]:
    """The ``--output/-o`` flag shared by every leaf command."""
    return [
        string_flag(
            "output",
            dest="output",
            aliases=("o",),
            env_vars=(prefix + "OUTPUT",),
            help="Output file path (default: stdout)",
        ),
    ]


def with_output_flags(prefix: str, flags: Iterable[FlagSpec]) -> list[FlagSpec]:
    return [*flags, *output_flags(prefix)]


def common_flags(
    prefix: str,
    *,
    debug: str | None = None,
    verbose: str | None = None,
) -> list[FlagSpec]:
    """``--debug/-d`` and ``--verbose/-v``, each only when a destination is given."""
    flags: list[FlagSpec] = []
    if debug is not None:
        flags.append(
            bool_flag(
                "debug",
                dest=debug,
                aliases=("d",),
                env_vars=(prefix + "DEBUG",),
                default=False,
                help="Enable debug mode",
            )
        )
    if verbose is not None:
        flags.append(
            bool_flag(
                "verbose",
                dest=verbose,
                aliases=("v",),
                env_vars=(prefix + "VERBOSE",),
                default=False,
                help="Enable verbose output",
            )
        )
    return flags


def filter_flags(
    prefix: str,
    *,
    include: str | None = None,
    exclude: str | None = None,
) -> list[FlagSpec]:
    """``--include/-i`` and ``--exclude/-x`` pattern flags."""
    flags: list[FlagSpec] = []
    if include is not None:
        flags.append(
            string_flag(
                "include",
                dest=include,
                aliases=("i",),
                env_vars=(prefix + "INCLUDE",),
                help="Comma-separated patterns to include",
            )
        )
    if exclude is not None:
        flags.append(
            string_flag(
                "exclude",
                dest=exclude,
                aliases=("x",),
                env_vars=(prefix + "EXCLUDE",),
                help="Comma-separated patterns to exclude",
            )
        )
    return flags


# ---------------------------------------------------------------------------
# argparse registration
# ---------------------------------------------------------------------------

def _help_text(spec: FlagSpec) -> str:
    text = spec.help
    if spec.default not in (None, ""):
        text += f" (default: {spec.default})"
    if spec.env_vars:
        text += " [$" + ", $".join(spec.env_vars) + "]"
    return text.strip().replace("%", "%%")


def add_flags(parser: argparse.ArgumentParser, specs: Iterable[FlagSpec]) -> None:
    """Register *specs* on *parser*.

    Every option defaults to ``None`` so :func:`bind_flags` can tell an
    explicit value apart from an absent one.  Integers are kept as raw
    strings here and converted during binding.
    """
    for spec in specs:
        options = spec.option_strings()
        help_text = _help_text(spec)
        if spec.kind is FlagKind.BOOL:
            parser.add_argument(
                *options,
                dest=spec.key,
                action=argparse.BooleanOptionalAction,
                default=None,
                help=help_text,
            )
        elif spec.is_list:
            parser.add_argument(
                *options,
                dest=spec.key,
                action="append",
                default=None,
                metavar="VALUE",
                help=help_text,
            )
        else:
            parser.add_argument(
                *options,
                dest=spec.key,
                default=None,
                metavar="VALUE",
                help=help_text,
            )


# ---------------------------------------------------------------------------
# Binding
# ---------------------------------------------------------------------------

@dataclass
class ParsedFlags:
    """Resolved flag values keyed by flag name, with their sources."""

    values: dict[str, Any] = field(default_factory=dict)
    sources: dict[str, FlagSource] = field(default_factory=dict)

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    def source(self, name: str) -> FlagSource | None:
        return self.sources.get(name)

    def is_set(self, name: str) -> bool:
        """True when the flag was given on the command line or via env."""
        return self.sources.get(name) in (FlagSource.FLAG, FlagSource.ENV)

    def string_list(self, name: str) -> list[str] | None:
        value = self.values.get(name)
        return None if value is None else [str(v) for v in value]

    def int_list(self, name: str) -> list[int] | None:
        value = self.values.get(name)
        return None if value is None else [int(v) for v in value]


def _split(items: Iterable[str]) -> list[str]:
    return [piece.strip() for item in items for piece in item.split(",") if piece.strip()]


def _origin(env_var: str | None) -> str:
    return f" (from ${env_var})" if env_var else ""


def _to_int(spec: FlagSpec, raw: str, env_var: str | None = None) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ParseError(
            f"invalid value {raw!r} for flag --{spec.name}{_origin(env_var)}: expected an integer",
            flag=spec.name,
        ) from exc


def _to_bool(spec: FlagSpec, raw: str, env_var: str) -> bool:
    value = raw.strip()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ParseError(
        f"invalid value {raw!r} for flag --{spec.name}{_origin(env_var)}: expected a boolean",
        flag=spec.name,
    )


def _convert(spec: FlagSpec, raw: Any, env_var: str | None = None) -> Any:
    """Convert a raw command-line or environment value according to *spec*."""
    if spec.kind is FlagKind.STRING:
        return raw
    if spec.kind is FlagKind.BOOL:
        return raw if isinstance(raw, bool) else _to_bool(spec, raw, env_var or "")
    if spec.kind is FlagKind.INT:
        return _to_int(spec, raw, env_var)

    items = [raw] if isinstance(raw, str) else list(raw)
    pieces = _split(items)
    if spec.kind is FlagKind.INT_LIST:
        return [_to_int(spec, piece, env_var) for piece in pieces]
    return pieces


def _lookup_env(spec: FlagSpec, environ: Mapping[str, str]) -> tuple[str, str] | None:
    """Return ``(name, value)`` of the first usable environment variable.

    Empty values are ignored for bool and int flags.
    """
    for name in spec.env_vars:
        if name not in environ:
            continue
        value = environ[name]
        if spec.kind in (FlagKind.BOOL, FlagKind.INT) and not value.strip():
            continue
        return name, value
    return None


def resolve_flag(
    spec: FlagSpec,
    args: argparse.Namespace,
    environ: Mapping[str, str],
) -> tuple[Any, FlagSource]:
    """Resolve one flag's value with flag > env > default precedence.

    Raises
    ------
    ParseError
        If the winning value cannot be converted to the flag's kind.
    """
    raw = getattr(args, spec.key, None)
    if raw is not None:
        return _convert(spec, raw), FlagSource.FLAG

    found = _lookup_env(spec, environ)
    if found is not None:
        env_var, value = found
        return _convert(spec, value, env_var), FlagSource.ENV

    default = list(spec.default) if isinstance(spec.default, list) else spec.default
    return default, FlagSource.DEFAULT


def bind_flags(
    specs: Iterable[FlagSpec],
    args: argparse.Namespace,
    target: object,
    *,
    environ: Mapping[str, str],
    parsed: ParsedFlags | None = None,
) -> ParsedFlags:
    """Resolve *specs* and write each value into *target* at its ``dest``.

    A flag that resolves to ``None`` leaves the target attribute
    untouched, so the config's own default survives.  Values are also
    recorded in the returned :class:`ParsedFlags` (extending *parsed*
    when given).
    """
    parsed = parsed if parsed is not None else ParsedFlags()
    for spec in specs:
        value, source = resolve_flag(spec, args, environ)
        parsed.values[spec.name] = value
        parsed.sources[spec.name] = source
        if spec.dest is not None and value is not None:
            set_path(target, spec.dest, value)
    return parsed
