"""
Configuration for daogen.

Settings are read from a Java-style ``.properties`` file using the dotted
keys of the original tool (``database.server``, ``generator.spacing``, ...)
and validated with pydantic.
"""

from __future__ import annotations

import string
from collections.abc import Iterator, Mapping
from pathlib import Path
from urllib.parse import parse_qsl

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError

from daogen.core.errors import ConfigurationError

DEFAULT_CONFIG_FILE = "config.properties"

# MySQL Connector/J URL parameters with no meaning to Python DB-API drivers
JDBC_ONLY_PARAMETERS = frozenset({
    "autoReconnect",
    "characterEncoding",
    "serverTimezone",
    "useJDBCCompliantTimezoneShift",
    "useLegacyDatetimeCode",
    "useSSL",
    "useUnicode",
    "zeroDateTimeBehavior",
})


class DatabaseSettings(BaseModel):
    """Connection settings for the database to introspect."""

    type: str = Field("mysql+pymysql", alias="database.type")
    name: str = Field("dbgentest", alias="database.name")
    server: str = Field("127.0.0.1", alias="database.server")
    port: int = Field(3306, alias="database.port", ge=0)
    user: str = Field("dbgenuser", alias="database.user")
    password: str = Field("", alias="database.password")
    custom_connection_string: str = Field("", alias="database.customConnectionString")
    # Full SQLAlchemy URL; overrides every other connection setting
    url_override: str | None = Field(None, alias="database.url")

    model_config = {"frozen": True, "populate_by_name": True}

    def url(self) -> URL:
        """
        Build the SQLAlchemy URL.

        ``customConnectionString`` is parsed as a query string, with or
        without its leading ``?``, and passed to the driver as connect
        arguments.

        Raises:
            ConfigurationError: If ``database.url`` cannot be parsed, or the
                connection string holds JDBC-only parameters
        """
        if self.url_override:
            try:
                return make_url(self.url_override)
            except ArgumentError as e:
                raise ConfigurationError(
                    f"Invalid database URL: {e}", key="database.url"
                ) from e

        query = dict(parse_qsl(self.custom_connection_string.lstrip("?")))
        jdbc_only = sorted(JDBC_ONLY_PARAMETERS.intersection(query))
        if jdbc_only:
            raise ConfigurationError(
                f"JDBC-only connection parameters: {', '.join(jdbc_only)}",
                key="database.customConnectionString",
                hints=[
                    "Use driver connect arguments instead, e.g. charset=utf8mb4",
                    "Or set database.url to a full SQLAlchemy URL",
                ],
            )
        return URL.create(
            drivername=self.type,
            username=self.user or None,
            password=self.password or None,
            host=self.server or None,
            port=self.port or None,
            database=self.name or None,
            query=query,
        )


class GeneratorSettings(BaseModel):
    """Settings consumed by the generation engine."""

    base_package: str = Field("Dbgentest", alias="generator.basepackage", min_length=1)
    spacing: int = Field(2, alias="generator.spacing", ge=0)
    output_dir: Path = Field(Path("."), alias="generator.outputdir")
    template: str = Field("spring-jdbc", alias="generator.template")

    model_config = {"frozen": True, "populate_by_name": True}


class DaoGenConfig(BaseModel):
    """Complete configuration for one generation run."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    generator: GeneratorSettings = Field(default_factory=GeneratorSettings)

    model_config = {"frozen": True}

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> DaoGenConfig:
        """
        Validate a mapping of dotted property keys.

        Unknown keys are ignored.

        Raises:
            ConfigurationError: If a value fails validation
        """
        database = {k: v for k, v in properties.items() if k.startswith("database.")}
        generator = {k: v for k, v in properties.items() if k.startswith("generator.")}
        try:
            return cls(
                database=DatabaseSettings.model_validate(database),
                generator=GeneratorSettings.model_validate(generator),
            )
        except PydanticValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first["loc"])
            raise ConfigurationError(f"Invalid value for '{key}': {first['msg']}", key=key) from e

    def with_overrides(self, **overrides: object) -> DaoGenConfig:
        """
        Copy with generator/database fields replaced; None values are skipped.

        Keys are field names, prefixed with ``database_`` or ``generator_``,
        e.g. ``generator_output_dir`` or ``database_url_override``.
        """
        database: dict[str, object] = {}
        generator: dict[str, object] = {}
        for key, value in overrides.items():
            if value is None:
                continue
            section, _, field = key.partition("_")
            if section == "database":
                database[field] = value
            elif section == "generator":
                generator[field] = value
            else:
                raise ConfigurationError(f"Unknown setting '{key}'", key=key)

        return self.model_copy(update={
            "database": self.database.model_copy(update=database),
            "generator": self.generator.model_copy(update=generator),
        })


_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _logical_lines(text: str) -> Iterator[str]:
    """Join ``\\``-continued lines, skipping blank and comment lines."""
    pending: str | None = None
    for raw in text.splitlines():
        line = raw.lstrip(_WHITESPACE)
        if pending is None and (not line or line[0] in "#!"):
            continue
        # An odd run of trailing backslashes continues onto the next line
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2:
            pending = (pending or "") + line[:-1]
            continue
        yield (pending or "") + line
        pending = None
    if pending:
        yield pending


def _unescape(text: str) -> str:
    chars: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char != "\\" or i + 1 == len(text):
            chars.append(char)
            i += 1
            continue
        escaped = text[i + 1]
        if escaped == "u":
            digits = text[i + 2:i + 6]
            if len(digits) != 4 or not all(c in string.hexdigits for c in digits):
                raise ConfigurationError(f"Malformed \\uXXXX escape: '\\u{digits}'")
            chars.append(chr(int(digits, 16)))
            i += 6
            continue
        chars.append(_ESCAPES.get(escaped, escaped))
        i += 2
    return "".join(chars)


def _split_entry(line: str) -> tuple[str, str]:
    """Split at the first unescaped ``=``, ``:`` or whitespace."""
    end = 0
    while end < len(line):
        char = line[end]
        if char == "\\":
            end += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        end += 1

    rest = line[end:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return _unescape(line[:end]), _unescape(rest)


def parse_properties(text: str) -> dict[str, str]:
    """
    Parse Java ``.properties`` text into a dict.

    Follows ``java.util.Properties.load``: ``#``/``!`` comments,
    ``key=value``, ``key: value`` and ``key value`` entries, ``\\`` line
    continuations, and ``\\t``, ``\\n``, ``\\uXXXX`` or ``\\=``-style
    escapes. Whitespace around the separator is dropped; trailing
    whitespace of a value is kept.

    Raises:
        ConfigurationError: On a malformed ``\\uXXXX`` escape
    """
    properties: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        properties[key] = value
    return properties


def load_config(path: str | Path | None = None) -> DaoGenConfig:
    """
    Load configuration from a properties file.

    Without a path, ``config.properties`` in the working directory is used
    when it exists; otherwise the built-in defaults apply.

    Raises:
        ConfigurationError: If the file cannot be read or a value is invalid
    """
    if path is None:
        default = Path(DEFAULT_CONFIG_FILE)
        if not default.exists():
            return DaoGenConfig()
        path = default

    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{config_path}': {e.strerror or e}",
            key="config",
        ) from e

    return DaoGenConfig.from_properties(parse_properties(text))
