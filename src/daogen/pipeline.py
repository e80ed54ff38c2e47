"""
Generation pipeline.

Introspects the schema once, then runs each generator of the selected
template family in order. Every output file is opened through the
emitter's scoped acquisition, so only one file is open at a time.
"""

from io import StringIO
from pathlib import Path, PurePath

from daogen.codegen.generator import (
    GeneratedFile,
    GenerationResult,
    PackageLayout,
    TemplateFamily,
)
from daogen.codegen.registry import TemplateRegistry, default_registry
from daogen.config import DaoGenConfig
from daogen.connection import connection_scope
from daogen.core.emitter import Emitter
from daogen.core.types import SchemaModel
from daogen.introspection.base import SchemaProvider
from daogen.introspection.introspector import introspect
from daogen.logging import get_logger, with_log_context

logger = get_logger("daogen.pipeline")


def generate(
    schema: SchemaModel,
    family: TemplateFamily,
    output_dir: str | Path,
    spacing: int = 2,
) -> GenerationResult:
    """
    Write every artifact of a family for a schema.

    Files already written stay in place if a later one fails.

    Raises:
        FilesystemFailureError: If a directory or file cannot be written
    """
    base = Path(output_dir)
    emitter = Emitter(spacing)
    result = GenerationResult(warnings=list(schema.warnings))

    for generator in family.generators():
        for output in generator.plan(schema):
            path = base / output.path
            context = {"artifact": generator.artifact, "path": str(path)}
            if len(output.tables) == 1:
                context["table"] = output.tables[0].database_table_name
            with with_log_context(**context):
                with emitter.open(path):
                    generator.generate(emitter, output.tables)
                logger.info("Wrote artifact", tables=len(output.tables))

            result.files.append(GeneratedFile(
                path=path,
                artifact=generator.artifact,
                tables=[t.database_table_name for t in output.tables],
            ))

    return result


def render(
    schema: SchemaModel,
    family: TemplateFamily,
    spacing: int = 2,
) -> dict[PurePath, str]:
    """Render every artifact to memory, keyed by relative output path."""
    rendered: dict[PurePath, str] = {}
    for generator in family.generators():
        for output in generator.plan(schema):
            buffer = StringIO()
            generator.generate(Emitter(spacing, stream=buffer), output.tables)
            rendered[output.path] = buffer.getvalue()
    return rendered


def create_family(
    config: DaoGenConfig,
    registry: TemplateRegistry | None = None,
) -> TemplateFamily:
    """
    Instantiate the configured template family.

    Raises:
        ConfigurationError: If the family is not registered
    """
    registry = registry or default_registry()
    layout = PackageLayout(config.generator.base_package)
    return registry.create(config.generator.template, layout)


def load_schema(config: DaoGenConfig, provider: SchemaProvider | None = None) -> SchemaModel:
    """
    Introspect the configured database, or the given provider.

    Raises:
        ConnectionFailureError: If the database cannot be reached
        AmbiguousPrimaryKeyError: If a table has several autoincrement columns
    """
    if provider is not None:
        return introspect(provider)

    from daogen.introspection.sqlalchemy import SQLAlchemySchemaProvider

    with connection_scope(config.database) as engine:
        return introspect(SQLAlchemySchemaProvider(engine))


def run(config: DaoGenConfig, provider: SchemaProvider | None = None) -> GenerationResult:
    """Connect, introspect and write every artifact for a configuration."""
    family = create_family(config)
    schema = load_schema(config, provider)
    return generate(
        schema,
        family,
        output_dir=config.generator.output_dir,
        spacing=config.generator.spacing,
    )
