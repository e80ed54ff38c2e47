"""
Value-object generator: one plain Java class per table.
"""

from collections.abc import Sequence

from daogen.codegen.generator import OutputFile, TemplateGenerator
from daogen.codegen.spring.java import FILE_EXTENSION, getter, java_type, setter
from daogen.core.emitter import Emitter
from daogen.core.types import SchemaModel, SemanticType, TableDescriptor

MODEL_PACKAGE = "model"


class ModelGenerator(TemplateGenerator):
    """
    Generates a value class with private fields, getters and setters.

    Example output:
        public class User {
          private int id;
          private String userName;

          public int getId() {
            return id;
          }
          ...
        }
    """

    artifact = "model"
    file_extension = FILE_EXTENSION

    def plan(self, schema: SchemaModel) -> list[OutputFile]:
        directory = self.layout.directory(MODEL_PACKAGE)
        return [
            OutputFile(
                path=directory / f"{table.generated_class_name}{self.file_extension}",
                tables=(table,),
            )
            for table in schema.tables
        ]

    def generate(self, emitter: Emitter, tables: Sequence[TableDescriptor]) -> None:
        for table in tables:
            self.generate_table(emitter, table)

    def generate_table(self, emitter: Emitter, table: TableDescriptor) -> None:
        w = emitter.write_line

        w(f"package {self.layout.package(MODEL_PACKAGE)};")
        emitter.write_blank_line()
        if any(c.semantic_type == SemanticType.TIMESTAMP for c in table.columns):
            w("import java.util.Date;")
            emitter.write_blank_line()

        w(f"public class {table.generated_class_name} {{")
        for column in table.columns:
            w(f"private {java_type(column)} {column.property_name};")
        emitter.write_blank_line()

        for column in table.columns:
            prop = column.property_name
            w(f"public {java_type(column)} {getter(column)}() {{")
            w(f"return {prop};")
            w("}")
            w(f"public void {setter(column)}({java_type(column)} {prop}) {{")
            w(f"this.{prop} = {prop};")
            w("}")
        w("}")

