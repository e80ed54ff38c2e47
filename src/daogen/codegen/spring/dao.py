"""
Data-access interface generator.
"""

from collections.abc import Sequence
from pathlib import PurePath

from daogen.codegen.generator import SharedFileGenerator
from daogen.codegen.spring.java import (
    FILE_EXTENSION,
    create_method,
    get_by_id_method,
    instance_name,
    java_type,
    list_method,
    update_method,
)
from daogen.codegen.spring.model import MODEL_PACKAGE
from daogen.core.emitter import Emitter
from daogen.core.types import TableDescriptor

DAO_PACKAGE = "dao"


class DaoInterfaceGenerator(SharedFileGenerator):
    """
    Generates one DAO interface covering every table.

    Each table gets list-all, create and update methods; tables with an
    autoincrement column also get a get-by-id method keyed on it.
    """

    artifact = "dao"
    file_extension = FILE_EXTENSION

    @property
    def interface_name(self) -> str:
        return f"{self.layout.class_prefix}Dao"

    def shared_path(self) -> PurePath:
        return self.layout.directory(DAO_PACKAGE) / f"{self.interface_name}{self.file_extension}"

    def generate(self, emitter: Emitter, tables: Sequence[TableDescriptor]) -> None:
        w = emitter.write_line

        w(f"package {self.layout.package(DAO_PACKAGE)};")
        emitter.write_blank_line()
        w("import java.util.List;")
        w(f"import {self.layout.package(MODEL_PACKAGE)}.*;")
        emitter.write_blank_line()
        w(f"public interface {self.interface_name} {{")
        for table in tables:
            self._table_methods(emitter, table)
        w("}")

    def _table_methods(self, emitter: Emitter, table: TableDescriptor) -> None:
        w = emitter.write_line
        cls = table.generated_class_name
        var = instance_name(table)

        w(f"public List<{cls}> {list_method(table)}();")
        w(f"public void {create_method(table)}({cls} {var});")
        w(f"public void {update_method(table)}({cls} {var});")

        key = table.key_column
        if key is not None:
            w(f"public {cls} {get_by_id_method(table)}({java_type(key)} {key.property_name});")
