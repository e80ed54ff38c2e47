"""
REST controller generator: one list-all endpoint per table.
"""

from collections.abc import Sequence
from pathlib import PurePath

from daogen.codegen.generator import SharedFileGenerator
from daogen.codegen.spring.dao import DAO_PACKAGE
from daogen.codegen.spring.java import FILE_EXTENSION, list_method
from daogen.codegen.spring.model import MODEL_PACKAGE
from daogen.core.emitter import Emitter
from daogen.core.naming import endpoint_path
from daogen.core.types import TableDescriptor

CONTROLLER_PACKAGE = "controller"

IMPORTS = [
    "java.util.List",
    "org.springframework.beans.factory.annotation.Autowired",
    "org.springframework.web.bind.annotation.RequestMapping",
    "org.springframework.web.bind.annotation.ResponseBody",
    "org.springframework.web.bind.annotation.RestController",
]


class ControllerGenerator(SharedFileGenerator):
    """
    Generates a ``@RestController`` delegating to the DAO.

    Endpoint paths are the lower-cased plural of the generated class name:
    ``User`` is served at ``users`` and ``Status`` at ``status``.
    """

    artifact = "controller"
    file_extension = FILE_EXTENSION

    @property
    def class_name(self) -> str:
        return f"{self.layout.class_prefix}Controller"

    @property
    def dao_field(self) -> str:
        return f"{self.layout.class_prefix.lower()}Dao"

    def shared_path(self) -> PurePath:
        directory = self.layout.directory(CONTROLLER_PACKAGE)
        return directory / f"{self.class_name}{self.file_extension}"

    def generate(self, emitter: Emitter, tables: Sequence[TableDescriptor]) -> None:
        w = emitter.write_line

        w(f"package {self.layout.package(CONTROLLER_PACKAGE)};")
        emitter.write_blank_line()
        w(f"import {self.layout.package(DAO_PACKAGE)}.*;")
        w(f"import {self.layout.package(MODEL_PACKAGE)}.*;")
        for name in IMPORTS:
            w(f"import {name};")
        emitter.write_blank_line()
        w("@RestController")
        w(f'@RequestMapping("/{self.layout.class_prefix.lower()}")')
        w(f"public class {self.class_name} {{")
        w("@Autowired")
        w(f"private {self.layout.class_prefix}Dao {self.dao_field};")

        for table in tables:
            emitter.write_blank_line()
            self.generate_table(emitter, table)
        w("}")

    def generate_table(self, emitter: Emitter, table: TableDescriptor) -> None:
        w = emitter.write_line
        method = list_method(table)

        w(f'@RequestMapping("{endpoint_path(table.generated_class_name)}")')
        w("@ResponseBody")
        w(f"public List<{table.generated_class_name}> {method}() {{")
        w(f"return {self.dao_field}.{method}();")
        w("}")
