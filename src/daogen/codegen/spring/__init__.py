"""
Spring JDBC template family.

Generates plain Java value classes, a DAO interface, a ``JdbcTemplate``
DAO implementation and a ``@RestController``.
"""

from daogen.codegen.generator import TemplateFamily, TemplateGenerator
from daogen.codegen.spring.controller import ControllerGenerator
from daogen.codegen.spring.dao import DaoInterfaceGenerator
from daogen.codegen.spring.dao_impl import DaoImplementationGenerator
from daogen.codegen.spring.model import ModelGenerator


class SpringJdbcFamily(TemplateFamily):
    """Spring Framework with ``JdbcTemplate`` data access."""

    name = "spring-jdbc"

    def generators(self) -> list[TemplateGenerator]:
        return [
            ModelGenerator(self.layout),
            DaoInterfaceGenerator(self.layout),
            DaoImplementationGenerator(self.layout),
            ControllerGenerator(self.layout),
        ]


__all__ = [
    "SpringJdbcFamily",
    "ModelGenerator",
    "DaoInterfaceGenerator",
    "DaoImplementationGenerator",
    "ControllerGenerator",
]
