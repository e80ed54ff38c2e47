"""
Data-access implementation generator.

Produces a Spring ``JdbcTemplate`` implementation of the DAO interface,
with a row extractor, an insert statement creator and an update statement
creator per table.
"""

from collections.abc import Sequence
from pathlib import PurePath

from daogen.codegen.generator import SharedFileGenerator
from daogen.codegen.spring.dao import DAO_PACKAGE
from daogen.codegen.spring.java import (
    FILE_EXTENSION,
    bind_value,
    create_method,
    get_by_id_method,
    instance_name,
    java_type,
    jdbc_accessor,
    key_conversion,
    list_method,
    setter,
    update_method,
    writes_back_key,
)
from daogen.codegen.spring.model import MODEL_PACKAGE
from daogen.codegen.statements import (
    StatementPlan,
    plan_insert,
    plan_select_all,
    plan_select_by_key,
    plan_update,
)
from daogen.core.emitter import Emitter
from daogen.core.types import TableDescriptor

IMPL_PACKAGE = "impl"

IMPORTS = [
    "java.sql.Connection",
    "java.sql.PreparedStatement",
    "java.sql.ResultSet",
    "java.sql.SQLException",
    "java.sql.Statement",
    "java.util.Collections",
    "java.util.List",
    "java.util.Map",
    "javax.sql.DataSource",
    "org.springframework.beans.factory.annotation.Autowired",
    "org.springframework.jdbc.core.JdbcTemplate",
    "org.springframework.jdbc.core.PreparedStatementCreator",
    "org.springframework.jdbc.core.RowMapper",
    "org.springframework.jdbc.core.namedparam.NamedParameterJdbcTemplate",
    "org.springframework.jdbc.support.GeneratedKeyHolder",
    "org.springframework.jdbc.support.KeyHolder",
    "org.springframework.stereotype.Component",
]


def extractor_class(table: TableDescriptor) -> str:
    return f"{table.generated_class_name}Extractor"


def creator_class(table: TableDescriptor) -> str:
    return f"{table.generated_class_name}Creator"


def updater_class(table: TableDescriptor) -> str:
    return f"{table.generated_class_name}Updater"


class DaoImplementationGenerator(SharedFileGenerator):
    """
    Generates the DAO implementation class.

    The insert and update helpers take their SQL and their bind order from
    the same statement plan, so the ``ps.setX(n, ...)`` calls always line up
    with the placeholders.
    """

    artifact = "dao_impl"
    file_extension = FILE_EXTENSION

    @property
    def interface_name(self) -> str:
        return f"{self.layout.class_prefix}Dao"

    @property
    def class_name(self) -> str:
        return f"{self.layout.class_prefix}DaoImpl"

    def shared_path(self) -> PurePath:
        directory = self.layout.directory(DAO_PACKAGE, IMPL_PACKAGE)
        return directory / f"{self.class_name}{self.file_extension}"

    def generate(self, emitter: Emitter, tables: Sequence[TableDescriptor]) -> None:
        w = emitter.write_line

        w(f"package {self.layout.package(DAO_PACKAGE, IMPL_PACKAGE)};")
        emitter.write_blank_line()
        for name in IMPORTS:
            w(f"import {name};")
        w(f"import {self.layout.package(DAO_PACKAGE)}.*;")
        w(f"import {self.layout.package(MODEL_PACKAGE)}.*;")
        emitter.write_blank_line()
        w(f'@Component("{self.interface_name}")')
        w(f"public class {self.class_name} implements {self.interface_name} {{")
        emitter.write_blank_line()
        w("private JdbcTemplate jdbcTemplate;")
        w("private NamedParameterJdbcTemplate namedJdbcTemplate;")
        emitter.write_blank_line()
        w("@Autowired")
        w("private void setDataSource(DataSource dataSource) {")
        w("jdbcTemplate = new JdbcTemplate(dataSource);")
        w("namedJdbcTemplate = new NamedParameterJdbcTemplate(dataSource);")
        w("}")

        for table in tables:
            emitter.write_blank_line()
            self.generate_table(emitter, table)
        w("}")

    def generate_table(self, emitter: Emitter, table: TableDescriptor) -> None:
        """Interface methods plus the three private helpers for one table."""
        insert = plan_insert(table)
        update = plan_update(table)

        self._list_all(emitter, table)
        self._create(emitter, table)
        self._update(emitter, table, update)
        self._get_by_id(emitter, table)
        self._creator(emitter, table, insert)
        if update is not None:
            self._updater(emitter, table, update)
        self._extractor(emitter, table)

    def _list_all(self, emitter: Emitter, table: TableDescriptor) -> None:
        w = emitter.write_line
        cls = table.generated_class_name
        w("@Override")
        w(f"public List<{cls}> {list_method(table)}() {{")
        w(f'return jdbcTemplate.query("{plan_select_all(table)}", new {extractor_class(table)}());')
        w("}")

    def _create(self, emitter: Emitter, table: TableDescriptor) -> None:
        w = emitter.write_line
        cls = table.generated_class_name
        var = instance_name(table)
        key = table.key_column

        w("@Override")
        w(f"public void {create_method(table)}({cls} {var}) {{")
        if not writes_back_key(table):
            w(f"jdbcTemplate.update(new {creator_class(table)}({var}));")
        else:
            w("KeyHolder keyHolder = new GeneratedKeyHolder();")
            w(f"jdbcTemplate.update(new {creator_class(table)}({var}), keyHolder);")
            w(f"{var}.{setter(key)}(keyHolder.getKey().{key_conversion(key)});")
        w("}")

    def _update(
        self,
        emitter: Emitter,
        table: TableDescriptor,
        update: StatementPlan | None,
    ) -> None:
        w = emitter.write_line
        cls = table.generated_class_name
        var = instance_name(table)

        w("@Override")
        w(f"public void {update_method(table)}({cls} {var}) {{")
        if update is None:
            reason = (
                "has no autoincrement key"
                if table.key_column is None
                else "has no columns to update"
            )
            w(
                "throw new UnsupportedOperationException("
                f'"Table {table.database_table_name} {reason}");'
            )
        else:
            w(f"jdbcTemplate.update(new {updater_class(table)}({var}));")
        w("}")

    def _get_by_id(self, emitter: Emitter, table: TableDescriptor) -> None:
        key = table.key_column
        if key is None:
            return

        w = emitter.write_line
        cls = table.generated_class_name
        prop = key.property_name
        sql = plan_select_by_key(table, prop)

        w("@Override")
        w(f"public {cls} {get_by_id_method(table)}({java_type(key)} {prop}) {{")
        w(f'Map<String, Object> namedParameters = Collections.singletonMap("{prop}", {prop});')
        w(
            f'return namedJdbcTemplate.queryForObject("{sql}", '
            f"namedParameters, new {extractor_class(table)}());"
        )
        w("}")

    def _statement_creator_head(
        self,
        emitter: Emitter,
        table: TableDescriptor,
        helper: str,
    ) -> None:
        w = emitter.write_line
        cls = table.generated_class_name
        var = instance_name(table)

        w(f"private class {helper} implements PreparedStatementCreator {{")
        w(f"private {cls} {var};")
        w(f"public {helper}({cls} {var}) {{")
        w(f"this.{var} = {var};")
        w("}")
        w("@Override")
        w(
            "public PreparedStatement createPreparedStatement(Connection connection) "
            "throws SQLException {"
        )

    def _bind_parameters(self, emitter: Emitter, table: TableDescriptor, plan: StatementPlan) -> None:
        var = instance_name(table)
        for param in plan.parameters:
            column = param.column
            emitter.write_line(
                f"ps.set{jdbc_accessor(column)}({param.index}, {bind_value(column, var)});"
            )

    def _creator(self, emitter: Emitter, table: TableDescriptor, plan: StatementPlan) -> None:
        w = emitter.write_line
        self._statement_creator_head(emitter, table, creator_class(table))
        if not writes_back_key(table):
            w(f'PreparedStatement ps = connection.prepareStatement("{plan.sql}");')
        else:
            w(
                f'PreparedStatement ps = connection.prepareStatement("{plan.sql}", '
                "Statement.RETURN_GENERATED_KEYS);"
            )
        self._bind_parameters(emitter, table, plan)
        w("return ps;")
        w("}")
        w("}")

    def _updater(self, emitter: Emitter, table: TableDescriptor, plan: StatementPlan) -> None:
        w = emitter.write_line
        self._statement_creator_head(emitter, table, updater_class(table))
        w(f'PreparedStatement ps = connection.prepareStatement("{plan.sql}");')
        self._bind_parameters(emitter, table, plan)
        w("return ps;")
        w("}")
        w("}")

    def _extractor(self, emitter: Emitter, table: TableDescriptor) -> None:
        w = emitter.write_line
        cls = table.generated_class_name
        var = cls[:1].lower()

        w(f"private class {extractor_class(table)} implements RowMapper<{cls}> {{")
        w("@Override")
        w(f"public {cls} mapRow(ResultSet rs, int rowNum) throws SQLException {{")
        w(f"{cls} {var} = new {cls}();")
        for column in table.columns:
            w(
                f"{var}.{setter(column)}("
                f'rs.get{jdbc_accessor(column)}("{column.database_column_name}"));'
            )
        w(f"return {var};")
        w("}")
        w("}")
