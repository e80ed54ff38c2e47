"""Tests for the Spring JDBC template generators."""

from io import StringIO
from pathlib import PurePath

import pytest

from daogen.codegen.generator import PackageLayout, SharedFileGenerator, TemplateGenerator
from daogen.codegen.spring import (
    ControllerGenerator,
    DaoImplementationGenerator,
    DaoInterfaceGenerator,
    ModelGenerator,
    SpringJdbcFamily,
)
from daogen.core.emitter import Emitter
from daogen.core.types import SchemaModel
from daogen.introspection.base import RawColumn, StaticSchemaProvider
from daogen.introspection.introspector import introspect


def render(generator, schema: SchemaModel, spacing: int = 2) -> list[str]:
    """Render every planned file of a generator into one list of lines."""
    buffer = StringIO()
    emitter = Emitter(spacing=spacing, stream=buffer)
    for output in generator.plan(schema):
        generator.generate(emitter, output.tables)
    return buffer.getvalue().splitlines()


class TestPackageLayout:
    """Tests for PackageLayout."""

    def test_simple_prefix(self):
        layout = PackageLayout("Dbgentest")

        assert layout.package_root == "dbgentest"
        assert layout.class_prefix == "Dbgentest"
        assert layout.package("dao", "impl") == "dbgentest.dao.impl"
        assert layout.directory("dao", "impl") == PurePath("dbgentest", "dao", "impl")

    def test_dotted_prefix(self):
        layout = PackageLayout("com.acme.Shop")

        assert layout.package_root == "com.acme.shop"
        assert layout.class_prefix == "Shop"
        assert layout.directory("model") == PurePath("com", "acme", "shop", "model")


class TestGeneratorHooks:
    """Tests for the abstract generator hooks."""

    def test_shared_file_generator_requires_path(self, layout: PackageLayout):
        class NoPath(SharedFileGenerator):
            artifact = "broken"

            def generate(self, emitter, tables):
                pass

        with pytest.raises(TypeError, match="shared_path"):
            NoPath(layout)

    def test_generator_requires_plan(self, layout: PackageLayout):
        class NoPlan(TemplateGenerator):
            artifact = "broken"

            def generate(self, emitter, tables):
                pass

        with pytest.raises(TypeError, match="plan"):
            NoPlan(layout)

    def test_shared_file_plan(self, layout: PackageLayout, shop_schema: SchemaModel):
        (output,) = ControllerGenerator(layout).plan(shop_schema)

        assert output.tables == shop_schema.tables


class TestModelGenerator:
    """Tests for ModelGenerator."""

    def test_user_model(self, layout: PackageLayout, user_schema: SchemaModel):
        lines = render(ModelGenerator(layout), user_schema)

        assert lines == [
            "package shop.model;",
            "",
            "public class User {",
            "  private int id;",
            "  private String userName;",
            "",
            "  public int getId() {",
            "    return id;",
            "  }",
            "  public void setId(int id) {",
            "    this.id = id;",
            "  }",
            "  public String getUserName() {",
            "    return userName;",
            "  }",
            "  public void setUserName(String userName) {",
            "    this.userName = userName;",
            "  }",
            "}",
        ]

    def test_one_file_per_table(self, layout: PackageLayout, shop_schema: SchemaModel):
        outputs = ModelGenerator(layout).plan(shop_schema)

        assert [o.path for o in outputs] == [
            PurePath("shop/model/Customer.java"),
            PurePath("shop/model/OrderItem.java"),
            PurePath("shop/model/Status.java"),
        ]
        assert all(len(o.tables) == 1 for o in outputs)

    def test_date_import_only_with_timestamps(self, layout: PackageLayout, shop_schema: SchemaModel):
        generator = ModelGenerator(layout)
        buffer = StringIO()
        emitter = Emitter(spacing=2, stream=buffer)

        generator.generate(emitter, [shop_schema.get_table("customer")])
        assert "import java.util.Date;" in buffer.getvalue()
        assert "  private Date createdAt;" in buffer.getvalue()

        buffer = StringIO()
        generator.generate(Emitter(spacing=2, stream=buffer), [shop_schema.get_table("status")])
        assert "import java.util.Date;" not in buffer.getvalue()

    def test_field_types(self, layout: PackageLayout, shop_schema: SchemaModel):
        lines = render(ModelGenerator(layout), shop_schema)

        for field in [
            "private boolean isActive;",
            "private double price;",
            "private float weight;",
            "private long totalCents;",
            "private String note;",
        ]:
            assert f"  {field}" in lines


class TestDaoInterfaceGenerator:
    """Tests for DaoInterfaceGenerator."""

    def test_user_interface(self, layout: PackageLayout, user_schema: SchemaModel):
        lines = render(DaoInterfaceGenerator(layout), user_schema)

        assert lines == [
            "package shop.dao;",
            "",
            "import java.util.List;",
            "import shop.model.*;",
            "",
            "public interface ShopDao {",
            "  public List<User> getUsers();",
            "  public void createUser(User user);",
            "  public void updateUser(User user);",
            "  public User getUserById(int id);",
            "}",
        ]

    def test_single_file_for_all_tables(self, layout: PackageLayout, shop_schema: SchemaModel):
        (output,) = DaoInterfaceGenerator(layout).plan(shop_schema)

        assert output.path == PurePath("shop/dao/ShopDao.java")
        assert len(output.tables) == 3

    def test_get_by_id_only_with_key(self, layout: PackageLayout, shop_schema: SchemaModel):
        text = "\n".join(render(DaoInterfaceGenerator(layout), shop_schema))

        assert "public Customer getCustomerById(int customerId);" in text
        assert "public OrderItem getOrderItemById(int id);" in text
        assert "getStatusById" not in text
        assert "public List<Status> getStatus();" in text
        assert "public void updateStatus(Status status);" in text


class TestDaoImplementationGenerator:
    """Tests for DaoImplementationGenerator."""

    @pytest.fixture
    def user_impl(self, layout: PackageLayout, user_schema: SchemaModel) -> list[str]:
        return render(DaoImplementationGenerator(layout), user_schema)

    @pytest.fixture
    def shop_impl(self, layout: PackageLayout, shop_schema: SchemaModel) -> str:
        return "\n".join(render(DaoImplementationGenerator(layout), shop_schema, spacing=0))

    def test_path(self, layout: PackageLayout, user_schema: SchemaModel):
        (output,) = DaoImplementationGenerator(layout).plan(user_schema)

        assert output.path == PurePath("shop/dao/impl/ShopDaoImpl.java")

    def test_class_declaration(self, user_impl: list[str]):
        assert user_impl[0] == "package shop.dao.impl;"
        assert '@Component("ShopDao")' in user_impl
        assert "public class ShopDaoImpl implements ShopDao {" in user_impl
        assert user_impl[-1] == "}"

    def test_braces_are_balanced(self, user_impl: list[str]):
        # Every block closes, so the last line is back at column zero
        text = "\n".join(user_impl)
        assert text.count("{") == text.count("}")

    def test_list_all(self, user_impl: list[str]):
        assert (
            '    return jdbcTemplate.query("SELECT * FROM user", new UserExtractor());'
            in user_impl
        )

    def test_create_writes_back_generated_key(self, user_impl: list[str]):
        index = user_impl.index("  public void createUser(User user) {")

        assert user_impl[index + 1:index + 5] == [
            "    KeyHolder keyHolder = new GeneratedKeyHolder();",
            "    jdbcTemplate.update(new UserCreator(user), keyHolder);",
            "    user.setId(keyHolder.getKey().intValue());",
            "  }",
        ]

    def test_insert_builder(self, user_impl: list[str]):
        index = user_impl.index("  private class UserCreator implements PreparedStatementCreator {")
        body = user_impl[index:index + 13]

        assert (
            '      PreparedStatement ps = connection.prepareStatement('
            '"INSERT INTO user (user_name) VALUES (?)", Statement.RETURN_GENERATED_KEYS);'
        ) in body
        assert "      ps.setString(1, user.getUserName());" in body
        assert not any("getId()" in line for line in body)

    def test_update_builder(self, user_impl: list[str]):
        index = user_impl.index("  private class UserUpdater implements PreparedStatementCreator {")
        body = user_impl[index:index + 14]

        assert (
            '      PreparedStatement ps = connection.prepareStatement('
            '"UPDATE user SET user_name=? WHERE id=?");'
        ) in body
        assert "      ps.setString(1, user.getUserName());" in body
        assert "      ps.setInt(2, user.getId());" in body

    def test_row_extractor(self, user_impl: list[str]):
        index = user_impl.index("  private class UserExtractor implements RowMapper<User> {")

        assert user_impl[index + 1:index + 9] == [
            "    @Override",
            "    public User mapRow(ResultSet rs, int rowNum) throws SQLException {",
            "      User u = new User();",
            '      u.setId(rs.getInt("id"));',
            '      u.setUserName(rs.getString("user_name"));',
            "      return u;",
            "    }",
            "  }",
        ]

    def test_get_by_id(self, user_impl: list[str]):
        assert "  public User getUserById(int id) {" in user_impl
        assert (
            '    Map<String, Object> namedParameters = Collections.singletonMap("id", id);'
            in user_impl
        )
        assert (
            '    return namedJdbcTemplate.queryForObject("SELECT * FROM user WHERE id=:id", '
            "namedParameters, new UserExtractor());"
        ) in user_impl

    def test_timestamp_handling(self, shop_impl: str):
        assert "VALUES (?, ?, now())" in shop_impl
        assert "ps.setString(1, customer.getFullName());" in shop_impl
        assert "ps.setBoolean(2, customer.getIsActive());" in shop_impl
        assert (
            "ps.setTimestamp(3, new java.sql.Timestamp(customer.getCreatedAt().getTime()));"
            in shop_impl
        )
        assert "ps.setInt(4, customer.getCustomerId());" in shop_impl
        assert 'c.setCreatedAt(rs.getTimestamp("created_at"));' in shop_impl

    def test_accessors_per_type(self, shop_impl: str):
        assert "ps.setDouble(1, orderitem.getPrice());" in shop_impl
        assert "ps.setInt(2, orderitem.getQuantity());" in shop_impl
        assert "ps.setFloat(3, orderitem.getWeight());" in shop_impl
        assert "ps.setLong(4, orderitem.getTotalCents());" in shop_impl
        assert "ps.setString(5, orderitem.getNote());" in shop_impl

    def test_table_without_key(self, shop_impl: str):
        assert "jdbcTemplate.update(new StatusCreator(status));" in shop_impl
        assert (
            'PreparedStatement ps = connection.prepareStatement('
            '"INSERT INTO status (code, label) VALUES (?, ?)");'
        ) in shop_impl
        assert (
            'throw new UnsupportedOperationException("Table status has no autoincrement key");'
            in shop_impl
        )
        assert "StatusUpdater" not in shop_impl
        assert "getStatusById" not in shop_impl


    @pytest.mark.parametrize("key_type", ["DATETIME", "TINYINT"])
    def test_no_write_back_for_unconvertible_key(self, layout: PackageLayout, key_type: str):
        schema = introspect(StaticSchemaProvider({
            "event": [
                RawColumn(name="stamp", sql_type_name=key_type, is_auto_increment=True),
                RawColumn(name="label", sql_type_name="VARCHAR"),
            ],
        }))

        impl = "\n".join(render(DaoImplementationGenerator(layout), schema, spacing=0))

        assert "jdbcTemplate.update(new EventCreator(event));" in impl
        assert "KeyHolder keyHolder" not in impl
        assert "RETURN_GENERATED_KEYS" not in impl
        assert 'connection.prepareStatement("INSERT INTO event (label) VALUES (?)");' in impl
        assert "UPDATE event SET label=? WHERE stamp=?" in impl

    def test_long_key_write_back(self, layout: PackageLayout):
        schema = introspect(StaticSchemaProvider({
            "ledger": [
                RawColumn(name="entry_no", sql_type_name="BIGINT", is_auto_increment=True),
                RawColumn(name="amount", sql_type_name="DOUBLE"),
            ],
        }))

        impl = "\n".join(render(DaoImplementationGenerator(layout), schema, spacing=0))

        assert "ledger.setEntryNo(keyHolder.getKey().longValue());" in impl


class TestControllerGenerator:
    """Tests for ControllerGenerator."""

    def test_user_controller(self, layout: PackageLayout, user_schema: SchemaModel):
        lines = render(ControllerGenerator(layout), user_schema)

        assert lines[0] == "package shop.controller;"
        assert "import shop.dao.*;" in lines
        assert lines[-12:] == [
            "@RestController",
            '@RequestMapping("/shop")',
            "public class ShopController {",
            "  @Autowired",
            "  private ShopDao shopDao;",
            "",
            '  @RequestMapping("users")',
            "  @ResponseBody",
            "  public List<User> getUsers() {",
            "    return shopDao.getUsers();",
            "  }",
            "}",
        ]

    def test_endpoint_paths(self, layout: PackageLayout, shop_schema: SchemaModel):
        lines = render(ControllerGenerator(layout), shop_schema)

        assert '  @RequestMapping("customers")' in lines
        assert '  @RequestMapping("orderitems")' in lines
        assert '  @RequestMapping("status")' in lines
        assert "    return shopDao.getStatus();" in lines

    def test_path(self, layout: PackageLayout, user_schema: SchemaModel):
        (output,) = ControllerGenerator(layout).plan(user_schema)

        assert output.path == PurePath("shop/controller/ShopController.java")


class TestSpringJdbcFamily:
    """Tests for the family bundle."""

    def test_generator_order(self, layout: PackageLayout):
        generators = SpringJdbcFamily(layout).generators()

        assert [g.artifact for g in generators] == ["model", "dao", "dao_impl", "controller"]

    def test_generators_do_not_mutate_schema(self, layout: PackageLayout, shop_schema: SchemaModel):
        before = shop_schema.model_copy(deep=True)

        for generator in SpringJdbcFamily(layout).generators():
            render(generator, shop_schema)

        assert shop_schema == before
