import pytest

from level_object_api import queries
from level_object_api.queries import InvalidVersionError


@pytest.mark.parametrize("version", ["0", "12", "v2_beta", "ABC_123", "_"])
def test_valid_versions_map_to_table_names(version):
    assert queries.table_name(version) == f"objects_v{version.lower()}"


def test_versions_are_case_insensitive():
    assert queries.validate_version("V2_Beta") == "v2_beta"
    assert queries.table_name("ABC") == queries.table_name("abc") == "objects_vabc"
    assert str(queries.select_all_sql("Lvl3")) == "SELECT * FROM objects_vlvl3"


@pytest.mark.parametrize(
    "version",
    [
        "",
        "1; DROP TABLE objects_v0",
        "1 2",
        "1--",
        "v1.2",
        "x" * (queries.MAX_VERSION_LENGTH + 1),
        "ü",
        None,
    ],
)
def test_unsafe_versions_are_rejected(version):
    with pytest.raises(InvalidVersionError):
        queries.validate_version(version)


def test_longest_allowed_version_fits_postgres_identifier_limit():
    version = "9" * queries.MAX_VERSION_LENGTH
    assert len(queries.table_name(version)) == 63


def test_every_builder_validates_version():
    builders = [
        queries.delete_all_sql,
        queries.select_all_sql,
        queries.select_by_id_sql,
        queries.first_id_sql,
        queries.row_count_sql,
        queries.insert_sql,
        queries.create_table_sql,
    ]
    for build in builders:
        with pytest.raises(InvalidVersionError):
            build("1;")


def test_select_by_id_binds_id_instead_of_interpolating():
    stmt = queries.select_by_id_sql("3")
    assert str(stmt) == "SELECT * FROM objects_v3 WHERE id = :id"
    assert list(stmt._bindparams) == ["id"]


def test_insert_binds_all_object_fields_in_order():
    stmt = queries.insert_sql("3")
    assert str(stmt) == (
        "INSERT INTO objects_v3 (object_type, position, rotation, scale, collider) "
        "VALUES (:object_type, :position, :rotation, :scale, :collider)"
    )
    assert list(stmt._bindparams) == list(queries.OBJECT_FIELDS)


def test_create_table_uses_dialect_specific_id_column():
    pg = str(queries.create_table_sql("1", "postgresql"))
    lite = str(queries.create_table_sql("1", "sqlite"))

    assert "CREATE TABLE IF NOT EXISTS objects_v1" in pg
    assert "id SERIAL PRIMARY KEY" in pg
    assert "id INTEGER PRIMARY KEY AUTOINCREMENT" in lite
    assert "collider TEXT NOT NULL" in lite


def test_create_table_rejects_unknown_dialect():
    with pytest.raises(ValueError, match="Unsupported dialect"):
        queries.create_table_sql("1", "oracle")


def test_count_and_first_id_shapes():
    assert str(queries.row_count_sql("7")) == "SELECT COUNT(*) AS row_count FROM objects_v7"
    assert str(queries.first_id_sql("7")) == "SELECT MIN(id) AS id FROM objects_v7"
    assert str(queries.delete_all_sql("7")) == "DELETE FROM objects_v7"
