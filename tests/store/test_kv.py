"""Tests for gastos.store.kv."""

from pathlib import Path

from gastos.store.kv import safe_get_item, safe_remove_item, safe_set_item
from gastos.store.schema import init_database


class TestWithDatabase:
    """Tests against an initialized database."""

    def test_set_and_get(self, tmp_path: Path) -> None:
        """Should store and read back a value."""
        db_path = tmp_path / "gastos.db"
        init_database(db_path)

        safe_set_item("app.theme", "dark", db_path)

        assert safe_get_item("app.theme", db_path) == "dark"

    def test_overwrite(self, tmp_path: Path) -> None:
        """Should replace an existing value."""
        db_path = tmp_path / "gastos.db"
        init_database(db_path)

        safe_set_item("app.budget", "100.0", db_path)
        safe_set_item("app.budget", "200.0", db_path)

        assert safe_get_item("app.budget", db_path) == "200.0"

    def test_missing_key(self, tmp_path: Path) -> None:
        """Should return None for a key never written."""
        db_path = tmp_path / "gastos.db"
        init_database(db_path)

        assert safe_get_item("app.auth", db_path) is None

    def test_remove(self, tmp_path: Path) -> None:
        """Should delete a key, and ignore keys that are not set."""
        db_path = tmp_path / "gastos.db"
        init_database(db_path)
        safe_set_item("app.auth", "1", db_path)

        safe_remove_item("app.auth", db_path)
        safe_remove_item("app.never", db_path)

        assert safe_get_item("app.auth", db_path) is None

    def test_survives_reconnect(self, tmp_path: Path) -> None:
        """Should persist values in the database file."""
        db_path = tmp_path / "gastos.db"
        init_database(db_path)
        safe_set_item("app.theme", "light", db_path)

        # A second database proves values are not coming from memory
        other = tmp_path / "other.db"
        init_database(other)

        assert safe_get_item("app.theme", db_path) == "light"
        assert safe_get_item("app.theme", other) is None


class TestMemoryFallback:
    """Tests for the in-memory fallback."""

    def test_missing_database_falls_back_to_memory(self, tmp_path: Path) -> None:
        """Should keep working from memory when the database is missing."""
        db_path = tmp_path / "missing" / "gastos.db"

        safe_set_item("app.theme", "dark", db_path)

        assert safe_get_item("app.theme", db_path) == "dark"
        assert not db_path.exists()

    def test_does_not_create_database_file(self, tmp_path: Path) -> None:
        """Should not leave an empty database file behind."""
        db_path = tmp_path / "gastos.db"

        safe_set_item("app.theme", "dark", db_path)

        assert not db_path.exists()

    def test_remove_from_memory(self, tmp_path: Path) -> None:
        """Should remove keys from the fallback too."""
        db_path = tmp_path / "missing" / "gastos.db"
        safe_set_item("app.auth", "1", db_path)

        safe_remove_item("app.auth", db_path)

        assert safe_get_item("app.auth", db_path) is None

    def test_database_without_table(self, tmp_path: Path) -> None:
        """Should fall back when the file exists but has no kv table."""
        db_path = tmp_path / "gastos.db"
        db_path.write_bytes(b"")

        safe_set_item("app.budget", "50.0", db_path)

        assert safe_get_item("app.budget", db_path) == "50.0"

    def test_missing_key_in_memory(self, tmp_path: Path) -> None:
        """Should return None when neither store has the key."""
        assert safe_get_item("app.theme", tmp_path / "missing.db") is None
