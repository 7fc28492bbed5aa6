import pytest

from employee_tracker.settings import DatabaseSettings

DB_VARIABLES = [
    'DB_USER', 'DB_PASSWORD', 'DB_NAME', 'DB_HOST', 'DB_PORT',
    'DB_MIN_CONNECTIONS', 'DB_MAX_CONNECTIONS',
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in DB_VARIABLES:
        monkeypatch.delenv(name, raising=False)


class TestDatabaseSettings:
    """Reading DB_* variables"""

    def test_defaults(self):
        settings = DatabaseSettings.from_env()

        assert settings.host == "localhost"
        assert settings.port == 5432
        assert settings.user is None
        assert settings.connection_params() == {
            'host': "localhost",
            'port': 5432,
            'client_encoding': "UTF8",
        }

    def test_credentials_and_overrides(self, monkeypatch):
        monkeypatch.setenv('DB_USER', "tracker")
        monkeypatch.setenv('DB_PASSWORD', "secret")
        monkeypatch.setenv('DB_NAME', "employees_db")
        monkeypatch.setenv('DB_HOST', "db.internal")
        monkeypatch.setenv('DB_PORT', "6543")
        monkeypatch.setenv('DB_MAX_CONNECTIONS', "2")

        settings = DatabaseSettings.from_env()
        params = settings.connection_params()

        assert params['user'] == "tracker"
        assert params['password'] == "secret"
        assert params['database'] == "employees_db"
        assert params['host'] == "db.internal"
        assert params['port'] == 6543
        assert settings.max_connections == 2

    def test_describe_hides_password(self, monkeypatch):
        monkeypatch.setenv('DB_PASSWORD', "secret")
        monkeypatch.setenv('DB_NAME', "employees_db")

        description = DatabaseSettings.from_env().describe()

        assert description == "employees_db@localhost:5432"
        assert "secret" not in description

    def test_invalid_port(self, monkeypatch):
        monkeypatch.setenv('DB_PORT', "postgres")

        with pytest.raises(ValueError, match="DB_PORT"):
            DatabaseSettings.from_env()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
