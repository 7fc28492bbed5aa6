from unittest.mock import MagicMock, patch

import pytest

import app
from employee_tracker.menu import MainMenu


class TestEntryPoint:
    """Startup wiring in app.main"""

    @pytest.fixture
    def patched(self):
        with patch('app.load_dotenv'), \
             patch('app.setup_logging'), \
             patch('app.signal.signal'), \
             patch('app.PostgreSQLConnectionPool') as pool_class, \
             patch('app.build_menu') as build_menu:
            yield pool_class.return_value, build_menu.return_value

    def test_connects_before_running_menu(self, patched):
        pool, menu = patched
        menu.run.side_effect = SystemExit(0)

        with pytest.raises(SystemExit) as exc_info:
            app.main()

        assert exc_info.value.code == 0
        pool.connect.assert_called_once()
        pool.close.assert_called_once()

    def test_ctrl_c_exits_cleanly(self, patched):
        pool, menu = patched
        menu.run.side_effect = KeyboardInterrupt

        with pytest.raises(SystemExit) as exc_info:
            app.main()

        assert exc_info.value.code == 0
        pool.log_pool_stats.assert_called_once()
        pool.close.assert_called_once()

    def test_malformed_port_exits_with_status_one(self, patched, monkeypatch):
        pool, menu = patched
        monkeypatch.setenv('DB_PORT', "not-a-port")

        with pytest.raises(SystemExit) as exc_info:
            app.main()

        assert exc_info.value.code == 1
        pool.connect.assert_not_called()
        menu.run.assert_not_called()

    def test_build_menu_wires_components(self, output_console):
        menu = app.build_menu(MagicMock(), output_console)

        assert isinstance(menu, MainMenu)
        assert menu.console is output_console
        assert menu.tracker.database.pool is not None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
