import unittest
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from db.sql import initialize_db
from util.error_codes import DB_CONNECTION_FAILED
from util.errors import ConfigurationError


class SQLTest(unittest.TestCase):

    def test_initialize_db_in_memory(self):
        engine, session_factory = initialize_db("sqlite:///:memory:", multi_connection_setup = False)

        session = session_factory()
        try:
            self.assertEqual(session.get_bind(), engine)
        finally:
            session.close()

    @patch("db.sql.time.sleep")
    @patch("db.sql.create_engine")
    def test_initialize_db_gives_up_after_retries(self, mock_create_engine, mock_sleep):
        mock_create_engine.return_value.connect.side_effect = OperationalError("SELECT 1", {}, Exception("down"))

        with self.assertRaises(ConfigurationError) as context:
            initialize_db("postgresql://nowhere/sponsors", max_retries = 3, retry_interval_s = 0)

        self.assertEqual(context.exception.error_code, DB_CONNECTION_FAILED)
        self.assertEqual(mock_create_engine.call_count, 3)
        self.assertEqual(mock_sleep.call_count, 3)
