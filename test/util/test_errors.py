import unittest

from util.errors import (
    ConfigurationError,
    ConflictError,
    ExternalServiceError,
    InternalError,
    NotFoundError,
    ServiceError,
    ValidationError,
)


class ServiceErrorTest(unittest.TestCase):

    def test_to_log_string_without_cause(self):
        error = ServiceError("Something went wrong", error_code = 42, emoji = "🫖")

        self.assertEqual(error.to_log_string(), "[🫖 E42] Something went wrong")

    def test_to_log_string_with_cause(self):
        try:
            try:
                raise ValueError("root cause")
            except ValueError as cause:
                raise ServiceError("Something went wrong", error_code = 42, emoji = "🫖") from cause
        except ServiceError as error:
            self.assertEqual(error.to_log_string(), "[🫖 E42] Something went wrong # Caused by: root cause")

    def test_str_equals_to_log_string(self):
        error = ServiceError("Something went wrong", error_code = 42, emoji = "🫖")

        self.assertEqual(str(error), error.to_log_string())

    def test_message_is_plain(self):
        error = ServiceError("Something went wrong", error_code = 42, emoji = "🫖")

        self.assertEqual(error.message, "Something went wrong")

    def test_to_api_dict(self):
        error = ServiceError("Something went wrong", error_code = 42, emoji = "🫖")

        result = error.to_api_dict()

        self.assertEqual(result, {"error_code": 42, "message": "Something went wrong", "emoji": "🫖"})


class SubclassDefaultsTest(unittest.TestCase):

    def test_validation_error(self):
        error = ValidationError("msg", error_code = 1)

        self.assertEqual(error.http_status, 422)
        self.assertEqual(error.emoji, "✏️")

    def test_not_found_error(self):
        error = NotFoundError("msg", error_code = 1)

        self.assertEqual(error.http_status, 404)
        self.assertEqual(error.emoji, "🔍")

    def test_conflict_error(self):
        error = ConflictError("msg", error_code = 1)

        self.assertEqual(error.http_status, 409)
        self.assertEqual(error.emoji, "👯")

    def test_external_service_error(self):
        error = ExternalServiceError("msg", error_code = 1)

        self.assertEqual(error.http_status, 502)
        self.assertEqual(error.emoji, "🌐")

    def test_configuration_error(self):
        error = ConfigurationError("msg", error_code = 1)

        self.assertEqual(error.http_status, 500)
        self.assertEqual(error.emoji, "⚙️")

    def test_internal_error(self):
        error = InternalError("msg", error_code = 1)

        self.assertEqual(error.http_status, 500)
        self.assertEqual(error.emoji, "⚠️")

    def test_subclasses_are_service_errors(self):
        for error_type in [ValidationError, NotFoundError, ConflictError, ExternalServiceError]:
            self.assertIsInstance(error_type("msg", error_code = 1), ServiceError)
