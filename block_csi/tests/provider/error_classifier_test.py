import unittest

from block_csi.common.settings import ALREADY_ATTACHED_MESSAGE, ATTACHMENT_NOT_FOUND_MESSAGE
from block_csi.provider.error_classifier import classify_provider_error, ProviderErrorClass
from block_csi.tests.utils import get_provider_error


class TestClassifyProviderError(unittest.TestCase):

    def _test_classify(self, expected_class, status_code, details="error", desired_state_messages=()):
        error = get_provider_error(status_code=status_code, details=details)
        self.assertEqual(expected_class, classify_provider_error(error, desired_state_messages))

    def test_unprocessable_entity_with_desired_state(self):
        self._test_classify(ProviderErrorClass.ALREADY_IN_DESIRED_STATE, 422,
                            desired_state_messages=(ALREADY_ATTACHED_MESSAGE,))

    def test_unprocessable_entity_without_desired_state_is_permanent(self):
        self._test_classify(ProviderErrorClass.PERMANENT, 422)

    def test_already_attached_message_with_other_status(self):
        self._test_classify(ProviderErrorClass.ALREADY_IN_DESIRED_STATE, 400,
                            details="This volume is already attached",
                            desired_state_messages=(ALREADY_ATTACHED_MESSAGE,))

    def test_attachment_not_found_message_ignores_case(self):
        self._test_classify(ProviderErrorClass.ALREADY_IN_DESIRED_STATE, 409,
                            details="attachment not found",
                            desired_state_messages=(ATTACHMENT_NOT_FOUND_MESSAGE,))

    def test_attachment_not_found_message_without_desired_state_is_not_found(self):
        self._test_classify(ProviderErrorClass.NOT_FOUND, 409, details="Attachment not found")

    def test_not_found_status(self):
        self._test_classify(ProviderErrorClass.NOT_FOUND, 404,
                            details="The resource you were accessing could not be located.")

    def test_transient_statuses(self):
        for status_code in (429, 500, 503):
            self._test_classify(ProviderErrorClass.TRANSIENT, status_code)

    def test_no_response_is_transient(self):
        self._test_classify(ProviderErrorClass.TRANSIENT, None, details="already attached",
                            desired_state_messages=(ALREADY_ATTACHED_MESSAGE,))

    def test_permanent_statuses(self):
        for status_code in (400, 401, 403, 409):
            self._test_classify(ProviderErrorClass.PERMANENT, status_code)

    def test_unexpected_status_is_unknown(self):
        self._test_classify(ProviderErrorClass.UNKNOWN, 302)

    def test_other_exception_is_unknown(self):
        self.assertEqual(ProviderErrorClass.UNKNOWN, classify_provider_error(Exception("error")))
