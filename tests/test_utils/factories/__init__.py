from tests.test_utils.factories.config import MessageDefaultsFactory

__all__ = ["MessageDefaultsFactory"]
