from tests.fixtures.provider import ProviderStub, rate_limited

__all__ = ["ProviderStub", "rate_limited"]
