from tests.fakes.fake_memorial_store import FakeMemorialStore

__all__ = ["FakeMemorialStore"]
