import pytest


class RecordingClient:
    """Stands in for the HTTP collaborator; remembers every get() call."""

    def __init__(self, response=None):
        self.calls = []
        self.response = response if response is not None else {"status": "OK"}

    def get(self, path, params):
        self.calls.append((path, params))
        return self.response

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def client():
    return RecordingClient()
