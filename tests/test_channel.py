import grpc
import pytest

from routes_client import channel as channel_module
from routes_client.channel import open_channel
from routes_client.config import ClientSettings


class FakeRawChannel:
    def __init__(self, target, credentials=None):
        self.target = target
        self.credentials = credentials
        self.closed = 0

    def close(self):
        self.closed += 1


@pytest.fixture
def recorder(monkeypatch):
    """Swaps the grpc channel constructors and the interceptor wrap for recorders."""
    opened = {"secure": [], "insecure": [], "wrapped": []}
    credentials = object()

    def secure_channel(target, creds):
        raw = FakeRawChannel(target, creds)
        opened["secure"].append(raw)
        return raw

    def insecure_channel(target):
        raw = FakeRawChannel(target)
        opened["insecure"].append(raw)
        return raw

    def intercept_channel(raw, api_key, field_mask):
        wrapped = ("wrapped", raw, api_key, field_mask)
        opened["wrapped"].append(wrapped)
        return wrapped

    monkeypatch.setattr(grpc, "secure_channel", secure_channel)
    monkeypatch.setattr(grpc, "insecure_channel", insecure_channel)
    monkeypatch.setattr(grpc, "ssl_channel_credentials", lambda: credentials)
    monkeypatch.setattr(channel_module, "intercept_channel", intercept_channel)
    opened["credentials"] = credentials
    return opened


def test_default_settings_open_a_tls_channel(recorder):
    settings = ClientSettings(api_key="key-1", field_mask="routes.duration")

    with open_channel(settings) as channel:
        assert not recorder["insecure"]
        raw = recorder["secure"][0]
        assert raw.target == "routes.googleapis.com:443"
        assert raw.credentials is recorder["credentials"]
        # callers get the wrapped channel, not the raw one
        assert channel == ("wrapped", raw, "key-1", "routes.duration")
        assert raw.closed == 0

    assert raw.closed == 1


def test_channel_is_closed_when_the_body_raises(recorder):
    settings = ClientSettings(api_key="key-1")

    with pytest.raises(RuntimeError):
        with open_channel(settings):
            raise RuntimeError("caller blew up")

    assert recorder["secure"][0].closed == 1


def test_explicit_credentials_win_over_the_default(recorder):
    custom = object()

    with open_channel(ClientSettings(api_key="k"), credentials=custom):
        pass

    assert recorder["secure"][0].credentials is custom


def test_plaintext_only_when_tls_is_off(recorder):
    settings = ClientSettings(api_key="k", host="127.0.0.1", port=50051, use_tls=False)

    with open_channel(settings):
        pass

    assert not recorder["secure"]
    assert recorder["insecure"][0].target == "127.0.0.1:50051"
    assert recorder["insecure"][0].closed == 1
