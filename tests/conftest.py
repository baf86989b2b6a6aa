"""Root test configuration: environment isolation and SMTP fakes shared by every test"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolate_env(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory with no BRIEFMAIL_* env vars set."""
    for name in list(os.environ):
        if name.startswith("BRIEFMAIL_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


class FakeSMTP:
    """Records the SMTP conversation instead of opening a socket."""
    instances: list["FakeSMTP"] = []
    fail_on_send: Exception = None

    def __init__(self, host, port, timeout=None):
        self.host, self.port, self.timeout = host, port, timeout
        self.calls: list[str] = []
        self.sent: list[tuple] = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.calls.append("quit")
        return False

    def starttls(self):
        self.calls.append("starttls")

    def noop(self):
        self.calls.append("noop")
        return (250, b"OK")

    def login(self, user, password):
        self.calls.append(f"login:{user}")

    def send_message(self, msg, from_addr=None, to_addrs=None):
        if FakeSMTP.fail_on_send:
            raise FakeSMTP.fail_on_send
        self.calls.append("send")
        self.sent.append((msg, from_addr, to_addrs))

    def close(self):
        self.calls.append("close")


class FakeSMTPSSL(FakeSMTP):
    pass


@pytest.fixture(name="fake_smtp")
def fake_smtp_fixture(monkeypatch):
    """Patch smtplib.SMTP / SMTP_SSL with recorders; yields the FakeSMTP class."""
    import smtplib
    FakeSMTP.instances = []
    FakeSMTP.fail_on_send = None
    monkeypatch.setattr(smtplib, "SMTP", FakeSMTP)
    monkeypatch.setattr(smtplib, "SMTP_SSL", FakeSMTPSSL)
    yield FakeSMTP
    FakeSMTP.fail_on_send = None
